"""Dependency container wiring."""

from dataclasses import dataclass

from body_journey.adapters.logging_analytics_repository import (
    LoggingAnalyticsRepository,
)
from body_journey.config import Settings
from body_journey.services.analytics import AnalyticsService
from body_journey.services.progress import ProgressService
from body_journey.services.timeline import TimelineService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    timeline_service: TimelineService
    progress_service: ProgressService
    analytics_service: AnalyticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    analytics_repository = (
        LoggingAnalyticsRepository() if resolved_settings.analytics_enabled else None
    )
    return AppContainer(
        settings=resolved_settings,
        timeline_service=TimelineService(
            frequency_factor=resolved_settings.frequency_factor
        ),
        progress_service=ProgressService(),
        analytics_service=AnalyticsService(analytics_repository),
    )
