"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from body_journey.config import Settings
from body_journey.containers import AppContainer
from body_journey.services.analytics import AnalyticsRepository, AnalyticsService
from body_journey.services.progress import ProgressService
from body_journey.services.timeline import TimelineService


@dataclass
class InMemoryAnalyticsRepository(AnalyticsRepository):
    """In-memory analytics sink for tests."""

    events: list[tuple[str, dict[str, object]]] = field(default_factory=list)

    def create_event(self, event_type: str, payload: dict[str, object]) -> None:
        self.events.append((event_type, payload))


@pytest.fixture
def settings() -> Settings:
    return Settings(frequency_factor=1.0, analytics_enabled=True)


@pytest.fixture
def analytics_repository() -> InMemoryAnalyticsRepository:
    return InMemoryAnalyticsRepository()


@pytest.fixture
def container(
    settings: Settings, analytics_repository: InMemoryAnalyticsRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        timeline_service=TimelineService(frequency_factor=settings.frequency_factor),
        progress_service=ProgressService(),
        analytics_service=AnalyticsService(analytics_repository),
    )
