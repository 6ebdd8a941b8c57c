"""Anonymous usage analytics."""

import logging
from dataclasses import dataclass
from typing import Protocol

from body_journey.domain.biometrics import BiometricSnapshot, BodyProfile, GoalSnapshot

logger = logging.getLogger(__name__)

GENERATION_EVENT = "generation"


class AnalyticsRepository(Protocol):
    """Sink interface for analytics events."""

    def create_event(self, event_type: str, payload: dict[str, object]) -> None:
        """Store an analytics event."""


@dataclass
class AnalyticsService:
    """Service for recording analytics events without failing the caller."""

    repository: AnalyticsRepository | None = None

    def record_generation(
        self, current: BiometricSnapshot, goal: GoalSnapshot, profile: BodyProfile
    ) -> None:
        """Record that a goal image was requested."""
        if self.repository is None:
            return
        payload: dict[str, object] = {
            "user": {
                "height": profile.height_cm,
                "weight": current.weight_kg,
                "body_fat": current.body_fat_kg,
                "muscle_mass": current.muscle_mass_kg,
                "gender": profile.gender or "unknown",
                "age": profile.age_years,
            },
            "goal": {
                "goal_weight": goal.goal_weight_kg,
                "goal_body_fat": goal.goal_body_fat_kg,
                "goal_muscle_mass": goal.goal_muscle_mass_kg,
            },
        }
        try:
            self.repository.create_event(GENERATION_EVENT, payload)
        except Exception:
            logger.exception("Failed to record analytics event")
