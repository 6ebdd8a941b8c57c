"""Checks run before a goal image is requested."""

from body_journey.domain.biometrics import BodyProfile, GoalSnapshot


class GoalValidationError(ValueError):
    """Raised when a generation request is incomplete or inconsistent."""


def validate_generation_request(profile: BodyProfile, goal: GoalSnapshot) -> None:
    """Raise GoalValidationError if the request cannot be visualized."""
    if goal.goal_weight_kg <= 0:
        raise GoalValidationError("Goal weight must be greater than 0.")
    if profile.age_years <= 0 or not profile.gender.strip():
        raise GoalValidationError("Age and gender are required.")
    if goal.goal_body_fat_kg and goal.goal_body_fat_kg > goal.goal_weight_kg:
        raise GoalValidationError("Goal fat mass cannot exceed goal weight.")
