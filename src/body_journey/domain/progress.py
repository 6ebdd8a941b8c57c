"""Domain models for progress statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressSummary:
    """Deltas between the current state and the goal."""

    weight_change_kg: float
    fat_change_kg: float | None
    muscle_change_kg: float | None
    current_bmi: float
    goal_bmi: float
    bmi_change: float
    goal_body_fat_percent: float | None
