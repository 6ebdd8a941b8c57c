"""Progress statistics shown alongside the before/after comparison."""

from dataclasses import dataclass

from body_journey.domain.biometrics import BiometricSnapshot, BodyProfile, GoalSnapshot
from body_journey.domain.progress import ProgressSummary


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Return body mass index, or 0 when either input is missing."""
    if weight_kg == 0 or height_cm == 0:
        return 0.0
    return weight_kg / ((height_cm / 100) ** 2)


def format_signed(value: float) -> str:
    """Format a delta with one decimal and an explicit plus sign."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}"


def goal_body_fat_percent(goal: GoalSnapshot) -> float | None:
    """Return goal fat mass as a percentage of goal weight, if provided."""
    if not goal.goal_body_fat_kg or goal.goal_weight_kg <= 0:
        return None
    return goal.goal_body_fat_kg / goal.goal_weight_kg * 100


@dataclass
class ProgressService:
    """Service computing motivational statistics."""

    def summarize(
        self, current: BiometricSnapshot, goal: GoalSnapshot, profile: BodyProfile
    ) -> ProgressSummary | None:
        """Return progress deltas, or None without weights and height."""
        if (
            current.weight_kg <= 0
            or goal.goal_weight_kg <= 0
            or profile.height_cm <= 0
        ):
            return None

        fat_change_kg = None
        if current.body_fat_kg > 0 and goal.goal_body_fat_kg > 0:
            fat_change_kg = goal.goal_body_fat_kg - current.body_fat_kg
        muscle_change_kg = None
        if current.muscle_mass_kg > 0 and goal.goal_muscle_mass_kg > 0:
            muscle_change_kg = goal.goal_muscle_mass_kg - current.muscle_mass_kg

        current_bmi = calculate_bmi(current.weight_kg, profile.height_cm)
        goal_bmi = calculate_bmi(goal.goal_weight_kg, profile.height_cm)
        return ProgressSummary(
            weight_change_kg=goal.goal_weight_kg - current.weight_kg,
            fat_change_kg=fat_change_kg,
            muscle_change_kg=muscle_change_kg,
            current_bmi=current_bmi,
            goal_bmi=goal_bmi,
            bmi_change=goal_bmi - current_bmi,
            goal_body_fat_percent=goal_body_fat_percent(goal),
        )
