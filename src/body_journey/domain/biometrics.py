"""Biometric domain models.

Masses are absolute kilograms, never percentages. A value of ``0`` in an
optional field means the user did not provide it.
"""

import math
import sys
from dataclasses import dataclass

WEEKS_PER_MONTH = 4.33
MAX_WEEKS = sys.maxsize


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def whole_weeks(value: float) -> int:
    """Round a week count, saturating at MAX_WEEKS when it overflows."""
    if not math.isfinite(value) or value >= MAX_WEEKS:
        return MAX_WEEKS
    return round_half_up(value)


@dataclass(frozen=True)
class BiometricSnapshot:
    """Current measured body state."""

    weight_kg: float
    body_fat_kg: float = 0.0
    muscle_mass_kg: float = 0.0


@dataclass(frozen=True)
class GoalSnapshot:
    """Target body state."""

    goal_weight_kg: float
    goal_body_fat_kg: float = 0.0
    goal_muscle_mass_kg: float = 0.0


@dataclass(frozen=True)
class BodyProfile:
    """Descriptive attributes used for statistics and validation."""

    height_cm: float = 0.0
    age_years: int = 0
    gender: str = ""


@dataclass(frozen=True)
class RateBand:
    """Sustainable weekly rate of change, in kg per week."""

    min_kg_per_week: float
    max_kg_per_week: float

    def scaled(self, factor: float) -> "RateBand":
        """Return the band with both ends multiplied by ``factor``."""
        return RateBand(
            min_kg_per_week=self.min_kg_per_week * factor,
            max_kg_per_week=self.max_kg_per_week * factor,
        )

    def weeks_for(self, change_kg: float) -> tuple[float, float]:
        """Return (fastest, slowest) weeks needed for a change."""
        if change_kg <= 0:
            return 0.0, 0.0
        return change_kg / self.max_kg_per_week, change_kg / self.min_kg_per_week


@dataclass(frozen=True)
class TimeframeEstimate:
    """Projected range of weeks to reach a goal."""

    min_weeks: int
    max_weeks: int
    model: str

    @property
    def min_months(self) -> int:
        return max(1, round_half_up(self.min_weeks / WEEKS_PER_MONTH))

    @property
    def max_months(self) -> int:
        return max(1, round_half_up(self.max_weeks / WEEKS_PER_MONTH))

    @property
    def display(self) -> str:
        """Human-readable month range, collapsed when both ends match."""
        if self.min_months == self.max_months:
            return f"{self.max_months} months"
        return f"{self.min_months}–{self.max_months} months"
