"""Goal timeline estimation."""

import logging
import math
from dataclasses import dataclass

from body_journey.domain.biometrics import (
    BiometricSnapshot,
    GoalSnapshot,
    RateBand,
    TimeframeEstimate,
    whole_weeks,
)

logger = logging.getLogger(__name__)

FAT_LOSS_RATES = RateBand(min_kg_per_week=0.4, max_kg_per_week=0.8)
MUSCLE_GAIN_RATES = RateBand(min_kg_per_week=0.1, max_kg_per_week=0.25)
WEIGHT_GAIN_RATES = RateBand(min_kg_per_week=0.2, max_kg_per_week=0.4)
WEIGHT_LOSS_MIN_RATE = 0.5
WEIGHT_LOSS_MAX_RATE = 1.0
WEIGHT_LOSS_BODY_FRACTION = 0.01
MAINTENANCE_WEEKS = (4, 8)

MODEL_COMPOSITION = "composition"
MODEL_WEIGHT_LOSS = "weight_loss"
MODEL_WEIGHT_GAIN = "weight_gain"
MODEL_MAINTENANCE = "maintenance"


def check_frequency_factor(frequency_factor: float) -> None:
    """Raise ValueError unless the factor is a finite positive number."""
    if not (math.isfinite(frequency_factor) and frequency_factor > 0):
        raise ValueError("frequency_factor must be a positive number")


def estimate_timeframe(
    current: BiometricSnapshot,
    goal: GoalSnapshot,
    frequency_factor: float = 1.0,
) -> TimeframeEstimate:
    """Estimate how many weeks it takes to get from ``current`` to ``goal``.

    Composition goals (fat to lose or muscle to gain) take precedence over
    the total-weight model. Fat loss and muscle gain are assumed to run
    concurrently, so the slower of the two bounds the estimate.

    Both weights must be positive; callers are expected to check this.
    Raises ValueError for a frequency factor that is not a positive number.
    """
    check_frequency_factor(frequency_factor)
    fat_change_kg = current.body_fat_kg - goal.goal_body_fat_kg
    muscle_change_kg = goal.goal_muscle_mass_kg - current.muscle_mass_kg

    if fat_change_kg > 0 or muscle_change_kg > 0:
        fat_weeks = FAT_LOSS_RATES.scaled(frequency_factor).weeks_for(fat_change_kg)
        muscle_weeks = MUSCLE_GAIN_RATES.scaled(frequency_factor).weeks_for(
            muscle_change_kg
        )
        estimate = _build_estimate(
            max(fat_weeks[0], muscle_weeks[0]),
            max(fat_weeks[1], muscle_weeks[1]),
            MODEL_COMPOSITION,
        )
        # A change too small to round to a week falls through to weight.
        if estimate.max_weeks > 0:
            return estimate

    weight_change_kg = current.weight_kg - goal.goal_weight_kg
    if weight_change_kg > 0:
        band = RateBand(
            min_kg_per_week=WEIGHT_LOSS_MIN_RATE,
            max_kg_per_week=min(
                WEIGHT_LOSS_MAX_RATE, current.weight_kg * WEIGHT_LOSS_BODY_FRACTION
            ),
        )
        min_weeks, max_weeks = band.weeks_for(weight_change_kg)
        return _build_estimate(min_weeks, max_weeks, MODEL_WEIGHT_LOSS)
    if weight_change_kg < 0:
        min_weeks, max_weeks = WEIGHT_GAIN_RATES.weeks_for(-weight_change_kg)
        return _build_estimate(min_weeks, max_weeks, MODEL_WEIGHT_GAIN)

    return TimeframeEstimate(
        min_weeks=MAINTENANCE_WEEKS[0],
        max_weeks=MAINTENANCE_WEEKS[1],
        model=MODEL_MAINTENANCE,
    )


def _build_estimate(
    min_weeks: float, max_weeks: float, model: str
) -> TimeframeEstimate:
    # Light bodies get a 1% cap below the loss floor, which inverts the band.
    low, high = sorted((whole_weeks(min_weeks), whole_weeks(max_weeks)))
    return TimeframeEstimate(min_weeks=low, max_weeks=high, model=model)


@dataclass
class TimelineService:
    """Service for goal timeline estimates."""

    frequency_factor: float = 1.0

    def __post_init__(self) -> None:
        check_frequency_factor(self.frequency_factor)

    def estimate(
        self, current: BiometricSnapshot, goal: GoalSnapshot
    ) -> TimeframeEstimate | None:
        """Return an estimate, or None when either weight is missing."""
        if current.weight_kg <= 0 or goal.goal_weight_kg <= 0:
            return None
        estimate = estimate_timeframe(current, goal, self.frequency_factor)
        logger.debug(
            "Estimated %s-%s weeks using %s model",
            estimate.min_weeks,
            estimate.max_weeks,
            estimate.model,
        )
        return estimate
