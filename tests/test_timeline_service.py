"""Tests for goal timeline estimation."""

import pytest

from body_journey.domain.biometrics import (
    MAX_WEEKS,
    BiometricSnapshot,
    GoalSnapshot,
    TimeframeEstimate,
)
from body_journey.services.timeline import TimelineService, estimate_timeframe


def test_weight_loss_only() -> None:
    estimate = estimate_timeframe(
        BiometricSnapshot(weight_kg=100), GoalSnapshot(goal_weight_kg=90)
    )

    assert (estimate.min_weeks, estimate.max_weeks) == (10, 20)
    assert (estimate.min_months, estimate.max_months) == (2, 5)
    assert estimate.display == "2–5 months"
    assert estimate.model == "weight_loss"


def test_weight_gain_only() -> None:
    estimate = estimate_timeframe(
        BiometricSnapshot(weight_kg=70), GoalSnapshot(goal_weight_kg=75)
    )

    assert (estimate.min_weeks, estimate.max_weeks) == (13, 25)
    assert estimate.model == "weight_gain"


def test_goal_already_met_returns_default_window() -> None:
    estimate = estimate_timeframe(
        BiometricSnapshot(weight_kg=80), GoalSnapshot(goal_weight_kg=80)
    )

    assert (estimate.min_weeks, estimate.max_weeks) == (4, 8)
    assert (estimate.min_months, estimate.max_months) == (1, 2)
    assert estimate.display == "1–2 months"


def test_composition_goal_takes_precedence_over_weight() -> None:
    current = BiometricSnapshot(weight_kg=80, body_fat_kg=20, muscle_mass_kg=30)
    goal = GoalSnapshot(goal_weight_kg=75, goal_body_fat_kg=12, goal_muscle_mass_kg=32)

    estimate = estimate_timeframe(current, goal)

    assert (estimate.min_weeks, estimate.max_weeks) == (10, 20)
    assert estimate.model == "composition"


def test_muscle_gain_alone_is_a_composition_goal() -> None:
    current = BiometricSnapshot(weight_kg=80, muscle_mass_kg=30)
    goal = GoalSnapshot(goal_weight_kg=80, goal_muscle_mass_kg=33)

    estimate = estimate_timeframe(current, goal)

    assert (estimate.min_weeks, estimate.max_weeks) == (12, 30)
    assert estimate.model == "composition"


def test_composition_better_than_goal_falls_back_to_weight() -> None:
    current = BiometricSnapshot(weight_kg=100, body_fat_kg=15, muscle_mass_kg=40)
    goal = GoalSnapshot(goal_weight_kg=90, goal_body_fat_kg=18, goal_muscle_mass_kg=35)

    estimate = estimate_timeframe(current, goal)

    assert (estimate.min_weeks, estimate.max_weeks) == (10, 20)
    assert estimate.model == "weight_loss"


def test_negligible_composition_change_falls_back_to_weight() -> None:
    current = BiometricSnapshot(weight_kg=90, body_fat_kg=25)
    goal = GoalSnapshot(goal_weight_kg=88, goal_body_fat_kg=24.9)

    estimate = estimate_timeframe(current, goal)

    assert estimate.model == "weight_loss"
    assert (estimate.min_weeks, estimate.max_weeks) == (2, 4)


def test_weight_loss_rate_is_capped_by_body_weight() -> None:
    estimate = estimate_timeframe(
        BiometricSnapshot(weight_kg=60), GoalSnapshot(goal_weight_kg=54)
    )

    # 6 kg at 0.6 kg/week at best, 0.5 kg/week at worst
    assert (estimate.min_weeks, estimate.max_weeks) == (10, 12)


def test_light_body_keeps_range_ordered() -> None:
    estimate = estimate_timeframe(
        BiometricSnapshot(weight_kg=40), GoalSnapshot(goal_weight_kg=38)
    )

    assert (estimate.min_weeks, estimate.max_weeks) == (4, 5)


def test_frequency_factor_scales_composition_rates() -> None:
    current = BiometricSnapshot(weight_kg=80, body_fat_kg=20)
    goal = GoalSnapshot(goal_weight_kg=80, goal_body_fat_kg=12)

    estimate = estimate_timeframe(current, goal, frequency_factor=2.0)

    assert (estimate.min_weeks, estimate.max_weeks) == (5, 10)


def test_large_change_has_no_upper_bound() -> None:
    estimate = estimate_timeframe(
        BiometricSnapshot(weight_kg=70), GoalSnapshot(goal_weight_kg=170)
    )

    assert estimate.max_weeks == 500


def test_single_month_display_collapses_range() -> None:
    estimate = TimeframeEstimate(min_weeks=1, max_weeks=2, model="weight_loss")

    assert (estimate.min_months, estimate.max_months) == (1, 1)
    assert estimate.display == "1 months"


@pytest.mark.parametrize(
    ("current", "goal"),
    [
        (BiometricSnapshot(weight_kg=100), GoalSnapshot(goal_weight_kg=99)),
        (BiometricSnapshot(weight_kg=55), GoalSnapshot(goal_weight_kg=56)),
        (
            BiometricSnapshot(weight_kg=90, body_fat_kg=25, muscle_mass_kg=35),
            GoalSnapshot(goal_weight_kg=88, goal_body_fat_kg=24.9),
        ),
        (BiometricSnapshot(weight_kg=45), GoalSnapshot(goal_weight_kg=30)),
        (
            BiometricSnapshot(weight_kg=80, muscle_mass_kg=30),
            GoalSnapshot(goal_weight_kg=80, goal_muscle_mass_kg=30.1),
        ),
    ],
)
def test_estimate_bounds_are_ordered(
    current: BiometricSnapshot, goal: GoalSnapshot
) -> None:
    estimate = estimate_timeframe(current, goal)

    assert estimate.max_weeks >= estimate.min_weeks >= 0
    assert estimate.max_months >= estimate.min_months >= 1
    assert estimate == estimate_timeframe(current, goal)


def test_service_returns_none_without_weights() -> None:
    service = TimelineService()

    assert service.estimate(BiometricSnapshot(weight_kg=0), GoalSnapshot(70)) is None
    assert service.estimate(BiometricSnapshot(weight_kg=70), GoalSnapshot(0)) is None


def test_service_uses_configured_frequency_factor() -> None:
    service = TimelineService(frequency_factor=0.5)
    current = BiometricSnapshot(weight_kg=80, body_fat_kg=20)
    goal = GoalSnapshot(goal_weight_kg=80, goal_body_fat_kg=16)

    estimate = service.estimate(current, goal)

    assert estimate is not None
    assert (estimate.min_weeks, estimate.max_weeks) == (10, 20)


def test_service_rejects_non_positive_frequency_factor() -> None:
    with pytest.raises(ValueError, match="frequency_factor"):
        TimelineService(frequency_factor=0)


@pytest.mark.parametrize("factor", [0, -1.0, float("nan"), float("inf")])
def test_service_rejects_invalid_frequency_factor(factor: float) -> None:
    with pytest.raises(ValueError, match="frequency_factor"):
        TimelineService(frequency_factor=factor)


@pytest.mark.parametrize("factor", [0, -1.0, float("nan")])
def test_estimate_rejects_invalid_frequency_factor(factor: float) -> None:
    current = BiometricSnapshot(weight_kg=80, body_fat_kg=20)
    goal = GoalSnapshot(goal_weight_kg=80, goal_body_fat_kg=12)

    with pytest.raises(ValueError, match="frequency_factor"):
        estimate_timeframe(current, goal, frequency_factor=factor)


def test_sub_week_muscle_gain_rounds_to_zero_min_weeks() -> None:
    current = BiometricSnapshot(weight_kg=80, muscle_mass_kg=30)
    goal = GoalSnapshot(goal_weight_kg=80, goal_muscle_mass_kg=30.1)

    estimate = estimate_timeframe(current, goal)

    assert estimate.model == "composition"
    assert (estimate.min_weeks, estimate.max_weeks) == (0, 1)
    assert (estimate.min_months, estimate.max_months) == (1, 1)
    assert estimate.display == "1 months"


def test_overflowing_change_saturates_instead_of_raising() -> None:
    estimate = estimate_timeframe(
        BiometricSnapshot(weight_kg=70), GoalSnapshot(goal_weight_kg=1e308)
    )

    assert estimate.model == "weight_gain"
    assert estimate.min_weeks == estimate.max_weeks == MAX_WEEKS
    assert estimate.max_months >= estimate.min_months >= 1
