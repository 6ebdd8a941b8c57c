"""Pydantic models for the HTTP API."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from body_journey.domain.biometrics import (
    BiometricSnapshot,
    BodyProfile,
    GoalSnapshot,
    TimeframeEstimate,
)
from body_journey.domain.progress import ProgressSummary
from body_journey.services.progress import format_signed

MAX_MASS_KG = 1000
MAX_HEIGHT_CM = 300
MAX_AGE_YEARS = 150


class _NullableFieldsModel(BaseModel):
    @field_validator("*", mode="before")
    @classmethod
    def _none_is_default(cls, value: object, info: ValidationInfo) -> object:
        # Missing values are stored as the field default (0 or "").
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].default
        return value


class CurrentPayload(_NullableFieldsModel):
    """Current biometric measurements in kilograms."""

    weight: float = Field(default=0, ge=0, le=MAX_MASS_KG)
    body_fat: float = Field(default=0, ge=0, le=MAX_MASS_KG)
    muscle_mass: float = Field(default=0, ge=0, le=MAX_MASS_KG)

    def to_domain(self) -> BiometricSnapshot:
        return BiometricSnapshot(
            weight_kg=self.weight,
            body_fat_kg=self.body_fat,
            muscle_mass_kg=self.muscle_mass,
        )


class GoalPayload(_NullableFieldsModel):
    """Goal measurements in kilograms."""

    goal_weight: float = Field(default=0, ge=0, le=MAX_MASS_KG)
    goal_body_fat: float = Field(default=0, ge=0, le=MAX_MASS_KG)
    goal_muscle_mass: float = Field(default=0, ge=0, le=MAX_MASS_KG)

    def to_domain(self) -> GoalSnapshot:
        return GoalSnapshot(
            goal_weight_kg=self.goal_weight,
            goal_body_fat_kg=self.goal_body_fat,
            goal_muscle_mass_kg=self.goal_muscle_mass,
        )


class ProfilePayload(_NullableFieldsModel):
    """Height in centimeters, age in years."""

    height: float = Field(default=0, ge=0, le=MAX_HEIGHT_CM)
    age: int = Field(default=0, ge=0, le=MAX_AGE_YEARS)
    gender: str = ""

    def to_domain(self) -> BodyProfile:
        return BodyProfile(
            height_cm=self.height, age_years=self.age, gender=self.gender
        )


class TimelineRequest(BaseModel):
    """Request body for timeline estimates."""

    current: CurrentPayload
    goal: GoalPayload


class ProgressRequest(BaseModel):
    """Request body for progress statistics and generation events."""

    current: CurrentPayload
    goal: GoalPayload
    profile: ProfilePayload = Field(default_factory=ProfilePayload)


class TimeframeResponse(BaseModel):
    """Timeline estimate returned to the client."""

    min_weeks: int
    max_weeks: int
    min_months: int
    max_months: int
    display: str
    model: str

    @classmethod
    def from_domain(cls, estimate: TimeframeEstimate) -> "TimeframeResponse":
        return cls(
            min_weeks=estimate.min_weeks,
            max_weeks=estimate.max_weeks,
            min_months=estimate.min_months,
            max_months=estimate.max_months,
            display=estimate.display,
            model=estimate.model,
        )


class ProgressResponse(BaseModel):
    """Progress statistics with display strings for the result cards."""

    weight_change_kg: float
    weight_change: str
    fat_change_kg: float | None
    fat_change: str | None
    muscle_change_kg: float | None
    muscle_change: str | None
    current_bmi: float
    goal_bmi: float
    bmi_change: float
    bmi_change_display: str
    goal_body_fat_percent: float | None

    @classmethod
    def from_domain(cls, summary: ProgressSummary) -> "ProgressResponse":
        return cls(
            weight_change_kg=summary.weight_change_kg,
            weight_change=f"{format_signed(summary.weight_change_kg)} kg",
            fat_change_kg=summary.fat_change_kg,
            fat_change=_format_optional_kg(summary.fat_change_kg),
            muscle_change_kg=summary.muscle_change_kg,
            muscle_change=_format_optional_kg(summary.muscle_change_kg),
            current_bmi=summary.current_bmi,
            goal_bmi=summary.goal_bmi,
            bmi_change=summary.bmi_change,
            bmi_change_display=format_signed(summary.bmi_change),
            goal_body_fat_percent=summary.goal_body_fat_percent,
        )


def _format_optional_kg(value: float | None) -> str | None:
    if value is None:
        return None
    return f"{format_signed(value)} kg"
