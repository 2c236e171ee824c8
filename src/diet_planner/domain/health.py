"""Deterministic health metrics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroPercentages:
    """Share of daily calories per macronutrient, in percent."""

    carbs: int
    protein: int
    fats: int


@dataclass(frozen=True)
class HealthMetrics:
    """Locally computed numbers used to seed plan generation."""

    bmi: float
    ideal_weight_min: float
    ideal_weight_max: float
    ideal_weight_range: str
    bmi_interpretation: str
    bmr: float
    activity_factor: float
    tdee: float
    recommended_daily_calories: float
    macro_percentages: MacroPercentages
