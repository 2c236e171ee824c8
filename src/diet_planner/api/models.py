"""Request and response models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from diet_planner.domain.recommendations import RecommendationResult


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class MealDescriptionRequest(_ApiModel):
    """Free-text meal submitted for analysis."""

    description: str = Field(min_length=10, max_length=500)
    locale: str | None = None


class MacroPercentagesResponse(_ApiModel):
    carbs: int
    protein: int
    fats: int


class HealthMetricsResponse(_ApiModel):
    """Locally computed health numbers."""

    bmi: float
    ideal_weight_min: float
    ideal_weight_max: float
    ideal_weight_range: str
    bmi_interpretation: str
    bmr: float
    activity_factor: float
    tdee: float
    recommended_daily_calories: float
    macro_percentages: MacroPercentagesResponse


class PlanWarningResponse(_ApiModel):
    kind: str
    message: str


class RecommendationResponse(_ApiModel):
    """Generated plan plus the metrics it was seeded with."""

    result: RecommendationResult
    metrics: HealthMetricsResponse
    warnings: list[PlanWarningResponse]
