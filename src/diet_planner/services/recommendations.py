"""Personalized meal plan generation."""

import logging
from collections import Counter
from dataclasses import dataclass, field

from diet_planner.domain.errors import EmptyPlanError
from diet_planner.domain.health import HealthMetrics
from diet_planner.domain.profile import UserProfile
from diet_planner.domain.recommendations import RecommendationResult
from diet_planner.services.generation import GenerationService
from diet_planner.services.health import compute
from diet_planner.services.prompts import recommendation_prompt


def _nullable(schema: dict[str, object]) -> dict[str, object]:
    return {"anyOf": [schema, {"type": "null"}]}


def _strict_object(properties: dict[str, object]) -> dict[str, object]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


_MACROS_SCHEMA = _strict_object(
    {
        "carbohydrates": {"type": "number"},
        "protein": {"type": "number"},
        "fat": {"type": "number"},
    }
)

_MEAL_SCHEMA = _strict_object(
    {
        "dishName": {"type": "string"},
        "description": {"type": "string"},
        "portionSize": {"type": "string"},
        "totalCalories": {"type": "number"},
        "macronutrients": _MACROS_SCHEMA,
        "ingredients": {"type": "string"},
        "substitutionSuggestions": _nullable({"type": "string"}),
    }
)

_DAY_SCHEMA = _strict_object(
    {
        "date": {"type": "string"},
        "dayOfWeek": {"type": "string"},
        "breakfast": _MEAL_SCHEMA,
        "morningSnack": _nullable(_MEAL_SCHEMA),
        "lunch": _MEAL_SCHEMA,
        "afternoonSnack": _nullable(_MEAL_SCHEMA),
        "dinner": _MEAL_SCHEMA,
        "eveningSnack": _nullable(_MEAL_SCHEMA),
        "dailyTotalCalories": {"type": "number"},
        "dailyMacronutrients": _MACROS_SCHEMA,
    }
)

RECOMMENDATION_SCHEMA: dict[str, object] = _strict_object(
    {
        "bmi": {"type": "number"},
        "idealWeightRange": {"type": "string"},
        "bmiInterpretation": {"type": "string"},
        "recommendedDailyCalories": {"type": "number"},
        "macroBreakdown": _strict_object(
            {
                "carbs": {"type": "number"},
                "protein": {"type": "number"},
                "fats": {"type": "number"},
            }
        ),
        "mealPlan": {"type": "array", "items": _DAY_SCHEMA},
        "waterIntakeRecommendation": {"type": "string"},
        "activityTip": _nullable({"type": "string"}),
        "nutrientAdvice": _nullable({"type": "string"}),
        "generalTips": _nullable({"type": "string"}),
    }
)

PLAN_LENGTH_MISMATCH = "plan_length_mismatch"
DUPLICATE_DISHES = "duplicate_dishes"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanWarning:
    """Non-fatal problem found in a generated plan."""

    kind: str
    message: str


@dataclass(frozen=True)
class GeneratedPlan:
    """Provider plan together with the metrics that seeded it."""

    result: RecommendationResult
    metrics: HealthMetrics
    warnings: list[PlanWarning] = field(default_factory=list)


@dataclass
class RecommendationService:
    """Generates daily or weekly meal plans for a profile."""

    generation: GenerationService

    async def generate_plan(self, profile: UserProfile) -> GeneratedPlan:
        """Generate a plan; the provider's object is returned unmodified."""
        metrics = compute(profile)
        _logger.info(
            "Generating %s plan: start=%s locale=%s target=%.0f kcal",
            profile.plan_type,
            profile.start_date.isoformat(),
            profile.locale,
            metrics.recommended_daily_calories,
        )
        result = await self.generation.generate(
            prompt=recommendation_prompt(profile, metrics),
            schema=RECOMMENDATION_SCHEMA,
            schema_name="recommendation",
            output_model=RecommendationResult,
        )
        if not result.meal_plan:
            _logger.error("AI output is missing the meal plan or it is empty")
            raise EmptyPlanError("AI model failed to generate a meal plan.")

        warnings = check_plan(result, profile)
        for warning in warnings:
            _logger.warning(warning.message)
        return GeneratedPlan(result=result, metrics=metrics, warnings=warnings)


def check_plan(result: RecommendationResult, profile: UserProfile) -> list[PlanWarning]:
    """Return soft validation warnings for a generated plan."""
    warnings: list[PlanWarning] = []
    expected = profile.plan_days()
    received = len(result.meal_plan)
    if received != expected:
        warnings.append(
            PlanWarning(
                kind=PLAN_LENGTH_MISMATCH,
                message=(
                    f"Requested a {profile.plan_type} plan ({expected} days) "
                    f"but received {received} days."
                ),
            )
        )
    if received > 1:
        counts = Counter(name.strip().lower() for name in result.dish_names())
        repeated = sorted(name for name, count in counts.items() if count > 1)
        if repeated:
            warnings.append(
                PlanWarning(
                    kind=DUPLICATE_DISHES,
                    message=f"Plan repeats dishes: {', '.join(repeated)}",
                )
            )
    return warnings
