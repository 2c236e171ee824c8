"""Models for generated meal plans."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MEAL_SLOTS = (
    "breakfast",
    "morning_snack",
    "lunch",
    "afternoon_snack",
    "dinner",
    "evening_snack",
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Macronutrients(_CamelModel):
    """Macronutrient grams."""

    carbohydrates: float
    protein: float
    fat: float


class Meal(_CamelModel):
    """Details of a single suggested meal."""

    dish_name: str
    description: str
    portion_size: str
    total_calories: float
    macronutrients: Macronutrients
    ingredients: str
    substitution_suggestions: str | None = None


class DailyMealPlan(_CamelModel):
    """Meal plan for one calendar day."""

    date: str
    day_of_week: str
    breakfast: Meal
    morning_snack: Meal | None = None
    lunch: Meal
    afternoon_snack: Meal | None = None
    dinner: Meal
    evening_snack: Meal | None = None
    daily_total_calories: float
    daily_macronutrients: Macronutrients

    def meals(self) -> list[tuple[str, Meal]]:
        """Return the filled meal slots in serving order."""
        slots = ((slot, getattr(self, slot)) for slot in MEAL_SLOTS)
        return [(slot, meal) for slot, meal in slots if meal is not None]


class MacroBreakdown(_CamelModel):
    """Percentage of daily calories per macronutrient."""

    carbs: float
    protein: float
    fats: float


class RecommendationResult(_CamelModel):
    """Structured output of the recommendation prompt."""

    bmi: float
    ideal_weight_range: str
    bmi_interpretation: str
    recommended_daily_calories: float
    macro_breakdown: MacroBreakdown
    meal_plan: list[DailyMealPlan] = Field(default_factory=list)
    water_intake_recommendation: str
    activity_tip: str | None = None
    nutrient_advice: str | None = None
    general_tips: str | None = None

    def dish_names(self) -> list[str]:
        """Return every dish name across the plan, in order."""
        return [meal.dish_name for day in self.meal_plan for _, meal in day.meals()]
