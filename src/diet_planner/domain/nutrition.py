"""Nutrition domain models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for 100 g of a food."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class FoodSummary:
    """Summary information about a food from FDC."""

    fdc_id: int
    description: str
    data_type: str | None


@dataclass(frozen=True)
class FoodDetails:
    """Full food details with per-100 g macros."""

    summary: FoodSummary
    macros: MacroProfile


@dataclass(frozen=True)
class FoodItem:
    """Nutrition estimate for one food at a given portion."""

    name: str
    calories: float
    carbohydrates: float
    protein: float
    fat: float

    @classmethod
    def zero(cls, name: str) -> "FoodItem":
        """Return an all-zero estimate for a food with no data."""
        return cls(name=name, calories=0.0, carbohydrates=0.0, protein=0.0, fat=0.0)


class IngredientCalories(BaseModel):
    """Calories attributed to one ingredient of a meal."""

    name: str
    calories: float


class NutritionResult(BaseModel):
    """Aggregated nutrition of an analyzed meal."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_calories: float
    carbohydrates: float
    protein: float
    fat: float
    ingredients: list[IngredientCalories] = Field(default_factory=list)


class MealNutritionExtract(BaseModel):
    """Structured output of the meal-nutrition prompt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_calories: float | None = None
    carbohydrates: float | None = None
    protein: float | None = None
    fat: float | None = None
    ingredients: list[IngredientCalories] | None = None


class ExtractedFoodItem(BaseModel):
    """Food item named in a meal description."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    estimated_portion: str


class FoodItemsExtract(BaseModel):
    """Structured output of the meal-item extraction prompt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    food_items: list[ExtractedFoodItem]


class FoodNameTranslation(BaseModel):
    """Structured output of the food-name translation prompt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    english_name: str
