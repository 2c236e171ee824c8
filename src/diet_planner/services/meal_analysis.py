"""Meal analysis: AI ingredient extraction merged with nutrition lookups."""

import asyncio
import logging
from dataclasses import dataclass

from diet_planner.domain.errors import NotFoundError
from diet_planner.domain.nutrition import (
    FoodItem,
    FoodItemsExtract,
    IngredientCalories,
    MealNutritionExtract,
    NutritionResult,
)
from diet_planner.services.generation import GenerationService
from diet_planner.services.nutrition import BASE_PORTION_GRAMS, NutritionLookup
from diet_planner.services.prompts import meal_items_prompt, meal_nutrition_prompt

MEAL_ITEMS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "foodItems": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "estimatedPortion": {"type": "string"},
                },
                "required": ["name", "estimatedPortion"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["foodItems"],
    "additionalProperties": False,
}

MEAL_NUTRITION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "totalCalories": {"type": "number"},
        "carbohydrates": {"type": "number"},
        "protein": {"type": "number"},
        "fat": {"type": "number"},
        "ingredients": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "calories": {"type": "number"},
                },
                "required": ["name", "calories"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["totalCalories", "carbohydrates", "protein", "fat", "ingredients"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


@dataclass
class MealNutritionService:
    """Analyzes free-text meal descriptions.

    The provider only names the ingredients; calories and macros always come
    from the nutrition lookup, each ingredient assumed to be a 100 g portion.
    """

    generation: GenerationService
    lookup: NutritionLookup
    portion_grams: float = BASE_PORTION_GRAMS

    async def analyze(self, description: str, locale: str) -> NutritionResult:
        """Return the nutrition totals of a described meal."""
        extract = await self.generation.generate(
            prompt=meal_nutrition_prompt(description, locale),
            schema=MEAL_NUTRITION_SCHEMA,
            schema_name="meal_nutrition",
            output_model=MealNutritionExtract,
        )
        names = [ingredient.name for ingredient in extract.ingredients or []]
        items = await self._lookup_all(names, locale)
        result = summarize(items)
        _logger.info(
            "Meal analyzed: locale=%s ingredients=%s calories=%.0f",
            locale,
            len(items),
            result.total_calories,
        )
        return result

    async def extract_food_items(self, description: str) -> FoodItemsExtract:
        """Return the food items and estimated portions of a meal."""
        return await self.generation.generate(
            prompt=meal_items_prompt(description),
            schema=MEAL_ITEMS_SCHEMA,
            schema_name="meal_items",
            output_model=FoodItemsExtract,
        )

    async def _lookup_all(self, names: list[str], locale: str) -> list[FoodItem]:
        # A failed lookup cancels the rest and surfaces as itself.
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._lookup(name, locale)) for name in names
                ]
        except ExceptionGroup as errors:
            raise errors.exceptions[0] from None
        return [task.result() for task in tasks]

    async def _lookup(self, name: str, locale: str) -> FoodItem:
        try:
            return await self.lookup.lookup(name, self.portion_grams, locale)
        except NotFoundError:
            _logger.warning("No nutrition data for %r, counting it as zero", name)
            return FoodItem.zero(name)


def summarize(items: list[FoodItem]) -> NutritionResult:
    """Sum looked-up items into meal totals, keeping their order."""
    return NutritionResult(
        total_calories=sum(item.calories for item in items),
        carbohydrates=sum(item.carbohydrates for item in items),
        protein=sum(item.protein for item in items),
        fat=sum(item.fat for item in items),
        ingredients=[
            IngredientCalories(name=item.name, calories=item.calories)
            for item in items
        ],
    )
