"""Nutrition lookups: a fixed placeholder and a USDA FDC-backed source."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from diet_planner.adapters.fdc_client import FdcClient
from diet_planner.domain.errors import GenerationError, NotFoundError
from diet_planner.domain.nutrition import (
    FoodDetails,
    FoodItem,
    FoodNameTranslation,
    FoodSummary,
    MacroProfile,
)
from diet_planner.services.cache import Cache
from diet_planner.services.generation import GenerationService
from diet_planner.services.prompts import food_name_translation_prompt

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

# Energy is reported under 1008 for most foods, Atwater factors for Foundation.
_ENERGY_IDS = (1008, 2047, 2048)
_PROTEIN_ID = 1003
_FAT_ID = 1004
_CARBS_ID = 1005

BASE_PORTION_GRAMS = 100.0
LOOKUP_LOCALE = "en-US"

FOOD_NAME_TRANSLATION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {"englishName": {"type": "string"}},
    "required": ["englishName"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


class NutritionLookup(Protocol):
    """Source of per-food nutrition estimates."""

    async def lookup(
        self, food_name: str, portion_grams: float, locale: str = LOOKUP_LOCALE
    ) -> FoodItem:
        """Return nutrition for a portion of a food or raise NotFoundError."""


@dataclass
class StubNutritionLookup(NutritionLookup):
    """Placeholder lookup returning the same values for every food.

    The portion size and locale are accepted but not applied.
    """

    calories: float = 200.0
    carbohydrates: float = 20.0
    protein: float = 10.0
    fat: float = 5.0

    async def lookup(
        self, food_name: str, portion_grams: float, locale: str = LOOKUP_LOCALE
    ) -> FoodItem:
        """Return the fixed placeholder estimate."""
        return FoodItem(
            name=food_name,
            calories=self.calories,
            carbohydrates=self.carbohydrates,
            protein=self.protein,
            fat=self.fat,
        )


@dataclass
class FdcNutritionLookup(NutritionLookup):
    """Nutrition lookup backed by FoodData Central with caching."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    search_limit: int = 5
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    translator: "FoodNameTranslator | None" = None

    async def lookup(
        self, food_name: str, portion_grams: float, locale: str = LOOKUP_LOCALE
    ) -> FoodItem:
        """Find the best FDC match and scale its macros to the portion."""
        query = normalize_food_name(food_name)
        if not query:
            raise NotFoundError(food_name)
        if self.translator is not None:
            query = await self.translator.to_english(query, locale)
        matches = await self.search(query)
        if not matches:
            raise NotFoundError(food_name)
        details = await self.get_food(matches[0].fdc_id)
        return scale_macros(food_name, details.macros, portion_grams)

    async def search(self, query: str) -> list[FoodSummary]:
        """Search FDC foods with caching."""
        cache_key = f"fdc:search:{query}:{self.search_limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=self.search_limit),
            action=f"search:{query}",
        )
        foods = [
            FoodSummary(
                fdc_id=food["fdcId"],
                description=food.get("description", ""),
                data_type=food.get("dataType"),
            )
            for food in payload.get("foods", [])
        ]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.debug("FDC search: query=%s results=%s", query, len(foods))
        return foods

    async def get_food(self, fdc_id: int) -> FoodDetails:
        """Retrieve per-100 g macros for an FDC food."""
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodDetails):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        details = FoodDetails(
            summary=FoodSummary(
                fdc_id=payload["fdcId"],
                description=payload.get("description", ""),
                data_type=payload.get("dataType"),
            ),
            macros=_extract_macros(payload.get("foodNutrients", [])),
        )
        self.cache.set(cache_key, details, ttl_seconds=self.food_ttl_seconds)
        return details

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "FDC %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


@dataclass
class FoodNameTranslator:
    """Translates localized food names into the English names FDC indexes.

    English locales skip the provider. Translations are cached per locale, and a
    failed translation falls back to the original name.
    """

    generation: GenerationService
    cache: Cache
    ttl_seconds: int = 86400

    async def to_english(self, food_name: str, locale: str) -> str:
        """Return the normalized English name of a food."""
        query = normalize_food_name(food_name)
        if not query or is_english_locale(locale):
            return query

        cache_key = f"translation:{locale.lower()}:{query}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, str):
            return cached

        try:
            translation = await self.generation.generate(
                prompt=food_name_translation_prompt(query, locale),
                schema=FOOD_NAME_TRANSLATION_SCHEMA,
                schema_name="food_name_translation",
                output_model=FoodNameTranslation,
            )
        except GenerationError as exc:
            _logger.warning("Could not translate %r from %s: %s", query, locale, exc)
            return query

        english = normalize_food_name(translation.english_name) or query
        self.cache.set(cache_key, english, ttl_seconds=self.ttl_seconds)
        _logger.debug("Food name translated: %s -> %s (%s)", query, english, locale)
        return english


def is_english_locale(locale: str) -> bool:
    """Return True for English language tags such as en, en-US or en_gb."""
    return locale.replace("_", "-").split("-")[0].lower() == "en"

def normalize_food_name(food_name: str) -> str:
    """Lowercase and collapse whitespace so equivalent names share a cache key."""
    return " ".join(food_name.lower().split())


def scale_macros(name: str, macros: MacroProfile, portion_grams: float) -> FoodItem:
    """Scale per-100 g macros linearly to a portion."""
    ratio = portion_grams / BASE_PORTION_GRAMS
    return FoodItem(
        name=name,
        calories=macros.calories * ratio,
        carbohydrates=macros.carbs_g * ratio,
        protein=macros.protein_g * ratio,
        fat=macros.fat_g * ratio,
    )


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _extract_macros(food_nutrients: list[dict[str, object]]) -> MacroProfile:
    """Extract calories, protein, fat, carbs from FDC nutrients."""
    amounts: dict[int, float] = {}
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        amount = nutrient.get("amount")
        if isinstance(nutrient_id, int) and amount is not None:
            amounts.setdefault(nutrient_id, float(amount))

    calories = next(
        (amounts[energy_id] for energy_id in _ENERGY_IDS if energy_id in amounts),
        0.0,
    )
    return MacroProfile(
        calories=calories,
        protein_g=amounts.get(_PROTEIN_ID, 0.0),
        fat_g=amounts.get(_FAT_ID, 0.0),
        carbs_g=amounts.get(_CARBS_ID, 0.0),
    )
