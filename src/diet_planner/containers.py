"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_planner.adapters.fdc_client import HttpxFdcClient
from diet_planner.adapters.json_profile_store import JsonFileProfileStore
from diet_planner.adapters.openai_generation_client import OpenAIGenerationClient
from diet_planner.adapters.supabase_profile_store import SupabaseProfileStore
from diet_planner.config import Settings
from diet_planner.services.cache import InMemoryCache
from diet_planner.services.generation import GenerationService
from diet_planner.services.meal_analysis import MealNutritionService
from diet_planner.services.nutrition import (
    FdcNutritionLookup,
    FoodNameTranslator,
    NutritionLookup,
    StubNutritionLookup,
)
from diet_planner.services.profiles import ProfileService, ProfileStore
from diet_planner.services.recommendations import RecommendationService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_lookup: NutritionLookup
    meal_nutrition_service: MealNutritionService
    recommendation_service: RecommendationService
    profile_service: ProfileService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = OpenAIGenerationClient.create(resolved_settings.openai_api_key)
    generation = GenerationService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    fdc_client: HttpxFdcClient | None = None
    nutrition_lookup: NutritionLookup
    if resolved_settings.fdc_api_key:
        fdc_client = HttpxFdcClient.create(
            api_key=resolved_settings.fdc_api_key,
            base_url=resolved_settings.fdc_base_url,
        )
        cache = InMemoryCache()
        nutrition_lookup = FdcNutritionLookup(
            fdc_client=fdc_client,
            cache=cache,
            translator=FoodNameTranslator(generation=generation, cache=cache),
        )
    else:
        nutrition_lookup = StubNutritionLookup()

    profile_store: ProfileStore
    if resolved_settings.supabase_url and resolved_settings.supabase_service_key:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        profile_store = SupabaseProfileStore(supabase_client)
    else:
        profile_store = JsonFileProfileStore(resolved_settings.profile_store_path)

    async def close_resources() -> None:
        await openai_client.close()
        if fdc_client is not None:
            await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_lookup=nutrition_lookup,
        meal_nutrition_service=MealNutritionService(
            generation=generation, lookup=nutrition_lookup
        ),
        recommendation_service=RecommendationService(generation=generation),
        profile_service=ProfileService(profile_store),
        close_resources=close_resources,
    )
