"""Tests for container wiring."""

import asyncio

from diet_planner.adapters.json_profile_store import JsonFileProfileStore
from diet_planner.containers import build_container
from diet_planner.services.nutrition import FdcNutritionLookup, StubNutritionLookup


def test_build_container_defaults_to_stub_and_file_store(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.nutrition_lookup, StubNutritionLookup)
    assert isinstance(container.profile_service.store, JsonFileProfileStore)
    assert container.profile_service.store.path == settings.profile_store_path
    assert container.meal_nutrition_service.lookup is container.nutrition_lookup
    asyncio.run(container.close_resources())


def test_build_container_uses_fdc_when_configured(settings) -> None:
    container = build_container(settings.model_copy(update={"fdc_api_key": "fdc"}))

    assert isinstance(container.nutrition_lookup, FdcNutritionLookup)
    asyncio.run(container.close_resources())


def test_fdc_lookup_translates_with_shared_cache(settings) -> None:
    container = build_container(settings.model_copy(update={"fdc_api_key": "fdc"}))
    lookup = container.nutrition_lookup

    assert isinstance(lookup, FdcNutritionLookup)
    assert lookup.translator is not None
    assert lookup.translator.cache is lookup.cache
    asyncio.run(container.close_resources())
