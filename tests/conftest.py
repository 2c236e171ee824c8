"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from diet_planner.adapters.fdc_client import FdcClient
from diet_planner.config import Settings
from diet_planner.containers import AppContainer
from diet_planner.domain.profile import UserProfile
from diet_planner.services.generation import GenerationClient, GenerationService
from diet_planner.services.meal_analysis import MealNutritionService
from diet_planner.services.nutrition import StubNutritionLookup
from diet_planner.services.profiles import ProfileService, ProfileStore
from diet_planner.services.recommendations import RecommendationService


def make_meal(dish_name: str, calories: float = 500) -> dict[str, object]:
    return {
        "dishName": dish_name,
        "description": f"{dish_name} prepared simply",
        "portionSize": "1 plate",
        "totalCalories": calories,
        "macronutrients": {"carbohydrates": 50, "protein": 30, "fat": 15},
        "ingredients": "oats, milk, honey",
        "substitutionSuggestions": None,
    }


def make_day(index: int) -> dict[str, object]:
    return {
        "date": f"2026-01-{index + 5:02d}",
        "dayOfWeek": "Monday",
        "breakfast": make_meal(f"Breakfast {index}", 400),
        "morningSnack": None,
        "lunch": make_meal(f"Lunch {index}", 600),
        "afternoonSnack": make_meal(f"Snack {index}", 150),
        "dinner": make_meal(f"Dinner {index}", 550),
        "eveningSnack": None,
        "dailyTotalCalories": 1700,
        "dailyMacronutrients": {"carbohydrates": 200, "protein": 120, "fat": 55},
    }


def make_recommendation(days: int) -> dict[str, object]:
    return {
        "bmi": 22.9,
        "idealWeightRange": "56.7 - 76.3 kg",
        "bmiInterpretation": "You are in a healthy range.",
        "recommendedDailyCalories": 1900,
        "macroBreakdown": {"carbs": 45, "protein": 25, "fats": 30},
        "mealPlan": [make_day(index) for index in range(days)],
        "waterIntakeRecommendation": "Drink at least 2.5 liters of water daily.",
        "activityTip": "Try a 20-minute brisk walk today.",
        "nutrientAdvice": None,
        "generalTips": None,
    }


@dataclass
class FakeGenerationClient(GenerationClient):
    """Fake LLM client returning canned payloads keyed by schema name."""

    payloads: dict[str, dict[str, object] | None] = field(
        default_factory=lambda: {
            "meal_nutrition": {
                "totalCalories": 999,
                "carbohydrates": 99,
                "protein": 99,
                "fat": 99,
                "ingredients": [
                    {"name": "rice", "calories": 999},
                    {"name": "chicken", "calories": 999},
                ],
            },
            "meal_items": {
                "foodItems": [
                    {"name": "rice", "estimatedPortion": "1 cup"},
                    {"name": "chicken", "estimatedPortion": "150 g"},
                ]
            },
            "recommendation": make_recommendation(1),
            "food_name_translation": {"englishName": "Chicken Breast"},
        }
    )
    prompts: list[tuple[str, str]] = field(default_factory=list)

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object] | None:
        self.prompts.append((schema_name, prompt))
        return self.payloads.get(schema_name)


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "fdcId": 171077,
                    "description": "Chicken, broiler, breast, meat only, raw",
                    "dataType": "SR Legacy",
                }
            ]
        }
    )
    food_payload: dict[str, object] = field(
        default_factory=lambda: {
            "fdcId": 171077,
            "description": "Chicken, broiler, breast, meat only, raw",
            "dataType": "SR Legacy",
            "foodNutrients": [
                {"nutrient": {"id": 1008}, "amount": 120},
                {"nutrient": {"id": 1003}, "amount": 22.5},
                {"nutrient": {"id": 1004}, "amount": 2.6},
                {"nutrient": {"id": 1005}, "amount": 0},
            ],
        }
    )
    search_calls: list[str] = field(default_factory=list)
    food_calls: list[int] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 5) -> dict[str, object]:
        self.search_calls.append(query)
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls.append(fdc_id)
        return self.food_payload


@dataclass
class InMemoryProfileStore(ProfileStore):
    """In-memory profile slot for tests."""

    payload: dict[str, object] | None = None
    cleared: int = 0

    def load(self) -> dict[str, object] | None:
        return self.payload

    def save(self, payload: dict[str, object]) -> None:
        self.payload = payload

    def clear(self) -> None:
        self.payload = None
        self.cleared += 1


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        profile_store_path=tmp_path / "profile.json",
    )


@pytest.fixture
def profile_data() -> dict[str, object]:
    return {
        "name": "Ayse",
        "age": 30,
        "gender": "female",
        "height": 165,
        "weight": 60,
        "activityLevel": "moderately-active",
        "dietType": "vegetarian",
        "allergies": "peanuts, shellfish",
        "goal": "maintain",
        "planType": "daily",
        "startDate": "2026-01-05",
        "locale": "en-US",
    }


@pytest.fixture
def profile(profile_data: dict[str, object]) -> UserProfile:
    return UserProfile.model_validate(profile_data)


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def generation_service(generation_client: FakeGenerationClient) -> GenerationService:
    return GenerationService(
        client=generation_client,
        model="gpt-5.2",
        reasoning_effort="medium",
        store=False,
    )


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def container(
    settings: Settings,
    generation_service: GenerationService,
    profile_store: InMemoryProfileStore,
) -> AppContainer:
    lookup = StubNutritionLookup()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_lookup=lookup,
        meal_nutrition_service=MealNutritionService(
            generation=generation_service, lookup=lookup
        ),
        recommendation_service=RecommendationService(generation=generation_service),
        profile_service=ProfileService(profile_store),
        close_resources=close_resources,
    )
