"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Body, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from diet_planner.api.models import (
    HealthMetricsResponse,
    MealDescriptionRequest,
    RecommendationResponse,
)
from diet_planner.app_logging import configure_logging
from diet_planner.config import parse_locale
from diet_planner.containers import AppContainer
from diet_planner.domain.errors import GenerationError, ProfileNotFoundError
from diet_planner.domain.nutrition import FoodItemsExtract, NutritionResult
from diet_planner.domain.profile import UserProfile
from diet_planner.services.health import compute


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    default_locale = parse_locale(container.settings.default_locale)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Diet Planner", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(GenerationError)
    async def generation_error_handler(
        request: Request, exc: GenerationError
    ) -> JSONResponse:
        logger.exception("Generation failed on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)}
        )

    @app.exception_handler(ProfileNotFoundError)
    async def profile_not_found_handler(
        request: Request, exc: ProfileNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    def with_locale(profile: UserProfile) -> UserProfile:
        if "locale" in profile.model_fields_set:
            return profile.model_copy(update={"locale": parse_locale(profile.locale)})
        return profile.model_copy(update={"locale": default_locale})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/meals/analyze")
    async def analyze_meal(
        payload: MealDescriptionRequest, request: Request
    ) -> NutritionResult:
        """Return calories and macros for a described meal."""
        state_container: AppContainer = request.app.state.container
        locale = parse_locale(payload.locale, default_locale)
        return await state_container.meal_nutrition_service.analyze(
            payload.description, locale
        )

    @app.post("/meals/items")
    async def extract_meal_items(
        payload: MealDescriptionRequest, request: Request
    ) -> FoodItemsExtract:
        """Return the food items and portions named in a meal."""
        state_container: AppContainer = request.app.state.container
        return await state_container.meal_nutrition_service.extract_food_items(
            payload.description
        )

    @app.get("/profile")
    async def get_profile(request: Request) -> UserProfile:
        """Return the stored profile."""
        state_container: AppContainer = request.app.state.container
        return state_container.profile_service.require()

    @app.put("/profile")
    async def save_profile(profile: UserProfile, request: Request) -> UserProfile:
        """Replace the stored profile."""
        state_container: AppContainer = request.app.state.container
        return state_container.profile_service.save(with_locale(profile))

    @app.delete("/profile", status_code=status.HTTP_204_NO_CONTENT)
    async def reset_profile(request: Request) -> Response:
        """Delete the stored profile."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.reset()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.post("/profile/metrics")
    async def profile_metrics(profile: UserProfile) -> HealthMetricsResponse:
        """Compute health metrics for a submitted profile."""
        return HealthMetricsResponse.model_validate(compute(profile))

    @app.get("/profile/metrics")
    async def stored_profile_metrics(request: Request) -> HealthMetricsResponse:
        """Compute health metrics for the stored profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.require()
        return HealthMetricsResponse.model_validate(compute(profile))

    @app.post("/recommendations")
    async def recommendations(
        request: Request, profile: UserProfile | None = Body(default=None)
    ) -> RecommendationResponse:
        """Generate a meal plan for the submitted or stored profile."""
        state_container: AppContainer = request.app.state.container
        if profile is None:
            resolved = state_container.profile_service.require()
        else:
            resolved = state_container.profile_service.save(with_locale(profile))
        plan = await state_container.recommendation_service.generate_plan(resolved)
        logger.info(
            "Plan ready for %s: days=%s warnings=%s",
            resolved.name,
            len(plan.result.meal_plan),
            len(plan.warnings),
        )
        return RecommendationResponse.model_validate(plan)

    return app
