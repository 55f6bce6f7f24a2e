"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from feeding_planner.api.models import (
    MealPlanOptionsRequest,
    NutritionPlanRequest,
    PlanRequest,
    PortionOptionsRequest,
    RecommendationRequest,
    SuggestionRequest,
)
from feeding_planner.app_logging import configure_logging
from feeding_planner.containers import AppContainer
from feeding_planner.services.planner import PlannerService


def _planner(request: Request) -> PlannerService:
    container: AppContainer = request.app.state.container
    return container.planner_service


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Feeding Planner")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition-plan")
    async def nutrition_plan(
        payload: NutritionPlanRequest, request: Request
    ) -> dict[str, object]:
        """Return energy targets for a profile."""
        plan = _planner(request).nutrition_plan(payload.profile.to_domain())
        return {"plan": plan}

    @app.post("/recommendations")
    async def recommendations(
        payload: RecommendationRequest, request: Request
    ) -> dict[str, object]:
        """Return ranked and badged food recommendations."""
        ranked = _planner(request).recommend(
            payload.profile.to_domain(),
            [food.to_domain() for food in payload.foods],
            form_preference=payload.form(),
            max_monthly_budget=payload.max_monthly_budget,
            health_conditions=payload.health_conditions,
        )
        return {"recommendations": ranked}

    @app.post("/portion-options")
    async def portion_options(
        payload: PortionOptionsRequest, request: Request
    ) -> dict[str, object]:
        """Return practical daily amounts of one food."""
        options = _planner(request).portion_options(
            payload.food.to_domain(), payload.target_energy, payload.meals_per_day
        )
        return {"options": options}

    @app.post("/meal-plan-options")
    async def meal_plan_options(
        payload: MealPlanOptionsRequest, request: Request
    ) -> dict[str, object]:
        """Return ranked single and combo options for a primary food."""
        catalog = [food.to_domain() for food in payload.catalog]
        primary = next(
            (food for food in catalog if food.id == payload.primary_food_id), None
        )
        if primary is None:
            logger.warning("Unknown primary food: %s", payload.primary_food_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Primary food not found in catalog",
            )
        options = _planner(request).meal_plan_options(
            primary, payload.profile.to_domain(), catalog, payload.max_options
        )
        return {"options": options}

    @app.post("/plans/summary")
    async def plan_summary(payload: PlanRequest, request: Request) -> dict[str, object]:
        """Aggregate a custom multi-food plan."""
        summary = _planner(request).summarize_plan(
            [selection.to_domain() for selection in payload.selections],
            [food.to_domain() for food in payload.catalog],
            payload.target_energy,
            payload.meals_per_day,
        )
        return {"summary": summary}

    @app.post("/plans/suggestions")
    async def plan_suggestions(
        payload: SuggestionRequest, request: Request
    ) -> dict[str, object]:
        """Suggest foods for the open slots of a custom plan."""
        suggestions = _planner(request).suggest_complements(
            payload.profile.to_domain(),
            [food.to_domain() for food in payload.catalog],
            [selection.to_domain() for selection in payload.selections],
            payload.target_energy,
            payload.meals_per_day,
        )
        return {"suggestions": suggestions}

    return app
