"""Dependency container wiring for the application."""

from dataclasses import dataclass

from feeding_planner.config import Settings
from feeding_planner.services.planner import PlannerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    planner_service: PlannerService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    planner_service = PlannerService(
        max_deviation_percent=resolved_settings.max_deviation_percent,
        min_combo_gap_kcal=resolved_settings.min_combo_gap_kcal,
        max_meal_plan_options=resolved_settings.max_meal_plan_options,
        suggestion_limit=resolved_settings.complementary_suggestion_limit,
        debug=resolved_settings.debug,
    )
    return AppContainer(settings=resolved_settings, planner_service=planner_service)
