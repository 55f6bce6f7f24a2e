"""Tests for container wiring."""

from feeding_planner.config import Settings
from feeding_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.planner_service is not None
    assert container.settings is settings


def test_planner_uses_configured_tolerances() -> None:
    settings = Settings(
        _env_file=None,
        max_deviation_percent=10.0,
        max_meal_plan_options=2,
        complementary_suggestion_limit=1,
        debug=True,
    )

    planner = build_container(settings).planner_service

    assert planner.max_deviation_percent == 10.0
    assert planner.max_meal_plan_options == 2
    assert planner.suggestion_limit == 1
    assert planner.debug
