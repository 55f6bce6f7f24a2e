"""Tests for the planner service facade."""

import logging

import pytest

from feeding_planner.domain.foods import FoodItem
from feeding_planner.domain.meal_plans import FoodSelection, PlanType
from feeding_planner.domain.profiles import AnimalProfile
from feeding_planner.services.planner import PlannerService
from tests.conftest import make_food


def test_nutrition_plan(profile: AnimalProfile) -> None:
    plan = PlannerService().nutrition_plan(profile)

    assert plan.der == 261
    assert plan.treat_budget == 26


def test_recommend_delegates_filters(
    profile: AnimalProfile, catalog: list[FoodItem]
) -> None:
    service = PlannerService()

    ranked = service.recommend(profile, catalog, max_monthly_budget=50.0)

    assert {rec.food.id for rec in ranked} == {"dry-a", "dry-b"}


def test_tolerance_is_applied_to_portions() -> None:
    service = PlannerService(max_deviation_percent=5.0)

    options = service.portion_options(make_food(kcal_per_cup=100.0), 300)

    assert [option.amount for option in options] == [3.0]


def test_meal_plan_options_respect_configured_limit(
    profile: AnimalProfile, catalog: list[FoodItem]
) -> None:
    service = PlannerService(max_meal_plan_options=1)

    options = service.meal_plan_options(catalog[0], profile, catalog)

    assert [option.type for option in options] == [PlanType.COMBO]
    assert len(service.meal_plan_options(catalog[0], profile, catalog, 4)) == 2


def test_suggest_complements_uses_limit(
    profile: AnimalProfile, catalog: list[FoodItem]
) -> None:
    service = PlannerService(suggestion_limit=0)

    suggestions = service.suggest_complements(
        profile, catalog, [FoodSelection("dry-a", 1)], 300, 2
    )

    assert suggestions == []


def test_debug_logs_summaries(
    profile: AnimalProfile,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(logging.getLogger("feeding_planner"), "propagate", True)
    service = PlannerService(debug=True)

    with caplog.at_level(logging.INFO, logger="feeding_planner"):
        service.nutrition_plan(profile)

    assert "Nutrition plan: profile=cat-1" in caplog.text


def test_zero_max_options_returns_nothing(
    profile: AnimalProfile, catalog: list[FoodItem]
) -> None:
    service = PlannerService()

    assert service.meal_plan_options(catalog[0], profile, catalog, 0) == []
