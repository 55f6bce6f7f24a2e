"""Shared test fixtures."""

from dataclasses import replace

import pytest

from feeding_planner.config import Settings
from feeding_planner.containers import AppContainer, build_container
from feeding_planner.domain.foods import FoodForm, FoodItem, LifeStage
from feeding_planner.domain.profiles import (
    ActivityLevel,
    AnimalProfile,
    WeightGoal,
)
from feeding_planner.domain.recommendations import (
    FoodRecommendation,
    RecommendationScore,
    ScoreBreakdown,
)


def make_profile(**overrides: object) -> AnimalProfile:
    """Ten-pound, three-year-old neutered cat at normal activity."""
    profile = AnimalProfile(
        id="cat-1",
        name="Miso",
        weight_lbs=10.0,
        age_months=36,
        is_altered=True,
        activity_level=ActivityLevel.NORMAL,
        goal=WeightGoal.MAINTAIN,
    )
    return replace(profile, **overrides)


def make_food(**overrides: object) -> FoodItem:
    """A complete adult dry food at 400 kcal/cup, 0.25 per 100 kcal."""
    food = FoodItem(
        id="dry-a",
        brand="Acme",
        product_name="Indoor Chicken",
        form=FoodForm.DRY,
        life_stage=LifeStage.ADULT,
        price=40.0,
        protein_pct=40.0,
        fat_pct=18.0,
        fiber_pct=3.0,
        moisture_pct=10.0,
        kcal_per_cup=400.0,
        unit_size="10 lb bag",
        servings_per_unit=40.0,
        special_benefits=("Indoor Formula", "Hairball Control"),
    )
    return replace(food, **overrides)


def make_wet_food(**overrides: object) -> FoodItem:
    """A complete all-stages wet food at 80 kcal/can, 1.875 per 100 kcal."""
    food = FoodItem(
        id="wet-c",
        brand="Tidal",
        product_name="Salmon Pate",
        form=FoodForm.WET,
        life_stage=LifeStage.ALL,
        price=1.5,
        protein_pct=11.0,
        fat_pct=5.0,
        fiber_pct=1.0,
        moisture_pct=78.0,
        kcal_per_can=80.0,
        can_size_oz=3.0,
        unit_size="3 oz can",
        servings_per_unit=1.0,
        special_benefits=("Grain Free",),
    )
    return replace(food, **overrides)


def make_recommendation(  # noqa: PLR0913
    food_id: str,
    *,
    value: int,
    nutrition: int,
    overall: int,
    cost: float,
    suitability: int = 50,
) -> FoodRecommendation:
    """Recommendation with hand-picked scores for badge tests."""
    return FoodRecommendation(
        food=make_food(id=food_id),
        daily_amount=0.5,
        amount_unit="cup",
        amount_per_meal=0.25,
        daily_cost=1.0,
        monthly_cost=30.0,
        cost_per_100kcal=cost,
        score=RecommendationScore(
            overall=overall,
            nutrition_score=nutrition,
            value_score=value,
            suitability_score=suitability,
            breakdown=ScoreBreakdown(
                dry_matter_protein=0,
                fat_to_protein_ratio=0,
                fiber_level=0,
                health_condition_match=0,
                cost_efficiency=value,
                life_stage_match=0,
            ),
        ),
    )


@pytest.fixture
def profile() -> AnimalProfile:
    return make_profile()


@pytest.fixture
def catalog() -> list[FoodItem]:
    """Three eligible foods followed by three that must be filtered out."""
    return [
        make_food(),
        make_food(
            id="dry-b",
            brand="Budget",
            product_name="Everyday Blend",
            life_stage=LifeStage.ALL,
            price=20.0,
            protein_pct=32.0,
            fat_pct=12.0,
            fiber_pct=6.0,
            kcal_per_cup=350.0,
            special_benefits=(),
        ),
        make_wet_food(),
        make_food(
            id="kitten-d",
            life_stage=LifeStage.KITTEN,
            kcal_per_cup=450.0,
            price=30.0,
            servings_per_unit=30.0,
        ),
        make_wet_food(id="incomplete-e", is_complete_balanced=False, kcal_per_can=90.0),
        make_food(id="broken-f", kcal_per_cup=None, kcal_per_can=300.0),
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
