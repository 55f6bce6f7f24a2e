"""Planner service exposing the engine with configured tolerances."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from feeding_planner.domain.constants import MAX_DEVIATION_PERCENT, MIN_COMBO_GAP_KCAL
from feeding_planner.domain.foods import FoodForm, FoodItem
from feeding_planner.domain.meal_plans import (
    FoodSelection,
    MealPlanOption,
    PlanSummary,
    PortionOption,
)
from feeding_planner.domain.nutrition import NutritionPlan
from feeding_planner.domain.profiles import AnimalProfile
from feeding_planner.domain.recommendations import (
    ComplementarySuggestion,
    FoodRecommendation,
)
from feeding_planner.services.energy import compute_nutrition_plan
from feeding_planner.services.meal_plans import generate_meal_plan_options
from feeding_planner.services.multi_food import (
    aggregate_multi_food_plan,
    suggest_complementary_foods,
)
from feeding_planner.services.portions import generate_portion_options
from feeding_planner.services.recommendations import generate_recommendations

_logger = logging.getLogger(__name__)


@dataclass
class PlannerService:
    """Stateless facade over the planning engine."""

    max_deviation_percent: float = MAX_DEVIATION_PERCENT
    min_combo_gap_kcal: float = MIN_COMBO_GAP_KCAL
    max_meal_plan_options: int = 4
    suggestion_limit: int = 3
    debug: bool = False

    def nutrition_plan(self, profile: AnimalProfile) -> NutritionPlan:
        """Return energy targets and meal cadence for a profile."""
        plan = compute_nutrition_plan(profile)
        if self.debug:
            _logger.info(
                "Nutrition plan: profile=%s der=%s factor=%s",
                profile.id,
                plan.der,
                plan.factor,
            )
        return plan

    def recommend(
        self,
        profile: AnimalProfile,
        foods: Sequence[FoodItem],
        *,
        form_preference: FoodForm | None = None,
        max_monthly_budget: float | None = None,
        health_conditions: Sequence[str] | None = None,
    ) -> list[FoodRecommendation]:
        """Rank catalog foods for a profile."""
        recommendations = generate_recommendations(
            profile,
            foods,
            form_preference=form_preference,
            max_monthly_budget=max_monthly_budget,
            health_conditions=health_conditions,
        )
        if self.debug:
            _logger.info(
                "Recommendations: profile=%s catalog=%s ranked=%s",
                profile.id,
                len(foods),
                len(recommendations),
            )
        return recommendations

    def portion_options(
        self, food: FoodItem, target_energy: float, meals_per_day: int = 2
    ) -> list[PortionOption]:
        """Return practical daily amounts of a food near the target."""
        return generate_portion_options(
            food,
            target_energy,
            meals_per_day,
            max_deviation_percent=self.max_deviation_percent,
        )

    def meal_plan_options(
        self,
        primary_food: FoodItem,
        profile: AnimalProfile,
        catalog: Sequence[FoodItem],
        max_options: int | None = None,
    ) -> list[MealPlanOption]:
        """Return ranked single and combo options for a primary food."""
        options = generate_meal_plan_options(
            primary_food,
            profile,
            catalog,
            self.max_meal_plan_options if max_options is None else max_options,
            max_deviation_percent=self.max_deviation_percent,
            min_combo_gap_kcal=self.min_combo_gap_kcal,
        )
        if self.debug:
            _logger.info(
                "Meal plan options: profile=%s food=%s options=%s",
                profile.id,
                primary_food.id,
                len(options),
            )
        return options

    def summarize_plan(
        self,
        selections: Sequence[FoodSelection],
        catalog: Sequence[FoodItem],
        target_energy: float,
        meals_per_day: int,
    ) -> PlanSummary:
        """Aggregate a custom multi-food plan."""
        summary = aggregate_multi_food_plan(
            selections,
            catalog,
            target_energy,
            meals_per_day,
            max_deviation_percent=self.max_deviation_percent,
        )
        if self.debug:
            _logger.info(
                "Plan summary: meals=%s/%s kcal=%s valid=%s",
                summary.total_meals_used,
                meals_per_day,
                summary.total_kcal,
                summary.is_valid,
            )
        return summary

    def suggest_complements(
        self,
        profile: AnimalProfile,
        catalog: Sequence[FoodItem],
        selections: Sequence[FoodSelection],
        target_energy: float,
        meals_per_day: int,
    ) -> list[ComplementarySuggestion]:
        """Suggest foods for the slots a custom plan leaves open."""
        summary = self.summarize_plan(selections, catalog, target_energy, meals_per_day)
        return suggest_complementary_foods(
            profile,
            catalog,
            selections,
            summary,
            meals_per_day,
            limit=self.suggestion_limit,
        )
