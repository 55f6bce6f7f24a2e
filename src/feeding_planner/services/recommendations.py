"""Ranked food recommendations for a profile."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

from feeding_planner.domain.foods import EnergyDensity, FoodForm, FoodItem
from feeding_planner.domain.profiles import AnimalProfile
from feeding_planner.domain.recommendations import FoodRecommendation
from feeding_planner.services.badges import assign_badges
from feeding_planner.services.compatibility import (
    check_health_compatibility,
    is_life_stage_appropriate,
)
from feeding_planner.services.costs import (
    daily_cost,
    energy_density,
    food_cost_per_100kcal,
    monthly_cost,
)
from feeding_planner.services.energy import daily_energy_requirement, meals_per_day
from feeding_planner.services.rounding import round_amount, round_money
from feeding_planner.services.scoring import score_food

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Candidate:
    food: FoodItem
    density: EnergyDensity
    daily_amount: float
    amount_per_meal: float
    daily_cost: float
    monthly_cost: float
    cost_per_100kcal: float


def _exclusion_reason(
    food: FoodItem,
    profile: AnimalProfile,
    form_preference: FoodForm | None,
    conditions: Sequence[str],
) -> str | None:
    if form_preference is not None and food.form is not form_preference:
        return "form"
    if not is_life_stage_appropriate(food, profile):
        return "life_stage"
    if not food.is_complete_balanced:
        return "incomplete"
    if energy_density(food).kcal == 0:
        return "no_energy"
    if not check_health_compatibility(food, conditions).compatible:
        return "health"
    return None


def generate_recommendations(
    profile: AnimalProfile,
    foods: Sequence[FoodItem],
    *,
    form_preference: FoodForm | None = None,
    max_monthly_budget: float | None = None,
    health_conditions: Sequence[str] | None = None,
) -> list[FoodRecommendation]:
    """Filter, cost, score, sort and badge a catalog for a profile.

    Value scores depend on the cost spread of the surviving foods, so
    scores are only comparable within one call.
    """
    conditions = tuple(
        profile.health_conditions if health_conditions is None else health_conditions
    )
    der = daily_energy_requirement(profile)
    meals = meals_per_day(profile)

    candidates: list[_Candidate] = []
    for food in foods:
        reason = _exclusion_reason(food, profile, form_preference, conditions)
        if reason is not None:
            _logger.debug("Excluded food %s: %s", food.id, reason)
            continue

        density = energy_density(food)
        cost_per_100 = food_cost_per_100kcal(food)
        if math.isinf(cost_per_100):
            _logger.debug("Excluded food %s: no_package_energy", food.id)
            continue

        daily_amount = der / density.kcal
        daily = daily_cost(der, cost_per_100)
        monthly = monthly_cost(daily)
        if max_monthly_budget and monthly > max_monthly_budget:
            _logger.debug("Excluded food %s: over_budget", food.id)
            continue

        candidates.append(
            _Candidate(
                food=food,
                density=density,
                daily_amount=daily_amount,
                amount_per_meal=daily_amount / meals,
                daily_cost=daily,
                monthly_cost=monthly,
                cost_per_100kcal=cost_per_100,
            )
        )

    all_costs = [candidate.cost_per_100kcal for candidate in candidates]
    recommendations = [
        FoodRecommendation(
            food=candidate.food,
            daily_amount=round_amount(candidate.daily_amount),
            amount_unit=candidate.density.unit,
            amount_per_meal=round_amount(candidate.amount_per_meal),
            daily_cost=round_money(candidate.daily_cost),
            monthly_cost=round_money(candidate.monthly_cost),
            cost_per_100kcal=round_money(candidate.cost_per_100kcal),
            score=score_food(
                candidate.food,
                profile,
                candidate.cost_per_100kcal,
                all_costs,
                conditions,
            ),
        )
        for candidate in candidates
    ]
    recommendations.sort(key=lambda rec: rec.score.overall, reverse=True)

    badge_map = assign_badges(recommendations)
    return [
        replace(rec, badges=tuple(badge_map[rec.food.id])) for rec in recommendations
    ]
