"""Single-food and combo meal-plan options for a primary food."""

import functools
import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from feeding_planner.domain.constants import MAX_DEVIATION_PERCENT, MIN_COMBO_GAP_KCAL
from feeding_planner.domain.foods import FoodForm, FoodItem
from feeding_planner.domain.meal_plans import FoodPortion, MealPlanOption, PlanType
from feeding_planner.domain.profiles import ActivityLevel, AnimalProfile, WeightGoal
from feeding_planner.services.compatibility import (
    check_health_compatibility,
    is_life_stage_appropriate,
)
from feeding_planner.services.costs import (
    daily_cost_for_amount,
    energy_density,
    monthly_cost,
)
from feeding_planner.services.energy import daily_energy_requirement, meals_per_day
from feeding_planner.services.portions import (
    generate_portion_options,
    round_down_to_practical_portion,
    round_to_practical_portion,
)
from feeding_planner.services.rounding import (
    round_kcal,
    round_money,
    round_percent,
)

_logger = logging.getLogger(__name__)

SINGLE_OPTION_LIMIT = 3
COMBO_PRIORITY_PERCENT = 5.0
RANKING_INDIFFERENCE_PERCENT = 3.0


@dataclass(frozen=True)
class ComplementCandidate:
    """A food able to fill a calorie gap with a practical amount."""

    food: FoodItem
    amount: float
    kcal: float
    deviation: float


def opposite_form(form: FoodForm) -> FoodForm:
    return FoodForm.DRY if form is FoodForm.WET else FoodForm.WET


def find_complementary_foods(
    gap_kcal: float, foods: Sequence[FoodItem], primary_form: FoodForm
) -> list[ComplementCandidate]:
    """Opposite-form foods ordered by how closely they fill ``gap_kcal``."""
    wanted = opposite_form(primary_form)
    candidates = []
    for food in foods:
        if food.form is not wanted:
            continue
        density = energy_density(food)
        if density.kcal == 0:
            continue
        amount = round_to_practical_portion(gap_kcal / density.kcal, food.form)
        if amount <= 0:
            continue
        kcal = amount * density.kcal
        candidates.append(
            ComplementCandidate(
                food=food, amount=amount, kcal=kcal, deviation=abs(kcal - gap_kcal)
            )
        )
    candidates.sort(key=lambda candidate: candidate.deviation)
    return candidates


def suitability_note(
    percent_difference: float, plan_type: PlanType, profile: AnimalProfile
) -> str:
    """Human-readable comment on how an option meets the target."""
    if plan_type is PlanType.COMBO:
        if abs(percent_difference) <= 2:
            return "Perfectly balanced combo"
        if percent_difference > 0:
            return "Combo with slight calorie surplus"
        return "Combo with slight calorie deficit"

    if abs(percent_difference) <= 3:
        return "Excellent match"
    if percent_difference > 10:
        if (
            profile.activity_level is ActivityLevel.ACTIVE
            or profile.goal is WeightGoal.GAIN
        ):
            return "Great for active or growing cats"
        return "Slight surplus - good for active cats"
    if percent_difference > 0:
        return "Slight calorie surplus"
    if percent_difference < -10:
        if profile.goal is WeightGoal.LOSE:
            return "Perfect for weight management"
        return "Calorie deficit - add treats or supplement"
    if profile.goal is WeightGoal.LOSE:
        return "Good for gradual weight loss"
    return "Slight calorie deficit"


def _compare_options(a: MealPlanOption, b: MealPlanOption) -> int:
    if a.type is PlanType.COMBO and abs(a.percent_difference) <= COMBO_PRIORITY_PERCENT:
        return -1
    if b.type is PlanType.COMBO and abs(b.percent_difference) <= COMBO_PRIORITY_PERCENT:
        return 1
    closeness_a = abs(a.percent_difference)
    closeness_b = abs(b.percent_difference)
    if abs(closeness_a - closeness_b) > RANKING_INDIFFERENCE_PERCENT:
        return -1 if closeness_a < closeness_b else 1
    if a.daily_cost == b.daily_cost:
        return 0
    return -1 if a.daily_cost < b.daily_cost else 1


def _eligible_complements(
    primary_food: FoodItem, profile: AnimalProfile, catalog: Sequence[FoodItem]
) -> list[FoodItem]:
    wanted = opposite_form(primary_food.form)
    return [
        food
        for food in catalog
        if food.form is wanted
        and food.id != primary_food.id
        and food.is_complete_balanced
        and is_life_stage_appropriate(food, profile)
        and check_health_compatibility(food, profile.health_conditions).compatible
    ]


def _combo_option(  # noqa: PLR0913
    option_id: str,
    primary_food: FoodItem,
    profile: AnimalProfile,
    catalog: Sequence[FoodItem],
    target: float,
    max_deviation_percent: float,
    min_combo_gap_kcal: float,
) -> MealPlanOption | None:
    primary_density = energy_density(primary_food)
    complements = _eligible_complements(primary_food, profile, catalog)
    primary_amount = round_down_to_practical_portion(
        target / primary_density.kcal, primary_food.form
    )
    if primary_amount <= 0 or not complements:
        return None

    primary_kcal = primary_amount * primary_density.kcal
    gap = target - primary_kcal
    if gap <= min_combo_gap_kcal:
        return None

    ranked = find_complementary_foods(gap, complements, primary_food.form)
    if not ranked:
        return None
    best = ranked[0]

    total_kcal = primary_kcal + best.kcal
    difference = total_kcal - target
    percent = difference / target * 100
    if abs(percent) > max_deviation_percent:
        _logger.debug(
            "Discarded combo %s + %s: %.1f%% off target",
            primary_food.id,
            best.food.id,
            percent,
        )
        return None

    total_daily_cost = daily_cost_for_amount(
        primary_food, primary_amount
    ) + daily_cost_for_amount(best.food, best.amount)
    return MealPlanOption(
        id=option_id,
        type=PlanType.COMBO,
        primary=FoodPortion(
            food=primary_food,
            daily_amount=primary_amount,
            unit=primary_density.unit,
            kcal=round_kcal(primary_kcal),
        ),
        complement=FoodPortion(
            food=best.food,
            daily_amount=best.amount,
            unit=energy_density(best.food).unit,
            kcal=round_kcal(best.kcal),
        ),
        total_kcal=round_kcal(total_kcal),
        difference=round_kcal(difference),
        percent_difference=round_percent(percent),
        daily_cost=round_money(total_daily_cost),
        monthly_cost=round_money(monthly_cost(total_daily_cost)),
        suitability_note=suitability_note(percent, PlanType.COMBO, profile),
    )


def generate_meal_plan_options(  # noqa: PLR0913
    primary_food: FoodItem,
    profile: AnimalProfile,
    catalog: Sequence[FoodItem],
    max_options: int = 4,
    *,
    max_deviation_percent: float = MAX_DEVIATION_PERCENT,
    min_combo_gap_kcal: float = MIN_COMBO_GAP_KCAL,
) -> list[MealPlanOption]:
    """Build ranked feeding options around a primary food.

    Up to three practical single-food amounts are offered, plus at most
    one combo that pairs a rounded-down primary amount with the
    opposite-form food that best fills the remaining calories.
    """
    target = daily_energy_requirement(profile)
    density = energy_density(primary_food)
    if density.kcal == 0 or not target > 0:
        return []

    options: list[MealPlanOption] = []
    portions = generate_portion_options(
        primary_food,
        target,
        meals_per_day(profile),
        max_deviation_percent=max_deviation_percent,
    )
    for portion in portions[:SINGLE_OPTION_LIMIT]:
        cost = daily_cost_for_amount(primary_food, portion.amount)
        options.append(
            MealPlanOption(
                id=f"option-{len(options) + 1}",
                type=PlanType.SINGLE,
                primary=FoodPortion(
                    food=primary_food,
                    daily_amount=portion.amount,
                    unit=portion.unit,
                    kcal=portion.kcal,
                ),
                total_kcal=portion.kcal,
                difference=portion.difference,
                percent_difference=portion.percent_difference,
                daily_cost=round_money(cost),
                monthly_cost=round_money(monthly_cost(cost)),
                suitability_note=suitability_note(
                    portion.percent_difference, PlanType.SINGLE, profile
                ),
            )
        )

    combo = _combo_option(
        f"option-{len(options) + 1}",
        primary_food,
        profile,
        catalog,
        target,
        max_deviation_percent,
        min_combo_gap_kcal,
    )
    if combo is not None:
        options.append(combo)

    options.sort(key=functools.cmp_to_key(_compare_options))
    ranked = [replace(option, rank=index) for index, option in enumerate(options, 1)]
    return ranked[:max_options]
