"""Build-your-own plans: meal-count weighted multi-food aggregation."""

from collections.abc import Sequence

from feeding_planner.domain.constants import DAYS_PER_MONTH, MAX_DEVIATION_PERCENT
from feeding_planner.domain.foods import FoodItem
from feeding_planner.domain.meal_plans import (
    FoodSelection,
    PlanSummary,
    SelectedFoodPortion,
)
from feeding_planner.domain.profiles import AnimalProfile
from feeding_planner.domain.recommendations import ComplementarySuggestion
from feeding_planner.services.costs import daily_cost_for_amount, energy_density
from feeding_planner.services.meal_plans import opposite_form
from feeding_planner.services.portions import round_to_practical_portion
from feeding_planner.services.recommendations import generate_recommendations
from feeding_planner.services.rounding import (
    round_amount,
    round_kcal,
    round_money,
    round_percent,
)

GOOD_FIT_PERCENT = 5.0
VARIETY_BONUS = 10.0
EMPTY_PLAN_MESSAGE = "Select foods to build your meal plan"
NO_TARGET_MESSAGE = "No calorie target is set for this plan."


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def _fit_message(percent: float, max_deviation_percent: float) -> str:
    if abs(percent) <= GOOD_FIT_PERCENT:
        return "This plan meets your cat's calorie needs."
    if percent > max_deviation_percent:
        return "This plan provides too many calories. Consider reducing meals."
    if percent > GOOD_FIT_PERCENT:
        return "Slight calorie surplus. Good for active cats."
    if percent < -max_deviation_percent:
        return "This plan doesn't provide enough calories. Add more meals."
    return "Slight calorie deficit. Good for weight management."


def _status_message(
    total_meals: int,
    meals_per_day: int,
    percent: float,
    max_deviation_percent: float,
    has_target: bool,
) -> str:
    remaining = meals_per_day - total_meals
    if remaining > 0:
        return f"{_plural(remaining, 'meal slot')} remaining"
    if remaining < 0:
        return f"Too many meals selected: remove {_plural(-remaining, 'meal slot')}"
    if not has_target:
        fit = NO_TARGET_MESSAGE
    else:
        fit = _fit_message(percent, max_deviation_percent)
    return f"All {_plural(meals_per_day, 'meal slot')} filled. {fit}"


def _portion_for(
    selection: FoodSelection,
    food: FoodItem | None,
    total_meals: int,
    target_energy: float,
) -> tuple[SelectedFoodPortion, float, float]:
    """Return the portion record plus its unrounded kcal and daily cost."""
    if food is None:
        empty = SelectedFoodPortion(
            food_id=selection.food_id,
            food=None,
            meal_count=selection.meal_count,
            daily_amount=0.0,
            amount_per_meal=0.0,
            unit="unit",
            kcal=0,
            daily_cost=0.0,
        )
        return empty, 0.0, 0.0

    density = energy_density(food)
    if density.kcal == 0:
        amount = 0.0
    else:
        share = selection.meal_count / total_meals * target_energy
        amount = round_to_practical_portion(share / density.kcal, food.form)
    kcal = amount * density.kcal
    cost = daily_cost_for_amount(food, amount)
    portion = SelectedFoodPortion(
        food_id=selection.food_id,
        food=food,
        meal_count=selection.meal_count,
        daily_amount=round_amount(amount),
        amount_per_meal=round_amount(
            amount / selection.meal_count if selection.meal_count > 0 else 0.0
        ),
        unit=density.unit,
        kcal=round_kcal(kcal),
        daily_cost=round_money(cost),
    )
    return portion, kcal, cost


def aggregate_multi_food_plan(
    selections: Sequence[FoodSelection],
    catalog: Sequence[FoodItem],
    target_energy: float,
    meals_per_day: int,
    *,
    max_deviation_percent: float = MAX_DEVIATION_PERCENT,
) -> PlanSummary:
    """Split the target energy across selections by meal count.

    ``target_energy`` may be the live profile's DER or the target stored
    with a saved plan. A plan is valid only when its meal counts add up
    to ``meals_per_day`` and its total stays within the deviation band.
    """
    total_meals = sum(selection.meal_count for selection in selections)
    if not selections or total_meals <= 0:
        return PlanSummary(
            foods=(),
            total_kcal=0,
            target_kcal=round_kcal(target_energy),
            difference=-round_kcal(target_energy),
            percent_difference=-100.0,
            total_daily_cost=0.0,
            total_monthly_cost=0.0,
            is_valid=False,
            message=EMPTY_PLAN_MESSAGE,
            total_meals_used=0,
        )

    foods_by_id = {food.id: food for food in catalog}
    portions = []
    total_kcal = 0.0
    total_cost = 0.0
    for selection in selections:
        portion, kcal, cost = _portion_for(
            selection, foods_by_id.get(selection.food_id), total_meals, target_energy
        )
        portions.append(portion)
        total_kcal += kcal
        total_cost += cost

    has_target = target_energy > 0
    difference = total_kcal - target_energy
    percent = difference / target_energy * 100 if has_target else 0.0
    is_valid = (
        has_target
        and total_meals == meals_per_day
        and abs(percent) <= max_deviation_percent
    )

    return PlanSummary(
        foods=tuple(portions),
        total_kcal=round_kcal(total_kcal),
        target_kcal=round_kcal(target_energy),
        difference=round_kcal(difference),
        percent_difference=round_percent(percent),
        total_daily_cost=round_money(total_cost),
        total_monthly_cost=round_money(total_cost * DAYS_PER_MONTH),
        is_valid=is_valid,
        message=_status_message(
            total_meals, meals_per_day, percent, max_deviation_percent, has_target
        ),
        total_meals_used=total_meals,
    )


def suggest_complementary_foods(  # noqa: PLR0913
    profile: AnimalProfile,
    catalog: Sequence[FoodItem],
    selections: Sequence[FoodSelection],
    summary: PlanSummary,
    meals_per_day: int,
    limit: int = 3,
) -> list[ComplementarySuggestion]:
    """Rank foods that could fill the slots a custom plan leaves open.

    Opposite-form foods are preferred while the plan holds only one form.
    """
    remaining_slots = meals_per_day - summary.total_meals_used
    if remaining_slots <= 0 or not selections:
        return []

    foods_by_id = {food.id: food for food in catalog}
    selected_ids = {selection.food_id for selection in selections}
    selected = [
        foods_by_id[selection.food_id]
        for selection in selections
        if selection.food_id in foods_by_id
    ]
    selected_forms = {food.form for food in selected}

    unselected = [food for food in catalog if food.id not in selected_ids]
    if len(selected_forms) == 1:
        wanted = opposite_form(next(iter(selected_forms)))
        candidates = [food for food in catalog if food.form is wanted] or unselected
    else:
        candidates = unselected
    if not candidates:
        return []

    recommendations = generate_recommendations(profile, candidates)
    kcal_per_slot = (summary.target_kcal - summary.total_kcal) / remaining_slots

    suggestions = []
    for rec in recommendations:
        density = energy_density(rec.food)
        amount = round_to_practical_portion(kcal_per_slot / density.kcal, rec.food.form)
        kcal = amount * density.kcal
        calorie_fit = abs(kcal - kcal_per_slot)
        variety = (
            VARIETY_BONUS
            if selected and all(food.form is not rec.food.form for food in selected)
            else 0.0
        )
        suggestions.append(
            ComplementarySuggestion(
                recommendation=rec,
                daily_amount=round_amount(amount),
                kcal=round_kcal(kcal),
                calorie_fit=round_amount(calorie_fit),
                combined_score=(
                    rec.score.nutrition_score
                    + rec.score.value_score
                    + variety
                    - calorie_fit / 100
                ),
            )
        )

    suggestions.sort(key=lambda suggestion: suggestion.combined_score, reverse=True)
    return suggestions[:limit]
