"""Practical portion rounding and portion option search."""

import math

from feeding_planner.domain.constants import MAX_DEVIATION_PERCENT, PORTION_INCREMENTS
from feeding_planner.domain.foods import FoodForm, FoodItem
from feeding_planner.domain.meal_plans import PortionOption
from feeding_planner.services.costs import energy_density
from feeding_planner.services.rounding import (
    round_amount,
    round_kcal,
    round_percent,
)


def portion_increment(form: FoodForm) -> float:
    """Smallest practical measuring step for a food form."""
    return PORTION_INCREMENTS[form]


def round_to_practical_portion(amount: float, form: FoodForm) -> float:
    if not math.isfinite(amount):
        return amount
    increment = portion_increment(form)
    return math.floor(amount / increment + 0.5) * increment


def round_down_to_practical_portion(amount: float, form: FoodForm) -> float:
    increment = portion_increment(form)
    return math.floor(amount / increment) * increment


def round_up_to_practical_portion(amount: float, form: FoodForm) -> float:
    increment = portion_increment(form)
    return math.ceil(amount / increment) * increment


def practicality_score(amount: float, form: FoodForm) -> float:
    """How easily an amount is measured: whole > half > quarter > other."""
    fraction = amount % 1
    if fraction == 0:
        return 1.0
    if fraction == 0.5:
        return 0.9
    if form is FoodForm.DRY and fraction in (0.25, 0.75):
        return 0.8
    return 0.7


def generate_portion_options(
    food: FoodItem,
    target_energy: float,
    meals_per_day: int = 2,
    *,
    max_deviation_percent: float = MAX_DEVIATION_PERCENT,
) -> list[PortionOption]:
    """Sweep practical daily amounts within the allowed deviation band.

    Options are ordered by practicality, then by closeness to the target.
    ``meals_per_day`` does not change the daily amounts.
    """
    density = energy_density(food)
    if density.kcal == 0 or not target_energy > 0:
        return []

    increment = portion_increment(food.form)
    band = max_deviation_percent / 100
    min_amount = target_energy * (1 - band) / density.kcal
    max_amount = target_energy * (1 + band) / density.kcal

    scored: list[tuple[float, float, PortionOption]] = []
    step = max(math.ceil(min_amount / increment), 1)
    while step * increment <= max_amount:
        amount = step * increment
        step += 1
        kcal = amount * density.kcal
        difference = kcal - target_energy
        percent = difference / target_energy * 100
        if abs(percent) > max_deviation_percent:
            continue
        practicality = practicality_score(amount, food.form)
        option = PortionOption(
            amount=round_amount(amount),
            unit=density.unit,
            kcal=round_kcal(kcal),
            difference=round_kcal(difference),
            percent_difference=round_percent(percent),
            practicality_score=practicality,
        )
        scored.append((-practicality, abs(percent), option))

    scored.sort(key=lambda entry: (entry[0], entry[1]))
    return [option for _, _, option in scored]
