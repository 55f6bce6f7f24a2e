"""Cost model for food packages."""

import math

from feeding_planner.domain.constants import DAYS_PER_MONTH
from feeding_planner.domain.foods import EnergyDensity, FoodForm, FoodItem


def energy_density(food: FoodItem) -> EnergyDensity:
    """Return kcal per cup (dry) or per can (wet).

    A food whose populated energy field does not match its form has no
    usable density and reports 0 kcal.
    """
    if food.form is FoodForm.DRY and food.kcal_per_cup:
        return EnergyDensity(kcal=food.kcal_per_cup, unit="cup")
    if food.form is FoodForm.WET and food.kcal_per_can:
        return EnergyDensity(kcal=food.kcal_per_can, unit="can")
    return EnergyDensity(kcal=0.0, unit="unit")


def total_energy_per_package(food: FoodItem) -> float:
    """Total kcal in one package."""
    return energy_density(food).kcal * food.servings_per_unit


def cost_per_100kcal(price: float, total_kcal: float) -> float:
    """Package price per 100 kcal; infinite for an energy-free package."""
    if total_kcal == 0:
        return math.inf
    return (price / total_kcal) * 100


def food_cost_per_100kcal(food: FoodItem) -> float:
    return cost_per_100kcal(food.price, total_energy_per_package(food))


def daily_cost(der: float, cost_per_100: float) -> float:
    """Cost of feeding ``der`` kcal per day."""
    return der * (cost_per_100 / 100)


def monthly_cost(daily: float) -> float:
    return daily * DAYS_PER_MONTH


def daily_cost_for_amount(food: FoodItem, daily_amount: float) -> float:
    """Cost of feeding ``daily_amount`` cups or cans of a food per day."""
    density = energy_density(food)
    if density.kcal == 0:
        return 0.0
    return daily_cost(daily_amount * density.kcal, food_cost_per_100kcal(food))
