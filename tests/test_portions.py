"""Tests for practical portion rounding and options."""

import math

from feeding_planner.domain.foods import FoodForm
from feeding_planner.services.portions import (
    generate_portion_options,
    practicality_score,
    round_down_to_practical_portion,
    round_to_practical_portion,
    round_up_to_practical_portion,
)
from tests.conftest import make_food, make_wet_food


def test_rounds_to_form_increment() -> None:
    assert round_to_practical_portion(0.6, FoodForm.DRY) == 0.5
    assert round_to_practical_portion(0.65, FoodForm.DRY) == 0.75
    assert round_to_practical_portion(0.7, FoodForm.WET) == 0.5
    assert round_to_practical_portion(0.8, FoodForm.WET) == 1.0


def test_rounding_is_idempotent() -> None:
    for amount in (0.1, 0.33, 0.8, 1.4, 2.9):
        for form in (FoodForm.DRY, FoodForm.WET):
            once = round_to_practical_portion(amount, form)
            assert round_to_practical_portion(once, form) == once


def test_round_down_and_up() -> None:
    assert round_down_to_practical_portion(0.65, FoodForm.DRY) == 0.5
    assert round_up_to_practical_portion(0.55, FoodForm.DRY) == 0.75
    assert round_down_to_practical_portion(0.9, FoodForm.WET) == 0.5
    assert round_up_to_practical_portion(0.1, FoodForm.WET) == 0.5


def test_practicality_ranks_common_measures() -> None:
    assert practicality_score(1.0, FoodForm.DRY) == 1.0
    assert practicality_score(1.5, FoodForm.WET) == 0.9
    assert practicality_score(0.75, FoodForm.DRY) == 0.8
    assert practicality_score(0.125, FoodForm.DRY) == 0.7


def test_single_option_near_target() -> None:
    options = generate_portion_options(make_food(), 300, 2)

    assert len(options) == 1
    option = options[0]
    assert option.amount == 0.75
    assert option.unit == "cup"
    assert option.kcal == 300
    assert option.difference == 0
    assert option.percent_difference == 0.0
    assert option.practicality_score == 0.8


def test_options_ordered_by_practicality_then_closeness() -> None:
    options = generate_portion_options(make_food(kcal_per_cup=100.0), 300)

    amounts = [option.amount for option in options]
    assert amounts[:2] == [3.0, 2.5]
    assert all(abs(option.percent_difference) <= 20 for option in options)
    assert sorted(amounts) == [2.5, 2.75, 3.0, 3.25, 3.5]


def test_wet_food_uses_half_cans() -> None:
    options = generate_portion_options(make_wet_food(kcal_per_can=100.0), 260)

    assert [option.amount for option in options] == [3.0, 2.5]
    assert options[0].unit == "can"


def test_no_options_without_energy_or_target() -> None:
    assert generate_portion_options(make_food(kcal_per_cup=None), 300) == []
    assert generate_portion_options(make_food(), 0) == []


def test_custom_tolerance() -> None:
    options = generate_portion_options(
        make_food(kcal_per_cup=100.0), 300, max_deviation_percent=5.0
    )

    assert [option.amount for option in options] == [3.0]


def test_non_finite_target_has_no_options() -> None:
    assert generate_portion_options(make_food(), math.nan) == []
    assert math.isnan(round_to_practical_portion(math.nan, FoodForm.DRY))
