"""Energy requirement calculations for an animal profile."""

import math

from feeding_planner.domain.constants import (
    KG_PER_LB_DIVISOR,
    KITTEN_MAX_AGE_MONTHS,
    LIFE_STAGE_FACTORS,
    SENIOR_MIN_AGE_MONTHS,
    TREAT_FRACTION,
)
from feeding_planner.domain.foods import LifeStage
from feeding_planner.domain.nutrition import LifeStageFactor, NutritionPlan
from feeding_planner.domain.profiles import ActivityLevel, AnimalProfile, WeightGoal
from feeding_planner.services.rounding import round_kcal

DEFAULT_MEALS_PER_DAY = 2
KITTEN_MEALS_PER_DAY = 4
WEIGHT_LOSS_MEALS_PER_DAY = 3


def pounds_to_kg(weight_lbs: float) -> float:
    """Convert pounds to kilograms."""
    return weight_lbs / KG_PER_LB_DIVISOR


def resting_energy(weight_kg: float) -> float:
    """Resting energy requirement: 70 * kg^0.75, NaN for a negative weight."""
    if weight_kg < 0:
        return math.nan
    return 70 * weight_kg**0.75


def is_kitten(profile: AnimalProfile) -> bool:
    return profile.age_months < KITTEN_MAX_AGE_MONTHS


def age_bracket(profile: AnimalProfile) -> LifeStage:
    """Return the life stage the profile's age falls into."""
    if is_kitten(profile):
        return LifeStage.KITTEN
    if profile.age_months >= SENIOR_MIN_AGE_MONTHS:
        return LifeStage.SENIOR
    return LifeStage.ADULT


def life_stage_factor(profile: AnimalProfile) -> LifeStageFactor:
    """Pick the DER multiplier; earlier rules take priority."""
    if is_kitten(profile):
        return LIFE_STAGE_FACTORS["kitten"]
    if profile.goal is WeightGoal.LOSE:
        return LIFE_STAGE_FACTORS["weight_loss"]
    if profile.activity_level is ActivityLevel.INACTIVE:
        return LIFE_STAGE_FACTORS["inactive"]
    if profile.activity_level is ActivityLevel.ACTIVE:
        return LIFE_STAGE_FACTORS["active"]
    if profile.is_altered:
        return LIFE_STAGE_FACTORS["adult_neutered"]
    return LIFE_STAGE_FACTORS["adult_intact"]


def daily_energy_requirement(profile: AnimalProfile) -> float:
    """Unrounded DER used by every downstream computation."""
    rer = resting_energy(pounds_to_kg(profile.weight_lbs))
    return rer * life_stage_factor(profile).factor


def meals_per_day(profile: AnimalProfile) -> int:
    """Recommended number of meals per day."""
    if is_kitten(profile):
        return KITTEN_MEALS_PER_DAY
    if profile.goal is WeightGoal.LOSE:
        return WEIGHT_LOSS_MEALS_PER_DAY
    return profile.meals_per_day or DEFAULT_MEALS_PER_DAY


def compute_nutrition_plan(profile: AnimalProfile) -> NutritionPlan:
    """Calculate the complete nutrition plan for a profile."""
    rer = resting_energy(pounds_to_kg(profile.weight_lbs))
    stage = life_stage_factor(profile)
    der = rer * stage.factor
    return NutritionPlan(
        rer=round_kcal(rer),
        der=round_kcal(der),
        factor=stage.factor,
        factor_name=stage.name,
        treat_budget=round_kcal(der * TREAT_FRACTION),
        meals_per_day=meals_per_day(profile),
    )
