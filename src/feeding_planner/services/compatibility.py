"""Eligibility checks of foods against a profile."""

from collections.abc import Iterable

from feeding_planner.domain.constants import HEALTH_CONDITION_REQUIREMENTS
from feeding_planner.domain.foods import FoodItem, LifeStage
from feeding_planner.domain.profiles import AnimalProfile
from feeding_planner.domain.recommendations import HealthCompatibility
from feeding_planner.services.energy import age_bracket

COMPATIBILITY_THRESHOLD = 0.3
REQUIRED_MATCH_BONUS = 0.2
REQUIRED_MISS_PENALTY = 0.5
PREFERRED_MATCH_BONUS = 0.1
MACRO_PENALTY = 0.3
FIBER_PENALTY = 0.2


def is_life_stage_appropriate(food: FoodItem, profile: AnimalProfile) -> bool:
    """Return whether a food suits the profile's age bracket."""
    if food.life_stage is LifeStage.ALL:
        return True
    bracket = age_bracket(profile)
    if food.life_stage is bracket:
        return True
    # Seniors can also eat adult formulas.
    return bracket is LifeStage.SENIOR and food.life_stage is LifeStage.ADULT


def check_health_compatibility(
    food: FoodItem, conditions: Iterable[str]
) -> HealthCompatibility:
    """Score a food against the requirements of each health condition.

    Unknown condition tags are ignored. With no conditions every food is
    compatible with a score of 1.0.
    """
    score = 1.0
    matched: list[str] = []
    benefits = set(food.special_benefits)

    for condition in conditions:
        requirement = HEALTH_CONDITION_REQUIREMENTS.get(condition)
        if requirement is None:
            continue

        required_hits = [b for b in requirement.required_benefits if b in benefits]
        score += REQUIRED_MATCH_BONUS * len(required_hits)
        if requirement.required_benefits and not required_hits:
            score -= REQUIRED_MISS_PENALTY

        preferred_hits = [b for b in requirement.preferred_benefits if b in benefits]
        score += PREFERRED_MATCH_BONUS * len(preferred_hits)

        for benefit in (*required_hits, *preferred_hits):
            if benefit not in matched:
                matched.append(benefit)

        if (
            requirement.max_fat_pct is not None
            and food.fat_pct > requirement.max_fat_pct
        ):
            score -= MACRO_PENALTY
        if (
            requirement.min_protein_pct is not None
            and food.protein_pct < requirement.min_protein_pct
        ):
            score -= MACRO_PENALTY
        if (
            requirement.max_fiber_pct is not None
            and food.fiber_pct > requirement.max_fiber_pct
        ):
            score -= FIBER_PENALTY

    return HealthCompatibility(
        compatible=score > COMPATIBILITY_THRESHOLD,
        matched_benefits=tuple(matched),
        score=max(score, 0.0),
    )
