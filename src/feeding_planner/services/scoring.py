"""Multi-criteria scoring of foods for a profile."""

from collections.abc import Sequence
from dataclasses import dataclass

from feeding_planner.domain.constants import (
    HEALTH_CONDITION_REQUIREMENTS,
    SCORING_WEIGHTS,
)
from feeding_planner.domain.foods import FoodItem, LifeStage
from feeding_planner.domain.profiles import AnimalProfile
from feeding_planner.domain.recommendations import RecommendationScore, ScoreBreakdown
from feeding_planner.services.compatibility import is_life_stage_appropriate
from feeding_planner.services.rounding import round_half_up

PROTEIN_CEILING_PCT = 50.0
PROTEIN_MAX_POINTS = 40.0
IDEAL_FAT_PROTEIN_RATIO = 0.45
RATIO_TOLERANCE = 0.3
RATIO_MAX_POINTS = 20.0
FIBER_MIN_PCT = 2.0
FIBER_MAX_PCT = 5.0
COMPLETE_BALANCED_POINTS = 20.0
HEALTH_MATCH_MAX_POINTS = 50.0
PREFERRED_BENEFIT_POINTS = 5.0
BENEFIT_POINTS = 5
BENEFIT_MAX_POINTS = 25
EMPTY_BATCH_VALUE_SCORE = 50


@dataclass(frozen=True)
class NutritionResult:
    score: int
    dry_matter_protein: int
    fat_to_protein_ratio: int
    fiber_level: int


@dataclass(frozen=True)
class SuitabilityResult:
    score: int
    health_condition_match: int
    life_stage_match: int


def _round(value: float) -> int:
    return int(round_half_up(value))


def dry_matter_protein(food: FoodItem) -> float:
    """Protein percentage re-based against non-moisture mass."""
    dry_matter = 100 - food.moisture_pct
    if dry_matter == 0:
        return 0.0
    return (food.protein_pct / dry_matter) * 100


def _fiber_points(fiber_pct: float) -> float:
    if FIBER_MIN_PCT <= fiber_pct <= FIBER_MAX_PCT:
        return 20.0
    if fiber_pct < FIBER_MIN_PCT:
        return 14.0
    return 10.0


def nutrition_score(food: FoodItem) -> NutritionResult:
    """Score protein, fat balance, fiber and completeness (0-100)."""
    protein_points = (
        min(dry_matter_protein(food) / PROTEIN_CEILING_PCT, 1.0) * PROTEIN_MAX_POINTS
    )

    ratio = food.fat_pct / (food.protein_pct or 1)
    deviation = abs(ratio - IDEAL_FAT_PROTEIN_RATIO) / RATIO_TOLERANCE
    ratio_points = (1 - min(deviation, 1.0)) * RATIO_MAX_POINTS

    fiber_points = _fiber_points(food.fiber_pct)
    completeness = COMPLETE_BALANCED_POINTS if food.is_complete_balanced else 0.0

    return NutritionResult(
        score=_round(protein_points + ratio_points + fiber_points + completeness),
        dry_matter_protein=_round(protein_points),
        fat_to_protein_ratio=_round(ratio_points),
        fiber_level=_round(fiber_points),
    )


def value_score(cost: float, all_costs: Sequence[float]) -> int:
    """Inverse-normalize a cost against the batch's cost range (0-100)."""
    if not all_costs:
        return EMPTY_BATCH_VALUE_SCORE
    low = min(all_costs)
    spread = max(all_costs) - low
    if spread == 0:
        return 100
    return _round((1 - (cost - low) / spread) * 100)


def _health_match_points(food: FoodItem, conditions: Sequence[str]) -> int:
    if not conditions:
        return int(HEALTH_MATCH_MAX_POINTS)
    share = HEALTH_MATCH_MAX_POINTS / len(conditions)
    benefits = set(food.special_benefits)
    points = 0.0
    for condition in conditions:
        requirement = HEALTH_CONDITION_REQUIREMENTS.get(condition)
        if requirement is None:
            continue
        required_hits = sum(1 for b in requirement.required_benefits if b in benefits)
        points += required_hits / (len(requirement.required_benefits) or 1) * share
        if any(b in benefits for b in requirement.preferred_benefits):
            points += PREFERRED_BENEFIT_POINTS / len(conditions)
    return min(_round(points), int(HEALTH_MATCH_MAX_POINTS))


def suitability_score(
    food: FoodItem, profile: AnimalProfile, conditions: Sequence[str]
) -> SuitabilityResult:
    """Score life-stage fit, health-condition fit and benefits (0-100)."""
    if food.life_stage is LifeStage.ALL:
        life_stage_points = 20
    elif is_life_stage_appropriate(food, profile):
        life_stage_points = 25
    else:
        life_stage_points = 0

    health_points = _health_match_points(food, conditions)
    benefit_points = min(len(food.special_benefits) * BENEFIT_POINTS, BENEFIT_MAX_POINTS)

    return SuitabilityResult(
        score=min(life_stage_points + health_points + benefit_points, 100),
        health_condition_match=health_points,
        life_stage_match=life_stage_points,
    )


def overall_score(nutrition: int, value: int, suitability: int) -> int:
    """Weighted combination of the three sub-scores."""
    return _round(
        nutrition * SCORING_WEIGHTS["nutrition"]
        + value * SCORING_WEIGHTS["value"]
        + suitability * SCORING_WEIGHTS["suitability"]
    )


def score_food(
    food: FoodItem,
    profile: AnimalProfile,
    cost: float,
    all_costs: Sequence[float],
    conditions: Sequence[str],
) -> RecommendationScore:
    """Compute the full recommendation score of a food within a batch."""
    nutrition = nutrition_score(food)
    value = value_score(cost, all_costs)
    suitability = suitability_score(food, profile, conditions)
    return RecommendationScore(
        overall=overall_score(nutrition.score, value, suitability.score),
        nutrition_score=nutrition.score,
        value_score=value,
        suitability_score=suitability.score,
        breakdown=ScoreBreakdown(
            dry_matter_protein=nutrition.dry_matter_protein,
            fat_to_protein_ratio=nutrition.fat_to_protein_ratio,
            fiber_level=nutrition.fiber_level,
            health_condition_match=suitability.health_condition_match,
            cost_efficiency=value,
            life_stage_match=suitability.life_stage_match,
        ),
    )
