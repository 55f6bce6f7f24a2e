"""Domain models for scored food recommendations."""

from dataclasses import dataclass
from enum import Enum

from feeding_planner.domain.foods import FoodItem


class Badge(Enum):
    """Superlative label attached to a food within one ranked batch."""

    BEST_VALUE = "best_value"
    BEST_NUTRITION = "best_nutrition"
    BEST_MATCH = "best_match"
    BUDGET_PICK = "budget_pick"


@dataclass(frozen=True)
class HealthCompatibility:
    """Result of checking a food against a set of health conditions."""

    compatible: bool
    matched_benefits: tuple[str, ...]
    score: float


@dataclass(frozen=True)
class ScoreBreakdown:
    """Contributing components of a recommendation score."""

    dry_matter_protein: int
    fat_to_protein_ratio: int
    fiber_level: int
    health_condition_match: int
    cost_efficiency: int
    life_stage_match: int


@dataclass(frozen=True)
class RecommendationScore:
    """Overall score with its three sub-scores."""

    overall: int
    nutrition_score: int
    value_score: int
    suitability_score: int
    breakdown: ScoreBreakdown


@dataclass(frozen=True)
class FoodRecommendation:
    """A catalog food with feeding amounts, costs, score and badges."""

    food: FoodItem
    daily_amount: float
    amount_unit: str
    amount_per_meal: float
    daily_cost: float
    monthly_cost: float
    cost_per_100kcal: float
    score: RecommendationScore
    badges: tuple[Badge, ...] = ()


@dataclass(frozen=True)
class ComplementarySuggestion:
    """A food suggested to fill the remaining slots of a custom plan."""

    recommendation: FoodRecommendation
    daily_amount: float
    kcal: int
    calorie_fit: float
    combined_score: float
