"""Domain models for portions and meal plans."""

from dataclasses import dataclass
from enum import Enum

from feeding_planner.domain.foods import FoodItem


class PlanType(Enum):
    """Shape of a meal-plan option."""

    SINGLE = "single"
    COMBO = "combo"


@dataclass(frozen=True)
class PortionOption:
    """A discretized daily amount and how well it fits the target."""

    amount: float
    unit: str
    kcal: int
    difference: int
    percent_difference: float
    practicality_score: float


@dataclass(frozen=True)
class FoodPortion:
    """Daily amount of one food inside a meal-plan option."""

    food: FoodItem
    daily_amount: float
    unit: str
    kcal: int


@dataclass(frozen=True)
class MealPlanOption:
    """A ranked single-food or two-food daily feeding option."""

    id: str
    type: PlanType
    primary: FoodPortion
    total_kcal: int
    difference: int
    percent_difference: float
    daily_cost: float
    monthly_cost: float
    suitability_note: str
    rank: int = 0
    complement: FoodPortion | None = None


@dataclass(frozen=True)
class FoodSelection:
    """A food chosen for a custom plan and the meals it covers."""

    food_id: str
    meal_count: int


@dataclass(frozen=True)
class SelectedFoodPortion:
    """Computed share of a custom plan for one selection."""

    food_id: str
    food: FoodItem | None
    meal_count: int
    daily_amount: float
    amount_per_meal: float
    unit: str
    kcal: int
    daily_cost: float


@dataclass(frozen=True)
class PlanSummary:
    """Aggregate totals and status of a custom multi-food plan."""

    foods: tuple[SelectedFoodPortion, ...]
    total_kcal: int
    target_kcal: int
    difference: int
    percent_difference: float
    total_daily_cost: float
    total_monthly_cost: float
    is_valid: bool
    message: str
    total_meals_used: int
