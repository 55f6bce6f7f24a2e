"""Domain models for animal profiles."""

from dataclasses import dataclass
from enum import Enum


class Sex(Enum):
    """Biological sex of the animal."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level reported by the owner."""

    INACTIVE = "inactive"
    NORMAL = "normal"
    ACTIVE = "active"


class WeightGoal(Enum):
    """Weight goal for the feeding plan."""

    MAINTAIN = "maintain"
    LOSE = "lose"
    GAIN = "gain"


@dataclass(frozen=True)
class AnimalProfile:
    """Physiological profile of a companion animal."""

    id: str
    name: str
    weight_lbs: float
    age_months: int
    sex: Sex = Sex.FEMALE
    is_altered: bool = True
    breed: str = "Unknown"
    activity_level: ActivityLevel = ActivityLevel.NORMAL
    goal: WeightGoal = WeightGoal.MAINTAIN
    health_conditions: tuple[str, ...] = ()
    meals_per_day: int | None = None
    primary_food_id: str | None = None
    primary_daily_amount: float | None = None
    secondary_food_id: str | None = None
    secondary_daily_amount: float | None = None
