"""Domain models for commercial food products."""

from dataclasses import dataclass
from enum import Enum


class FoodForm(Enum):
    """Physical form of a food product."""

    DRY = "dry"
    WET = "wet"


class LifeStage(Enum):
    """Life stage a food (or an animal) belongs to."""

    KITTEN = "kitten"
    ADULT = "adult"
    SENIOR = "senior"
    ALL = "all"


@dataclass(frozen=True)
class FoodItem:
    """A catalog entry for a commercial food product.

    Dry foods carry ``kcal_per_cup``; wet foods carry ``kcal_per_can`` and
    ``can_size_oz``. ``price`` is the price of one package and
    ``servings_per_unit`` the number of cups or cans it holds.
    """

    id: str
    brand: str
    product_name: str
    form: FoodForm
    life_stage: LifeStage
    price: float
    protein_pct: float
    fat_pct: float
    fiber_pct: float
    moisture_pct: float
    kcal_per_cup: float | None = None
    kcal_per_can: float | None = None
    can_size_oz: float | None = None
    unit_size: str = ""
    servings_per_unit: float = 1.0
    special_benefits: tuple[str, ...] = ()
    is_complete_balanced: bool = True


@dataclass(frozen=True)
class EnergyDensity:
    """Energy per measuring unit (cup or can) of a food."""

    kcal: float
    unit: str
