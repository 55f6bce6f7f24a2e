"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LifeStageFactor:
    """Multiplier applied to the resting energy requirement."""

    factor: float
    name: str


@dataclass(frozen=True)
class NutritionPlan:
    """Daily energy targets and meal cadence for a profile."""

    rer: float
    der: float
    factor: float
    factor_name: str
    treat_budget: float
    meals_per_day: int
