"""Static lookup tables used by the planning engine."""

from dataclasses import dataclass
from types import MappingProxyType

from feeding_planner.domain.foods import FoodForm
from feeding_planner.domain.nutrition import LifeStageFactor

KG_PER_LB_DIVISOR = 2.20462
KITTEN_MAX_AGE_MONTHS = 12
SENIOR_MIN_AGE_MONTHS = 84
TREAT_FRACTION = 0.1
DAYS_PER_MONTH = 30

LIFE_STAGE_FACTORS = MappingProxyType(
    {
        "kitten": LifeStageFactor(2.5, "Kitten (growing)"),
        "adult_neutered": LifeStageFactor(1.2, "Adult (neutered)"),
        "adult_intact": LifeStageFactor(1.4, "Adult (intact)"),
        "inactive": LifeStageFactor(1.0, "Inactive/Obesity-prone"),
        "weight_loss": LifeStageFactor(0.8, "Weight loss"),
        "active": LifeStageFactor(1.6, "Active"),
    }
)

SPECIAL_BENEFITS = (
    "Hairball Control",
    "Weight Management",
    "Urinary Health",
    "Sensitive Stomach",
    "Dental Health",
    "Skin & Coat",
    "Joint Support",
    "Indoor Formula",
    "High Protein",
    "Grain Free",
)


@dataclass(frozen=True)
class ConditionRequirement:
    """Food requirements associated with a health condition."""

    required_benefits: tuple[str, ...] = ()
    preferred_benefits: tuple[str, ...] = ()
    max_fat_pct: float | None = None
    min_protein_pct: float | None = None
    max_fiber_pct: float | None = None


HEALTH_CONDITION_REQUIREMENTS = MappingProxyType(
    {
        "weight_management": ConditionRequirement(
            required_benefits=("Weight Management",),
            preferred_benefits=("Indoor Formula",),
            max_fat_pct=12,
        ),
        "sensitive_stomach": ConditionRequirement(
            required_benefits=("Sensitive Stomach",),
            preferred_benefits=("Grain Free",),
            max_fiber_pct=5,
        ),
        "urinary_health": ConditionRequirement(required_benefits=("Urinary Health",)),
        "hairball_control": ConditionRequirement(
            required_benefits=("Hairball Control",),
            preferred_benefits=("Indoor Formula",),
        ),
        "dental_health": ConditionRequirement(required_benefits=("Dental Health",)),
        "skin_coat": ConditionRequirement(required_benefits=("Skin & Coat",)),
        "joint_support": ConditionRequirement(required_benefits=("Joint Support",)),
        # Kidney diets are judged on protein restriction, not benefit tags.
        "kidney_support": ConditionRequirement(),
        "diabetic": ConditionRequirement(
            required_benefits=("High Protein",),
            min_protein_pct=40,
            max_fat_pct=15,
        ),
    }
)

SCORING_WEIGHTS = MappingProxyType(
    {
        "nutrition": 0.35,
        "value": 0.30,
        "suitability": 0.35,
    }
)

PORTION_INCREMENTS = MappingProxyType(
    {
        FoodForm.DRY: 0.25,
        FoodForm.WET: 0.5,
    }
)

MAX_DEVIATION_PERCENT = 20.0
MIN_COMBO_GAP_KCAL = 20.0
