"""Pydantic request models for the planner API."""

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, Field

from feeding_planner.config import parse_condition_list
from feeding_planner.domain.foods import FoodForm, FoodItem, LifeStage
from feeding_planner.domain.meal_plans import FoodSelection
from feeding_planner.domain.profiles import (
    ActivityLevel,
    AnimalProfile,
    Sex,
    WeightGoal,
)


def _split_conditions(value: object) -> object:
    if isinstance(value, str):
        return list(parse_condition_list(value))
    return value


ConditionList = Annotated[list[str], BeforeValidator(_split_conditions)]


class ProfilePayload(BaseModel):
    """Animal profile payload."""

    id: str
    name: str = ""
    weight_lbs: float = Field(gt=0)
    age_months: int = Field(ge=0)
    sex: Sex = Sex.FEMALE
    is_altered: bool = True
    breed: str = "Unknown"
    activity_level: ActivityLevel = ActivityLevel.NORMAL
    goal: WeightGoal = WeightGoal.MAINTAIN
    health_conditions: ConditionList = Field(default_factory=list)
    meals_per_day: int | None = Field(default=None, ge=1)

    def to_domain(self) -> AnimalProfile:
        return AnimalProfile(
            id=self.id,
            name=self.name,
            weight_lbs=self.weight_lbs,
            age_months=self.age_months,
            sex=self.sex,
            is_altered=self.is_altered,
            breed=self.breed,
            activity_level=self.activity_level,
            goal=self.goal,
            health_conditions=tuple(self.health_conditions),
            meals_per_day=self.meals_per_day,
        )


class FoodPayload(BaseModel):
    """Catalog food payload."""

    id: str
    brand: str
    product_name: str
    form: FoodForm
    life_stage: LifeStage = LifeStage.ALL
    price: float = Field(ge=0)
    protein_pct: float = Field(ge=0, le=100)
    fat_pct: float = Field(ge=0, le=100)
    fiber_pct: float = Field(ge=0, le=100)
    moisture_pct: float = Field(ge=0, le=100)
    kcal_per_cup: float | None = Field(default=None, ge=0)
    kcal_per_can: float | None = Field(default=None, ge=0)
    can_size_oz: float | None = Field(default=None, ge=0)
    unit_size: str = ""
    servings_per_unit: float = Field(default=1.0, gt=0)
    special_benefits: list[str] = Field(default_factory=list)
    is_complete_balanced: bool = True

    def to_domain(self) -> FoodItem:
        return FoodItem(
            id=self.id,
            brand=self.brand,
            product_name=self.product_name,
            form=self.form,
            life_stage=self.life_stage,
            price=self.price,
            protein_pct=self.protein_pct,
            fat_pct=self.fat_pct,
            fiber_pct=self.fiber_pct,
            moisture_pct=self.moisture_pct,
            kcal_per_cup=self.kcal_per_cup,
            kcal_per_can=self.kcal_per_can,
            can_size_oz=self.can_size_oz,
            unit_size=self.unit_size,
            servings_per_unit=self.servings_per_unit,
            special_benefits=tuple(self.special_benefits),
            is_complete_balanced=self.is_complete_balanced,
        )


class SelectionPayload(BaseModel):
    """A food selection of a custom plan."""

    food_id: str
    meal_count: int = Field(ge=1)

    def to_domain(self) -> FoodSelection:
        return FoodSelection(food_id=self.food_id, meal_count=self.meal_count)


class NutritionPlanRequest(BaseModel):
    profile: ProfilePayload


class RecommendationRequest(BaseModel):
    """Ranked recommendation request."""

    profile: ProfilePayload
    foods: list[FoodPayload]
    form_preference: Literal["any", "dry", "wet"] = "any"
    max_monthly_budget: float | None = Field(default=None, ge=0)
    health_conditions: ConditionList | None = None

    def form(self) -> FoodForm | None:
        if self.form_preference == "any":
            return None
        return FoodForm(self.form_preference)


class PortionOptionsRequest(BaseModel):
    food: FoodPayload
    target_energy: float = Field(ge=0)
    meals_per_day: int = Field(default=2, ge=1)


class MealPlanOptionsRequest(BaseModel):
    """Meal-plan options request for a primary food in the catalog."""

    primary_food_id: str
    profile: ProfilePayload
    catalog: list[FoodPayload]
    max_options: int | None = Field(default=None, ge=1)


class PlanRequest(BaseModel):
    """Custom multi-food plan request."""

    selections: list[SelectionPayload]
    catalog: list[FoodPayload]
    target_energy: float = Field(ge=0)
    meals_per_day: int = Field(ge=1)


class SuggestionRequest(PlanRequest):
    profile: ProfilePayload
