"""Human-readable strings for plans and profiles."""

from feeding_planner.domain.meal_plans import MealPlanOption, PlanType

MONTHS_PER_YEAR = 12


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def format_feeding_schedule(
    meals_per_day: int, amount_per_meal: float, unit: str
) -> str:
    """Describe a schedule, e.g. ``0.50 cup(s) twice daily``."""
    times = "twice" if meals_per_day == 2 else f"{meals_per_day} times"
    return f"{amount_per_meal:.2f} {unit}(s) {times} daily"


def format_age(age_months: int) -> str:
    if age_months < MONTHS_PER_YEAR:
        return _plural(age_months, "month")
    years, months = divmod(age_months, MONTHS_PER_YEAR)
    if months == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(months, 'month')}"


def describe_meal_plan(option: MealPlanOption) -> str:
    """Short amount summary of a meal-plan option."""
    primary = option.primary
    head = f"{primary.daily_amount} {primary.unit}(s)"
    if option.type is PlanType.SINGLE or option.complement is None:
        return f"{head}/day"
    complement = option.complement
    return f"{head} + {complement.daily_amount} {complement.unit}(s)"
