"""Badge assignment over a scored recommendation batch."""

import math
from collections.abc import Sequence

from feeding_planner.domain.recommendations import Badge, FoodRecommendation

BUDGET_QUARTILE = 0.25
BUDGET_MIN_OVERALL = 70


def assign_badges(
    recommendations: Sequence[FoodRecommendation],
) -> dict[str, list[Badge]]:
    """Map each food id to its badges.

    Badges are evaluated in a fixed order: best value, best nutrition,
    best match, then budget pick, which only goes to foods still holding
    no badge. Ties go to the first food in iteration order.
    """
    badges: dict[str, list[Badge]] = {rec.food.id: [] for rec in recommendations}
    if not recommendations:
        return badges

    best_value = max(recommendations, key=lambda rec: rec.score.value_score)
    badges[best_value.food.id].append(Badge.BEST_VALUE)

    best_nutrition = max(recommendations, key=lambda rec: rec.score.nutrition_score)
    if best_nutrition.food.id != best_value.food.id:
        badges[best_nutrition.food.id].append(Badge.BEST_NUTRITION)

    best_match = max(recommendations, key=lambda rec: rec.score.overall)
    if best_match.food.id not in {best_value.food.id, best_nutrition.food.id}:
        badges[best_match.food.id].append(Badge.BEST_MATCH)

    by_cost = sorted(recommendations, key=lambda rec: rec.cost_per_100kcal)
    cutoff = math.ceil(len(recommendations) * BUDGET_QUARTILE)
    for rec in by_cost[:cutoff]:
        held = badges[rec.food.id]
        if not held and rec.score.overall >= BUDGET_MIN_OVERALL:
            held.append(Badge.BUDGET_PICK)

    return badges
