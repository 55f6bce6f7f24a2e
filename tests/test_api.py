"""Tests for the planner API endpoints."""

from fastapi.testclient import TestClient

from feeding_planner.api.app import create_app

PROFILE = {"id": "cat-1", "name": "Miso", "weight_lbs": 10, "age_months": 36}
DRY_FOOD = {
    "id": "dry-a",
    "brand": "Acme",
    "product_name": "Indoor Chicken",
    "form": "dry",
    "life_stage": "adult",
    "price": 40,
    "protein_pct": 40,
    "fat_pct": 18,
    "fiber_pct": 3,
    "moisture_pct": 10,
    "kcal_per_cup": 400,
    "servings_per_unit": 40,
    "special_benefits": ["Indoor Formula", "Hairball Control"],
}
WET_FOOD = {
    "id": "wet-c",
    "brand": "Tidal",
    "product_name": "Salmon Pate",
    "form": "wet",
    "price": 1.5,
    "protein_pct": 11,
    "fat_pct": 5,
    "fiber_pct": 1,
    "moisture_pct": 78,
    "kcal_per_can": 80,
    "special_benefits": ["Grain Free"],
}


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_nutrition_plan_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/nutrition-plan", json={"profile": PROFILE})

    assert response.status_code == 200
    plan = response.json()["plan"]
    assert plan["factor"] == 1.2
    assert plan["meals_per_day"] == 2
    assert plan["der"] == 261


def test_recommendations_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recommendations",
        json={"profile": PROFILE, "foods": [DRY_FOOD, WET_FOOD]},
    )

    assert response.status_code == 200
    ranked = response.json()["recommendations"]
    assert [rec["food"]["id"] for rec in ranked] == ["dry-a", "wet-c"]
    assert ranked[0]["badges"] == ["best_value"]
    assert ranked[0]["amount_unit"] == "cup"


def test_recommendations_accept_condition_string(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recommendations",
        json={
            "profile": PROFILE,
            "foods": [DRY_FOOD, WET_FOOD],
            "form_preference": "wet",
            "health_conditions": "Urinary_Health, urinary_health",
        },
    )

    assert response.status_code == 200
    ranked = response.json()["recommendations"]
    assert [rec["food"]["id"] for rec in ranked] == ["wet-c"]


def test_invalid_weight_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/nutrition-plan", json={"profile": {**PROFILE, "weight_lbs": 0}}
    )

    assert response.status_code == 422


def test_portion_options_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/portion-options", json={"food": DRY_FOOD, "target_energy": 300}
    )

    assert response.status_code == 200
    options = response.json()["options"]
    assert options[0]["amount"] == 0.75
    assert options[0]["kcal"] == 300


def test_meal_plan_options_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meal-plan-options",
        json={
            "primary_food_id": "dry-a",
            "profile": PROFILE,
            "catalog": [DRY_FOOD, WET_FOOD],
        },
    )

    assert response.status_code == 200
    options = response.json()["options"]
    assert [option["type"] for option in options] == ["combo", "single"]
    assert options[0]["complement"]["food"]["id"] == "wet-c"


def test_meal_plan_options_unknown_primary(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meal-plan-options",
        json={"primary_food_id": "nope", "profile": PROFILE, "catalog": [DRY_FOOD]},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Primary food not found in catalog"


def test_plan_summary_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/plans/summary",
        json={
            "selections": [{"food_id": "dry-a", "meal_count": 2}],
            "catalog": [DRY_FOOD],
            "target_energy": 300,
            "meals_per_day": 2,
        },
    )

    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["total_kcal"] == 300
    assert summary["is_valid"] is True
    assert summary["foods"][0]["daily_amount"] == 0.75


def test_plan_suggestions_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/plans/suggestions",
        json={
            "profile": PROFILE,
            "selections": [{"food_id": "dry-a", "meal_count": 1}],
            "catalog": [DRY_FOOD, WET_FOOD],
            "target_energy": 300,
            "meals_per_day": 2,
        },
    )

    assert response.status_code == 200
    suggestions = response.json()["suggestions"]
    assert suggestions[0]["recommendation"]["food"]["id"] == "wet-c"


def test_zero_meal_count_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/plans/summary",
        json={
            "selections": [{"food_id": "dry-a", "meal_count": 0}],
            "catalog": [DRY_FOOD],
            "target_energy": 300,
            "meals_per_day": 2,
        },
    )

    assert response.status_code == 422
