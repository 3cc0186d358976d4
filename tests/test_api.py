"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from nutrition_labeling.api.app import create_app


def _formulation_body(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "ingredients": [
            {
                "ingredient": {
                    "name": "Whole Milk",
                    "serving_size_g": 240,
                    "calories": 149,
                    "total_fat_g": 7.9,
                    "cholesterol_mg": 24,
                    "sodium_mg": 105,
                    "protein_g": 7.7,
                    "contains_milk": True,
                },
                "amount_g": 240,
                "sort_order": 2,
            },
            {
                "ingredient": {
                    "name": "Cocoa",
                    "serving_size_g": 100,
                    "calories": 228,
                    "iron_mg": 13.9,
                },
                "amount_g": 10,
                "sort_order": 1,
            },
        ],
        "recipe_yield_g": 250,
        "serving_size_g": 250,
    }
    body.update(overrides)
    return body


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_calculate_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/nutrition/calculate", json=_formulation_body())

    assert response.status_code == 200
    data = response.json()
    # 149 + 22.8 = 171.8 kcal in a single 250 g serving.
    assert data["nutrition"]["raw"]["calories"] == pytest.approx(171.8)
    assert data["nutrition"]["rounded"]["calories"] == {
        "kind": "numeric",
        "value": 170,
    }
    assert data["nutrition"]["daily_values"]["sodium_mg"] == 5
    assert data["ingredient_statement"] == "Whole Milk, Cocoa."
    assert data["allergen_statement"] == "Contains: milk."
    assert data["allergens"]["contains_milk"] is True


def test_calculate_serializes_threshold_text(container) -> None:
    client = TestClient(create_app(container))
    body = _formulation_body(recipe_yield_g=1000, serving_size_g=150)

    response = client.post("/nutrition/calculate", json=body)

    rounded = response.json()["nutrition"]["rounded"]
    # 24 mg cholesterol in the batch, 150/1000 of it per serving = 3.6 mg.
    assert rounded["cholesterol_mg"] == {"kind": "threshold", "label": "less than 5"}


def test_calculate_rejects_non_positive_yield(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/nutrition/calculate", json=_formulation_body(recipe_yield_g=0)
    )

    assert response.status_code == 422
    assert "recipe_yield_g" in response.json()["detail"]


def test_calculate_rejects_negative_amount(container) -> None:
    client = TestClient(create_app(container))
    body = _formulation_body()
    body["ingredients"][0]["amount_g"] = -1

    response = client.post("/nutrition/calculate", json=body)

    assert response.status_code == 422


def test_per_100g_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/nutrition/per-100g", json=_formulation_body())

    assert response.status_code == 200
    data = response.json()
    assert data["serving_size_g"] == 100
    # 171.8 kcal over a 250 g batch.
    assert data["nutrition_per_100g"]["calories"] == 69
    assert data["nutrition_per_100g"]["protein_g"] == 3.1


def test_per_100g_endpoint_csv(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/nutrition/per-100g?format=csv", json=_formulation_body())

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "100g-nutrition.csv" in response.headers["content-disposition"]
    assert response.text.startswith("Nutrient,Per 100g\nCalories,69 kcal\n")


def test_compliance_endpoint(container) -> None:
    client = TestClient(create_app(container))
    body = _formulation_body(servings_per_container=2.3, claims=["Fat free"])

    response = client.post("/nutrition/compliance", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "errors"
    assert data["errors_count"] == 2
    failed = {
        check["rule_id"]: check for check in data["checks"] if not check["passed"]
    }
    assert set(failed) == {"serving-size-servings-per-container", "claim-fat-free"}
    assert failed["claim-fat-free"]["severity"] == "error"


def test_compliance_endpoint_rejects_non_positive_servings(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/nutrition/compliance", json=_formulation_body(servings_per_container=0)
    )

    assert response.status_code == 422


def test_formula_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/nutrition/formula", json=_formulation_body())

    assert response.status_code == 200
    data = response.json()
    assert data["style"] == "percentage"
    assert data["entries"] == [
        {
            "name": "Whole Milk",
            "amount_g": 240,
            "percentage": 96,
            "range_label": "100-90%",
        },
        {"name": "Cocoa", "amount_g": 10, "percentage": 4, "range_label": "5-2%"},
    ]


def test_formula_endpoint_text_and_csv(container) -> None:
    client = TestClient(create_app(container))

    text = client.post(
        "/nutrition/formula?style=range&format=text", json=_formulation_body()
    )
    csv = client.post("/nutrition/formula?format=csv", json=_formulation_body())

    assert text.text == "Whole Milk: 100-90%\nCocoa: 5-2%"
    assert csv.headers["content-type"].startswith("text/csv")
    assert csv.text.splitlines()[1] == "Whole Milk,240,96.00%"


def test_allergen_detect_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/allergens/detect",
        json={"description": "Tahini dressing", "food_category": "Eggs"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["labels"] == ["Eggs", "Sesame"]
    assert data["allergens"]["contains_sesame"] is True


def test_asgi_app_serves_default_container() -> None:
    from nutrition_labeling.api.asgi import app

    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert app.state.container.label_service is not None
