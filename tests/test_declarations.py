"""Tests for allergen aggregation and label statements."""

from nutrition_labeling.domain.allergens import ALLERGEN_FIELDS, AllergenSummary
from nutrition_labeling.services.allergens import aggregate_allergens
from nutrition_labeling.services.statements import (
    allergen_statement,
    ingredient_statement,
)
from tests.conftest import ingredient, line


def test_allergens_are_or_reduced_across_ingredients() -> None:
    lines = [
        line(ingredient("Milk", contains_milk=True), 100),
        line(ingredient("Peanut Butter", contains_peanuts=True), 50),
    ]

    summary = aggregate_allergens(lines)

    assert summary == AllergenSummary(contains_milk=True, contains_peanuts=True)
    assert allergen_statement(summary) == "Contains: milk, peanuts."


def test_allergen_flag_set_by_any_single_ingredient() -> None:
    lines = [
        line(ingredient("Water"), 500),
        line(ingredient("Sesame Oil", contains_sesame=True), 1),
        line(ingredient("Salt"), 5),
    ]

    summary = aggregate_allergens(lines)

    assert summary.contains_sesame is True
    assert [a.field for a in summary.present()] == ["contains_sesame"]


def test_no_ingredients_have_no_allergens() -> None:
    summary = aggregate_allergens([])

    assert not any(getattr(summary, field) for field in ALLERGEN_FIELDS)
    assert allergen_statement(summary) is None


def test_allergen_statement_uses_fixed_declaration_order() -> None:
    summary = AllergenSummary(**dict.fromkeys(ALLERGEN_FIELDS, True))

    assert allergen_statement(summary) == (
        "Contains: milk, eggs, fish, shellfish, tree nuts, peanuts, wheat, "
        "soybeans, sesame."
    )


def test_ingredient_statement_orders_by_descending_weight() -> None:
    lines = [
        line(ingredient("Salt"), 20, sort_order=1),
        line(ingredient("Sugar"), 50, sort_order=2),
        line(ingredient("Flour"), 30, sort_order=3),
    ]

    assert ingredient_statement(lines) == "Sugar, Flour, Salt."
    assert ingredient_statement(list(reversed(lines))) == "Sugar, Flour, Salt."


def test_ingredient_statement_keeps_input_order_on_ties() -> None:
    lines = [
        line(ingredient("Cinnamon"), 5),
        line(ingredient("Nutmeg"), 5),
        line(ingredient("Flour"), 100),
    ]

    assert ingredient_statement(lines) == "Flour, Cinnamon, Nutmeg."


def test_ingredient_statement_keeps_names_verbatim() -> None:
    lines = [
        line(ingredient("Water"), 60),
        line(ingredient("  Sea Salt "), 2),
        line(ingredient("Water"), 40),
    ]

    assert ingredient_statement(lines) == "Water, Water,   Sea Salt ."
