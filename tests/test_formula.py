"""Tests for formula percentages and range brackets."""

import pytest

from nutrition_labeling.services.formula import formula_percentages, range_label
from tests.conftest import ingredient, line


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (99.9, "100-90%"),
        (90, "100-90%"),
        (45, "50-40%"),
        (10, "20-10%"),
        (5, "10-5%"),
        (2, "5-2%"),
        (1.99, "<2%"),
        (0, "<2%"),
    ],
)
def test_range_brackets(percentage, expected) -> None:
    assert range_label(percentage) == expected


def test_full_batch_and_negative_shares_fall_back() -> None:
    assert range_label(100) == "90-100%"
    assert range_label(130) == "90-100%"
    assert range_label(-1) == "<2%"


def test_percentages_of_declared_yield_largest_first(cookie_formulation) -> None:
    entries = formula_percentages(
        cookie_formulation.lines, cookie_formulation.recipe_yield_g
    )

    assert [(entry.name, entry.percentage) for entry in entries] == [
        ("Wheat Flour", 40),
        ("Sugar", 30),
        ("Butter", 25),
        ("Eggs", 10),
    ]
    assert [entry.range_label for entry in entries] == [
        "50-40%",
        "40-30%",
        "30-20%",
        "20-10%",
    ]


def test_percentages_fall_back_to_summed_weights() -> None:
    lines = [line(ingredient("Oats"), 300), line(ingredient("Honey"), 100)]

    entries = formula_percentages(lines)

    assert [entry.percentage for entry in entries] == [75, 25]
    assert entries[0].amount_g == 300


def test_zero_total_gives_empty_formula() -> None:
    assert formula_percentages([]) == []
    assert formula_percentages([line(ingredient("Water"), 0)]) == []


def test_equal_shares_keep_line_order() -> None:
    lines = [line(ingredient("Salt"), 5), line(ingredient("Pepper"), 5)]

    entries = formula_percentages(lines, recipe_yield_g=500)

    assert [entry.name for entry in entries] == ["Salt", "Pepper"]
    assert entries[0].range_label == "<2%"
