"""Formula percentages and range brackets for ingredient declarations."""

from typing import TYPE_CHECKING

from nutrition_labeling.domain.formula import FormulaEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nutrition_labeling.domain.nutrition import RecipeIngredientLine

# (lower bound inclusive, upper bound exclusive, label), highest bracket first.
FORMULA_RANGES: tuple[tuple[float, float, str], ...] = (
    (90, 100, "100-90%"),
    (80, 90, "90-80%"),
    (70, 80, "80-70%"),
    (60, 70, "70-60%"),
    (50, 60, "60-50%"),
    (40, 50, "50-40%"),
    (30, 40, "40-30%"),
    (20, 30, "30-20%"),
    (10, 20, "20-10%"),
    (5, 10, "10-5%"),
    (2, 5, "5-2%"),
    (0, 2, "<2%"),
)

FULL_BATCH_RANGE_LABEL = "90-100%"
TRACE_RANGE_LABEL = "<2%"


def range_label(percentage: float) -> str:
    """Return the range bracket a formula percentage falls in.

    A single ingredient at 100% or more reads ``"90-100%"``; anything below
    every bracket reads ``"<2%"``.
    """
    for lower, upper, label in FORMULA_RANGES:
        if lower <= percentage < upper:
            return label
    if percentage >= 100:
        return FULL_BATCH_RANGE_LABEL
    return TRACE_RANGE_LABEL


def formula_percentages(
    lines: "Iterable[RecipeIngredientLine]", recipe_yield_g: float | None = None
) -> list[FormulaEntry]:
    """Return each line's share of the batch, largest first.

    Shares are taken of the declared yield when one is given, otherwise of the
    summed line weights. A zero total gives an empty formula.
    """
    lines = list(lines)
    total_g = recipe_yield_g or sum(line.amount_g for line in lines)
    if total_g == 0:
        return []
    entries = []
    for line in lines:
        percentage = line.amount_g * 100 / total_g
        entries.append(
            FormulaEntry(
                name=line.ingredient.name,
                amount_g=line.amount_g,
                percentage=percentage,
                range_label=range_label(percentage),
            )
        )
    return sorted(entries, key=lambda entry: entry.percentage, reverse=True)
