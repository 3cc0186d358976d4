"""Ingredient and allergen statement generation."""

from collections.abc import Iterable

from nutrition_labeling.domain.allergens import AllergenSummary
from nutrition_labeling.domain.nutrition import RecipeIngredientLine


def ingredient_statement(lines: Iterable[RecipeIngredientLine]) -> str:
    """List ingredient names by descending weight, e.g. ``"Sugar, Flour."``.

    Ties keep their input order. Names are used verbatim, duplicates included.
    """
    ordered = sorted(lines, key=lambda line: line.amount_g, reverse=True)
    return ", ".join(line.ingredient.name for line in ordered) + "."


def allergen_statement(summary: AllergenSummary) -> str | None:
    """Build the ``"Contains: ..."`` line, or ``None`` when nothing is present."""
    names = [allergen.statement_name for allergen in summary.present()]
    if not names:
        return None
    return f"Contains: {', '.join(names)}."
