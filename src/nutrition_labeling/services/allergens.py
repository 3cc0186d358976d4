"""Allergen aggregation across recipe ingredients."""

from collections.abc import Iterable

from nutrition_labeling.domain.allergens import ALLERGEN_FIELDS, AllergenSummary
from nutrition_labeling.domain.nutrition import RecipeIngredientLine


def aggregate_allergens(lines: Iterable[RecipeIngredientLine]) -> AllergenSummary:
    """Flag an allergen when any ingredient in the recipe contains it."""
    ingredients = [line.ingredient for line in lines]
    return AllergenSummary(
        **{
            field: any(getattr(ingredient, field) for ingredient in ingredients)
            for field in ALLERGEN_FIELDS
        }
    )
