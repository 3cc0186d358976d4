"""Weighted aggregation of ingredient nutrients into per-serving totals."""

from collections.abc import Iterable

from nutrition_labeling.domain.nutrition import (
    NUTRIENT_KEYS,
    InvalidFormulationError,
    RawNutritionData,
    RecipeFormulation,
    RecipeIngredientLine,
)

PER_100G_PORTION_G = 100.0


def aggregate_nutrition(
    lines: Iterable[RecipeIngredientLine],
    recipe_yield_g: float,
    serving_size_g: float,
) -> RawNutritionData:
    """Sum line nutrients over the batch, then scale to one serving.

    Each ingredient contributes its profile scaled by
    ``amount_g / ingredient.serving_size_g``; unknown values count as zero.
    The batch is assumed to weigh ``recipe_yield_g`` as declared.
    """
    _require_positive("recipe_yield_g", recipe_yield_g)
    _require_positive("serving_size_g", serving_size_g)

    totals = dict.fromkeys(NUTRIENT_KEYS, 0.0)
    for line in lines:
        ingredient = line.ingredient
        _require_positive(
            f"serving_size_g of ingredient {ingredient.name!r}",
            ingredient.serving_size_g,
        )
        ratio = line.amount_g / ingredient.serving_size_g
        for key in NUTRIENT_KEYS:
            totals[key] += (getattr(ingredient, key) or 0) * ratio

    serving_ratio = serving_size_g / recipe_yield_g
    return RawNutritionData(
        **{key: total * serving_ratio for key, total in totals.items()}
    )


def aggregate_formulation(formulation: RecipeFormulation) -> RawNutritionData:
    """Aggregate a formulation into raw nutrition for one serving."""
    return aggregate_nutrition(
        formulation.lines, formulation.recipe_yield_g, formulation.serving_size_g
    )


def aggregate_per_100g(formulation: RecipeFormulation) -> RawNutritionData:
    """Aggregate a formulation into raw nutrition for a 100 g portion."""
    return aggregate_nutrition(
        formulation.lines, formulation.recipe_yield_g, PER_100G_PORTION_G
    )


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise InvalidFormulationError(f"{name} must be positive, got {value}")
