"""Domain models for computed nutrition labels."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from nutrition_labeling.domain.allergens import AllergenSummary
from nutrition_labeling.domain.nutrition import RawNutritionData, RoundedNutritionData


@dataclass(frozen=True)
class NutritionLabel:
    """Everything a Nutrition Facts panel and its declarations need.

    ``daily_values`` is a read-only mapping and is left out of the hash.
    """

    raw: RawNutritionData
    rounded: RoundedNutritionData
    allergens: AllergenSummary
    ingredient_statement: str
    allergen_statement: str | None
    daily_values: Mapping[str, int] = field(hash=False)
