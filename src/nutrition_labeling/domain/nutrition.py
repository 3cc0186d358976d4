"""Nutrition domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

NUTRIENT_KEYS: tuple[str, ...] = (
    "calories",
    "total_fat_g",
    "saturated_fat_g",
    "trans_fat_g",
    "cholesterol_mg",
    "sodium_mg",
    "total_carbohydrates_g",
    "dietary_fiber_g",
    "total_sugars_g",
    "added_sugars_g",
    "protein_g",
    "vitamin_d_mcg",
    "calcium_mg",
    "iron_mg",
    "potassium_mg",
)

# Nutrients that carry a % Daily Value on the panel, in panel order.
DAILY_VALUE_KEYS: tuple[str, ...] = (
    "total_fat_g",
    "saturated_fat_g",
    "cholesterol_mg",
    "sodium_mg",
    "total_carbohydrates_g",
    "dietary_fiber_g",
    "added_sugars_g",
    "vitamin_d_mcg",
    "calcium_mg",
    "iron_mg",
    "potassium_mg",
)

# Panel wording, in declaration order.
NUTRIENT_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "calories": "Calories",
        "total_fat_g": "Total Fat",
        "saturated_fat_g": "Saturated Fat",
        "trans_fat_g": "Trans Fat",
        "cholesterol_mg": "Cholesterol",
        "sodium_mg": "Sodium",
        "total_carbohydrates_g": "Total Carbohydrate",
        "dietary_fiber_g": "Dietary Fiber",
        "total_sugars_g": "Total Sugars",
        "added_sugars_g": "Includes Added Sugars",
        "protein_g": "Protein",
        "vitamin_d_mcg": "Vitamin D",
        "calcium_mg": "Calcium",
        "iron_mg": "Iron",
        "potassium_mg": "Potassium",
    }
)


class InvalidFormulationError(ValueError):
    """Raised when a formulation has a non-positive weight denominator."""


@dataclass(frozen=True)
class IngredientNutritionRecord:
    """Nutrient profile of one ingredient, stated per ``serving_size_g``."""

    name: str
    serving_size_g: float
    calories: float | None = None
    total_fat_g: float | None = None
    saturated_fat_g: float | None = None
    trans_fat_g: float | None = None
    cholesterol_mg: float | None = None
    sodium_mg: float | None = None
    total_carbohydrates_g: float | None = None
    dietary_fiber_g: float | None = None
    total_sugars_g: float | None = None
    added_sugars_g: float | None = None
    protein_g: float | None = None
    vitamin_d_mcg: float | None = None
    calcium_mg: float | None = None
    iron_mg: float | None = None
    potassium_mg: float | None = None
    contains_milk: bool = False
    contains_eggs: bool = False
    contains_fish: bool = False
    contains_shellfish: bool = False
    contains_tree_nuts: bool = False
    contains_peanuts: bool = False
    contains_wheat: bool = False
    contains_soybeans: bool = False
    contains_sesame: bool = False


@dataclass(frozen=True)
class RecipeIngredientLine:
    """One ingredient used in a batch, with its weight in grams."""

    ingredient: IngredientNutritionRecord
    amount_g: float
    sort_order: int = 0


@dataclass(frozen=True)
class RecipeFormulation:
    """Ingredient lines plus the declared batch yield and serving size."""

    lines: tuple[RecipeIngredientLine, ...]
    recipe_yield_g: float
    serving_size_g: float


@dataclass(frozen=True)
class RawNutritionData:
    """Unrounded nutrients for one serving."""

    calories: float = 0.0
    total_fat_g: float = 0.0
    saturated_fat_g: float = 0.0
    trans_fat_g: float = 0.0
    cholesterol_mg: float = 0.0
    sodium_mg: float = 0.0
    total_carbohydrates_g: float = 0.0
    dietary_fiber_g: float = 0.0
    total_sugars_g: float = 0.0
    added_sugars_g: float = 0.0
    protein_g: float = 0.0
    vitamin_d_mcg: float = 0.0
    calcium_mg: float = 0.0
    iron_mg: float = 0.0
    potassium_mg: float = 0.0

    def as_dict(self) -> dict[str, float]:
        """Return nutrient values keyed by nutrient name."""
        return {key: getattr(self, key) for key in NUTRIENT_KEYS}


@dataclass(frozen=True)
class NumericDisplay:
    """A rounded numeric label value."""

    value: float
    kind: Literal["numeric"] = field(default="numeric", init=False)


@dataclass(frozen=True)
class ThresholdDisplay:
    """A regulation-mandated text value such as ``"less than 5"``."""

    label: str
    kind: Literal["threshold"] = field(default="threshold", init=False)


DisplayValue = NumericDisplay | ThresholdDisplay


@dataclass(frozen=True)
class RoundedNutritionData:
    """Label-ready nutrient values for one serving."""

    calories: DisplayValue
    total_fat_g: DisplayValue
    saturated_fat_g: DisplayValue
    trans_fat_g: DisplayValue
    cholesterol_mg: DisplayValue
    sodium_mg: DisplayValue
    total_carbohydrates_g: DisplayValue
    dietary_fiber_g: DisplayValue
    total_sugars_g: DisplayValue
    added_sugars_g: DisplayValue
    protein_g: DisplayValue
    vitamin_d_mcg: NumericDisplay
    calcium_mg: NumericDisplay
    iron_mg: NumericDisplay
    potassium_mg: NumericDisplay


@dataclass(frozen=True)
class Per100gReport:
    """Batch nutrients normalized to a 100 g portion, rounded for export."""

    nutrition: Mapping[str, float] = field(hash=False)
    serving_size_g: float = 100.0
