"""FDA rounding rules for nutrition labeling (21 CFR 101.9).

Every rule rounds half up (``floor(x + 0.5)``) rather than to even, and
expects a non-negative amount per serving.
"""

import math
from collections.abc import Callable
from types import MappingProxyType

from nutrition_labeling.domain.nutrition import (
    DisplayValue,
    NumericDisplay,
    RawNutritionData,
    RoundedNutritionData,
    ThresholdDisplay,
)

CHOLESTEROL_THRESHOLD_LABEL = "less than 5"


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves away from zero."""
    return math.floor(value + 0.5)


def _nearest(value: float, step: int) -> int:
    return round_half_up(value / step) * step


def round_calories(value: float) -> DisplayValue:
    """
    Calories:
    < 5: 0
    <= 50: nearest 5
    > 50: nearest 10
    """
    if value < 5:
        return NumericDisplay(0)
    if value <= 50:
        return NumericDisplay(_nearest(value, 5))
    return NumericDisplay(_nearest(value, 10))


def round_fat(value: float) -> DisplayValue:
    """
    Total fat, saturated fat, trans fat:
    < 0.5 g: 0
    < 5 g: nearest 0.5 g
    >= 5 g: nearest 1 g
    """
    if value < 0.5:
        return NumericDisplay(0)
    if value < 5:
        halves = round_half_up(value * 2)
        # Whole grams are ints, same as the >= 5 g branch.
        if halves % 2 == 0:
            return NumericDisplay(halves // 2)
        return NumericDisplay(halves / 2)
    return NumericDisplay(round_half_up(value))


def round_cholesterol(value: float) -> DisplayValue:
    """
    Cholesterol:
    < 2 mg: 0
    2-5 mg: "less than 5"
    > 5 mg: nearest 5 mg

    Exactly 5 mg also reads "less than 5"; existing labels depend on it.
    """
    if value < 2:
        return NumericDisplay(0)
    if value <= 5:
        return ThresholdDisplay(CHOLESTEROL_THRESHOLD_LABEL)
    return NumericDisplay(_nearest(value, 5))


def round_sodium(value: float) -> DisplayValue:
    """
    Sodium:
    < 5 mg: 0
    5-140 mg: nearest 5 mg
    > 140 mg: nearest 10 mg
    """
    if value < 5:
        return NumericDisplay(0)
    if value <= 140:
        return NumericDisplay(_nearest(value, 5))
    return NumericDisplay(_nearest(value, 10))


def round_carbs(value: float) -> DisplayValue:
    """
    Carbohydrate, fiber, sugars, added sugars, protein:
    < 0.5 g: 0
    >= 0.5 g: nearest 1 g
    """
    if value < 0.5:
        return NumericDisplay(0)
    return NumericDisplay(round_half_up(value))


def round_vitamin_d(value: float) -> NumericDisplay:
    """Vitamin D (mcg): nearest 0.1."""
    return NumericDisplay(round_half_up(value * 10) / 10)


def round_calcium_iron(value: float) -> NumericDisplay:
    """Calcium and iron (mg): nearest 1."""
    return NumericDisplay(round_half_up(value))


def round_potassium(value: float) -> NumericDisplay:
    """Potassium (mg): nearest 5."""
    return NumericDisplay(_nearest(value, 5))


def round_daily_value(value: float) -> int:
    """% Daily Value: nearest whole percent."""
    return round_half_up(value)


ROUNDING_RULES: MappingProxyType[str, Callable[[float], DisplayValue]] = (
    MappingProxyType(
        {
            "calories": round_calories,
            "total_fat_g": round_fat,
            "saturated_fat_g": round_fat,
            "trans_fat_g": round_fat,
            "cholesterol_mg": round_cholesterol,
            "sodium_mg": round_sodium,
            "total_carbohydrates_g": round_carbs,
            "dietary_fiber_g": round_carbs,
            "total_sugars_g": round_carbs,
            "added_sugars_g": round_carbs,
            "protein_g": round_carbs,
            "vitamin_d_mcg": round_vitamin_d,
            "calcium_mg": round_calcium_iron,
            "iron_mg": round_calcium_iron,
            "potassium_mg": round_potassium,
        }
    )
)


def round_all(raw: RawNutritionData) -> RoundedNutritionData:
    """Apply the FDA rounding rule for each nutrient."""
    return RoundedNutritionData(
        **{key: rule(getattr(raw, key)) for key, rule in ROUNDING_RULES.items()}
    )
