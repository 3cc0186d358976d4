"""Percent Daily Value lookups."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from nutrition_labeling.domain.nutrition import (
    DAILY_VALUE_KEYS,
    NumericDisplay,
    RoundedNutritionData,
)
from nutrition_labeling.services.rounding import round_daily_value

# FDA 2020 reference amounts for a 2,000 calorie diet.
FDA_DAILY_VALUES: MappingProxyType[str, float] = MappingProxyType(
    {
        "total_fat_g": 78,
        "saturated_fat_g": 20,
        "cholesterol_mg": 300,
        "sodium_mg": 2300,
        "total_carbohydrates_g": 275,
        "dietary_fiber_g": 28,
        "added_sugars_g": 50,
        "protein_g": 50,
        "vitamin_d_mcg": 20,
        "calcium_mg": 1300,
        "iron_mg": 18,
        "potassium_mg": 4700,
    }
)


class DailyValueCalculator(Protocol):
    """Interface for % Daily Value reference lookups."""

    def daily_value_percent(self, nutrient_key: str, amount: float) -> int:
        """Return the whole percent of the daily reference that amount covers."""


@dataclass
class FdaDailyValueCalculator(DailyValueCalculator):
    """Daily Value calculator backed by a reference amount table."""

    reference_values: Mapping[str, float] = field(
        default_factory=lambda: FDA_DAILY_VALUES
    )

    def daily_value_percent(self, nutrient_key: str, amount: float) -> int:
        """Return % DV, or 0 for unknown nutrients and non-positive amounts."""
        reference = self.reference_values.get(nutrient_key)
        if not reference or amount <= 0:
            return 0
        return round_daily_value(amount / reference * 100)


def panel_daily_values(
    rounded: RoundedNutritionData, calculator: DailyValueCalculator
) -> dict[str, int]:
    """Compute % DV for panel nutrients from their rounded display values.

    A threshold text such as ``"less than 5"`` counts as 0.
    """
    values: dict[str, int] = {}
    for key in DAILY_VALUE_KEYS:
        display = getattr(rounded, key)
        amount = display.value if isinstance(display, NumericDisplay) else 0
        values[key] = calculator.daily_value_percent(key, amount)
    return values


def nutrient_unit(nutrient_key: str) -> str:
    """Return the label unit for a nutrient key."""
    if nutrient_key == "calories":
        return ""
    if nutrient_key.endswith("_mg"):
        return "mg"
    if nutrient_key.endswith("_mcg"):
        return "mcg"
    return "g"
