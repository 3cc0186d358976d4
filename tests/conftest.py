"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_labeling.config import Settings
from nutrition_labeling.containers import AppContainer, build_container
from nutrition_labeling.domain.nutrition import (
    IngredientNutritionRecord,
    RecipeFormulation,
    RecipeIngredientLine,
)
from nutrition_labeling.services.daily_values import (
    DailyValueCalculator,
    FdaDailyValueCalculator,
)


@dataclass
class RecordingDailyValueCalculator(DailyValueCalculator):
    """Daily value calculator that records every lookup."""

    calls: list[tuple[str, float]] = field(default_factory=list)
    delegate: FdaDailyValueCalculator = field(default_factory=FdaDailyValueCalculator)

    def daily_value_percent(self, nutrient_key: str, amount: float) -> int:
        self.calls.append((nutrient_key, amount))
        return self.delegate.daily_value_percent(nutrient_key, amount)


def ingredient(
    name: str = "Ingredient", serving_size_g: float = 100, **values: object
) -> IngredientNutritionRecord:
    return IngredientNutritionRecord(
        name=name, serving_size_g=serving_size_g, **values
    )


def line(
    record: IngredientNutritionRecord, amount_g: float, sort_order: int = 0
) -> RecipeIngredientLine:
    return RecipeIngredientLine(
        ingredient=record, amount_g=amount_g, sort_order=sort_order
    )


@pytest.fixture
def cookie_formulation() -> RecipeFormulation:
    """A small batch of cookies: 1000 g yield, 40 g servings."""
    flour = ingredient(
        "Wheat Flour",
        calories=364,
        total_fat_g=1,
        saturated_fat_g=0.2,
        sodium_mg=2,
        total_carbohydrates_g=76,
        dietary_fiber_g=2.7,
        total_sugars_g=0.3,
        protein_g=10,
        calcium_mg=15,
        iron_mg=4.6,
        potassium_mg=107,
        contains_wheat=True,
    )
    butter = ingredient(
        "Butter",
        calories=717,
        total_fat_g=81,
        saturated_fat_g=51,
        trans_fat_g=3.3,
        cholesterol_mg=215,
        sodium_mg=11,
        protein_g=0.9,
        vitamin_d_mcg=1.5,
        calcium_mg=24,
        potassium_mg=24,
        contains_milk=True,
    )
    sugar = ingredient(
        "Sugar",
        calories=387,
        total_carbohydrates_g=100,
        total_sugars_g=100,
        added_sugars_g=100,
    )
    eggs = ingredient(
        "Eggs",
        serving_size_g=50,
        calories=72,
        total_fat_g=4.8,
        saturated_fat_g=1.6,
        cholesterol_mg=186,
        sodium_mg=71,
        total_carbohydrates_g=0.4,
        total_sugars_g=0.2,
        protein_g=6.3,
        vitamin_d_mcg=1.1,
        calcium_mg=28,
        iron_mg=0.9,
        potassium_mg=69,
        contains_eggs=True,
    )
    return RecipeFormulation(
        lines=(
            line(flour, 400, sort_order=1),
            line(butter, 250, sort_order=2),
            line(sugar, 300, sort_order=3),
            line(eggs, 100, sort_order=4),
        ),
        recipe_yield_g=1000,
        serving_size_g=40,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def daily_value_calculator() -> RecordingDailyValueCalculator:
    return RecordingDailyValueCalculator()


@pytest.fixture
def container(
    settings: Settings, daily_value_calculator: RecordingDailyValueCalculator
) -> AppContainer:
    return build_container(settings, daily_value_calculator=daily_value_calculator)
