"""Pydantic models for label calculation requests."""

from pydantic import BaseModel, Field

from nutrition_labeling.domain.nutrition import (
    IngredientNutritionRecord,
    RecipeFormulation,
    RecipeIngredientLine,
)


class IngredientPayload(BaseModel):
    """Ingredient nutrient profile payload."""

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


class RecipeLinePayload(BaseModel):
    """Recipe ingredient line payload."""

    ingredient: IngredientPayload
    amount_g: float = Field(ge=0)
    sort_order: int = 0


class FormulationPayload(BaseModel):
    """Recipe formulation payload."""

    ingredients: list[RecipeLinePayload] = Field(default_factory=list)
    recipe_yield_g: float
    serving_size_g: float

    def to_domain(self) -> RecipeFormulation:
        """Convert the payload into an immutable formulation."""
        lines = sorted(
            (
                RecipeIngredientLine(
                    ingredient=IngredientNutritionRecord(
                        **line.ingredient.model_dump()
                    ),
                    amount_g=line.amount_g,
                    sort_order=line.sort_order,
                )
                for line in self.ingredients
            ),
            key=lambda line: line.sort_order,
        )
        return RecipeFormulation(
            lines=tuple(lines),
            recipe_yield_g=self.recipe_yield_g,
            serving_size_g=self.serving_size_g,
        )


class AllergenDetectionPayload(BaseModel):
    """Food description payload for allergen detection."""

    description: str
    food_category: str | None = None
    brand_name: str | None = None


class CompliancePayload(FormulationPayload):
    """Formulation plus the package declarations and claims to check."""

    servings_per_container: float | None = Field(default=None, gt=0)
    claims: list[str] = Field(default_factory=list)
