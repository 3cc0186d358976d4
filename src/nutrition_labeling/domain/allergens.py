"""Domain models for Big 9 allergen declarations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Allergen:
    """One Big 9 allergen and how it is named on a label."""

    field: str
    statement_name: str
    label: str


# Declaration order is fixed by the allergen statement.
BIG_NINE: tuple[Allergen, ...] = (
    Allergen("contains_milk", "milk", "Milk"),
    Allergen("contains_eggs", "eggs", "Eggs"),
    Allergen("contains_fish", "fish", "Fish"),
    Allergen("contains_shellfish", "shellfish", "Shellfish"),
    Allergen("contains_tree_nuts", "tree nuts", "Tree Nuts"),
    Allergen("contains_peanuts", "peanuts", "Peanuts"),
    Allergen("contains_wheat", "wheat", "Wheat"),
    Allergen("contains_soybeans", "soybeans", "Soybeans"),
    Allergen("contains_sesame", "sesame", "Sesame"),
)

ALLERGEN_FIELDS: tuple[str, ...] = tuple(allergen.field for allergen in BIG_NINE)


@dataclass(frozen=True)
class AllergenSummary:
    """Presence flags for the Big 9 allergens."""

    contains_milk: bool = False
    contains_eggs: bool = False
    contains_fish: bool = False
    contains_shellfish: bool = False
    contains_tree_nuts: bool = False
    contains_peanuts: bool = False
    contains_wheat: bool = False
    contains_soybeans: bool = False
    contains_sesame: bool = False

    def present(self) -> list[Allergen]:
        """Return the allergens flagged present, in declaration order."""
        return [allergen for allergen in BIG_NINE if getattr(self, allergen.field)]
