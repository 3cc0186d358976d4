"""Nutrition label pipeline combining aggregation, rounding and declarations."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from nutrition_labeling.domain.compliance import ComplianceReport
from nutrition_labeling.domain.formula import FormulaEntry
from nutrition_labeling.domain.labels import NutritionLabel
from nutrition_labeling.domain.nutrition import (
    Per100gReport,
    RawNutritionData,
    RecipeFormulation,
)
from nutrition_labeling.services.aggregation import (
    aggregate_formulation,
    aggregate_per_100g,
)
from nutrition_labeling.services.allergens import aggregate_allergens
from nutrition_labeling.services.compliance import validate_label
from nutrition_labeling.services.daily_values import (
    DailyValueCalculator,
    panel_daily_values,
)
from nutrition_labeling.services.formula import formula_percentages
from nutrition_labeling.services.rounding import round_all, round_half_up
from nutrition_labeling.services.statements import (
    allergen_statement,
    ingredient_statement,
)

# Exported as whole numbers in the 100 g report; everything else keeps 0.1.
_WHOLE_NUMBER_EXPORT_KEYS = frozenset(
    {"calories", "cholesterol_mg", "sodium_mg", "calcium_mg", "potassium_mg"}
)

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass
class NutritionLabelService:
    """Service that turns a formulation into a label-ready result."""

    daily_value_calculator: DailyValueCalculator
    debug: bool = False

    def calculate(self, formulation: RecipeFormulation) -> NutritionLabel:
        """Compute per-serving nutrition, rounding, % DV and declarations."""
        raw = aggregate_formulation(formulation)
        rounded = round_all(raw)
        # % DV is taken from the rounded panel values, not the raw ones.
        daily_values = panel_daily_values(rounded, self.daily_value_calculator)
        allergens = aggregate_allergens(formulation.lines)
        label = NutritionLabel(
            raw=raw,
            rounded=rounded,
            allergens=allergens,
            ingredient_statement=ingredient_statement(formulation.lines),
            allergen_statement=allergen_statement(allergens),
            daily_values=MappingProxyType(daily_values),
        )
        if self.debug:
            _logger.info(
                "Label calculated: lines=%s yield_g=%s serving_g=%s calories=%s",
                len(formulation.lines),
                formulation.recipe_yield_g,
                formulation.serving_size_g,
                raw.calories,
            )
        return label

    def per_100g(self, formulation: RecipeFormulation) -> Per100gReport:
        """Normalize batch nutrition to a 100 g portion for export."""
        raw = aggregate_per_100g(formulation)
        report = Per100gReport(nutrition=_round_for_export(raw))
        if self.debug:
            _logger.info(
                "Per 100 g report: lines=%s yield_g=%s",
                len(formulation.lines),
                formulation.recipe_yield_g,
            )
        return report

    def check_compliance(
        self,
        formulation: RecipeFormulation,
        *,
        servings_per_container: float | None = None,
        claims: "Iterable[str]" = (),
    ) -> ComplianceReport:
        """Check serving declarations and claims against per-serving nutrition."""
        raw = aggregate_formulation(formulation)
        report = validate_label(
            raw.as_dict(),
            serving_size_g=formulation.serving_size_g,
            servings_per_container=servings_per_container,
            claims=claims,
        )
        if self.debug:
            _logger.info(
                "Compliance checked: status=%s errors=%s warnings=%s",
                report.status.value,
                report.errors_count,
                report.warnings_count,
            )
        return report

    def formula(self, formulation: RecipeFormulation) -> list[FormulaEntry]:
        """Return each ingredient's share of the declared batch yield."""
        entries = formula_percentages(formulation.lines, formulation.recipe_yield_g)
        if self.debug:
            _logger.info(
                "Formula computed: lines=%s yield_g=%s",
                len(formulation.lines),
                formulation.recipe_yield_g,
            )
        return entries


def _round_for_export(raw: RawNutritionData) -> MappingProxyType[str, float]:
    rounded: dict[str, float] = {}
    for key, value in raw.as_dict().items():
        if key in _WHOLE_NUMBER_EXPORT_KEYS:
            rounded[key] = round_half_up(value)
        else:
            rounded[key] = round_half_up(value * 10) / 10
    return MappingProxyType(rounded)
