"""Plain text and CSV renderings of label exports."""

import csv
import io
from typing import TYPE_CHECKING

from nutrition_labeling.domain.formula import FormulaEntry, FormulaStyle
from nutrition_labeling.domain.nutrition import NUTRIENT_DISPLAY_NAMES, Per100gReport
from nutrition_labeling.services.daily_values import nutrient_unit

if TYPE_CHECKING:
    from collections.abc import Iterable


def per_100g_csv(report: Per100gReport) -> str:
    """Render a per-100 g report as ``Nutrient,Per 100g`` rows with units."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Nutrient", f"Per {_fmt(report.serving_size_g)}g"])
    for key, value in report.nutrition.items():
        unit = nutrient_unit(key) or "kcal"
        writer.writerow([NUTRIENT_DISPLAY_NAMES[key], f"{_fmt(value)} {unit}"])
    return buffer.getvalue()


def formula_text(entries: "Iterable[FormulaEntry]", style: FormulaStyle) -> str:
    """Render one ``name: share`` line per ingredient."""
    return "\n".join(f"{entry.name}: {_share(entry, style)}" for entry in entries)


def formula_csv(entries: "Iterable[FormulaEntry]", style: FormulaStyle) -> str:
    """Render a formula as CSV; the range style adds a ``Range`` column."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    header = ["Ingredient", "Amount (g)", "Percentage"]
    if style == "range":
        header.append("Range")
    writer.writerow(header)
    for entry in entries:
        row = [entry.name, _fmt(entry.amount_g), f"{entry.percentage:.2f}%"]
        if style == "range":
            row.append(entry.range_label)
        writer.writerow(row)
    return buffer.getvalue()


def _share(entry: FormulaEntry, style: FormulaStyle) -> str:
    if style == "range":
        return entry.range_label
    return f"{entry.percentage:.2f}%"


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
