"""Domain models for formula (ingredient percentage) exports."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class FormulaEntry:
    """One ingredient's share of the batch weight."""

    name: str
    amount_g: float
    percentage: float
    range_label: str


# How a formula export states each ingredient's share.
FormulaStyle = Literal["percentage", "range"]
