"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_labeling.config import Settings
from nutrition_labeling.services.daily_values import (
    DailyValueCalculator,
    FdaDailyValueCalculator,
)
from nutrition_labeling.services.labels import NutritionLabelService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    daily_value_calculator: DailyValueCalculator
    label_service: NutritionLabelService


def build_container(
    settings: Settings | None = None,
    daily_value_calculator: DailyValueCalculator | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    calculator = daily_value_calculator or FdaDailyValueCalculator()
    label_service = NutritionLabelService(
        daily_value_calculator=calculator,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        daily_value_calculator=calculator,
        label_service=label_service,
    )
