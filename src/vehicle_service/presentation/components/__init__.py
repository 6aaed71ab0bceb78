"""Presentational components parameterized by the resolved theme."""

from vehicle_service.presentation.components.button import (
    ButtonConfig,
    ButtonSize,
    ButtonStyle,
    ButtonVariant,
    button_style,
)
from vehicle_service.presentation.components.filter_chip import (
    FilterChipConfig,
    filter_chip_style,
    select_chip,
)
from vehicle_service.presentation.components.input import InputConfig, InputStyle, input_style
from vehicle_service.presentation.components.status_badge import StatusBadge, status_badge

__all__ = [
    "ButtonConfig",
    "ButtonSize",
    "ButtonStyle",
    "ButtonVariant",
    "FilterChipConfig",
    "InputConfig",
    "InputStyle",
    "StatusBadge",
    "button_style",
    "filter_chip_style",
    "input_style",
    "select_chip",
    "status_badge",
]
