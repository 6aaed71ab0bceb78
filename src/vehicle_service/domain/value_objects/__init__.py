"""Immutable value objects."""

from vehicle_service.domain.value_objects.theme import (
    ColorScheme,
    ResolvedTheme,
    TypographyStyle,
)
from vehicle_service.domain.value_objects.validation_result import ValidationResult

__all__ = [
    "ColorScheme",
    "ResolvedTheme",
    "TypographyStyle",
    "ValidationResult",
]
