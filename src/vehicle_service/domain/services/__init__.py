"""Domain services: validation, form state and theme resolution."""

from vehicle_service.domain.services.form_state import FieldSpec, FormSchema, FormStateController
from vehicle_service.domain.services.theme_resolver import ThemeController, get_current_theme

__all__ = [
    "FieldSpec",
    "FormSchema",
    "FormStateController",
    "ThemeController",
    "get_current_theme",
]
