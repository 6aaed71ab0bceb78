"""
Vehicle Service - client core for a vehicle-service-management app

Provides the pieces every screen composes against:
- Field validation rules and per-form validators
- A form state controller with optimistic error clearing
- Light/dark theme resolution with a persisted preference
- An authenticated HTTP gateway and endpoint services
- Theme-driven presentational component configurations
"""

__version__ = "1.0.0"
__license__ = "MIT"

from vehicle_service.application.app_context import AppContext, create_app_context
from vehicle_service.domain.services.form_state import FormStateController
from vehicle_service.domain.services.theme_resolver import ThemeController, get_current_theme
from vehicle_service.domain.value_objects.theme import ColorScheme, ResolvedTheme
from vehicle_service.domain.value_objects.validation_result import ValidationResult
from vehicle_service.infrastructure.api.gateway import ApiGateway

__all__ = [
    "ApiGateway",
    "AppContext",
    "ColorScheme",
    "FormStateController",
    "ResolvedTheme",
    "ThemeController",
    "ValidationResult",
    "create_app_context",
    "get_current_theme",
]
