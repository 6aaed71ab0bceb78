"""Configuration loading."""

from vehicle_service.shared.config.settings import (
    ApiSettings,
    LoggingSettings,
    Settings,
    ThemeSettings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "LoggingSettings",
    "Settings",
    "ThemeSettings",
    "get_settings",
]
