"""Persistence interfaces implemented by the infrastructure layer."""

from vehicle_service.domain.repositories.preference_store import (
    THEME_PREFERENCE_KEY,
    USER_TOKEN_KEY,
    PreferenceStore,
    PreferenceStoreError,
)

__all__ = ["THEME_PREFERENCE_KEY", "USER_TOKEN_KEY", "PreferenceStore", "PreferenceStoreError"]
