"""Preference store interface."""

from abc import ABC, abstractmethod

THEME_PREFERENCE_KEY = "theme_preference"
USER_TOKEN_KEY = "user_token"


class PreferenceStoreError(Exception):
    """Raised when the backing store cannot be read or written."""


class PreferenceStore(ABC):
    """Key-value persistence for user preferences."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Get a stored value, or None if the key is unset."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value."""
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove a value. Removing an unset key is not an error."""
        pass
