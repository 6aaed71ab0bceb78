"""In-process preference store."""

from vehicle_service.domain.repositories.preference_store import PreferenceStore


class InMemoryPreferenceStore(PreferenceStore):
    """Preference store that lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Get a copy of everything stored."""
        return dict(self._data)
