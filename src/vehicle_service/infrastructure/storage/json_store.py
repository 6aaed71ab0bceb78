"""Preference store backed by a JSON file."""

import asyncio
import json
import logging
from pathlib import Path

from vehicle_service.domain.repositories.preference_store import (
    PreferenceStore,
    PreferenceStoreError,
)

logger = logging.getLogger("vehicle_service.storage")


class JsonFilePreferenceStore(PreferenceStore):
    """Keeps all preferences in one JSON object on disk.

    File access runs in a worker thread so callers on the event loop are
    not blocked.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._read)
        value = data.get(key)
        return None if value is None else str(value)

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            data[key] = value
            await asyncio.to_thread(self._write, data)
        logger.debug(f"Stored preference {key}={value}")

    async def remove(self, key: str) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            if key not in data:
                return
            del data[key]
            await asyncio.to_thread(self._write, data)
        logger.debug(f"Removed preference {key}")

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            content = self.path.read_text(encoding="utf-8")
            data = json.loads(content) if content.strip() else {}
        except (OSError, json.JSONDecodeError) as e:
            raise PreferenceStoreError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PreferenceStoreError(f"Expected a JSON object in {self.path}")
        return data

    def _write(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise PreferenceStoreError(f"Cannot write {self.path}: {e}") from e
