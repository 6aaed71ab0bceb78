"""Preference store implementations."""

from vehicle_service.infrastructure.storage.json_store import JsonFilePreferenceStore
from vehicle_service.infrastructure.storage.memory_store import InMemoryPreferenceStore

__all__ = ["InMemoryPreferenceStore", "JsonFilePreferenceStore"]
