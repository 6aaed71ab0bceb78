"""Helpers shared by the endpoint services."""

from typing import Any


def unwrap(response: Any) -> Any:
    """Strip a ``{"data": ...}`` envelope if the backend sent one."""
    if isinstance(response, dict) and "data" in response:
        return response["data"]
    return response


def as_list(response: Any) -> list[dict[str, Any]]:
    """Unwrap and coerce a collection response to a list of records."""
    data = unwrap(response)
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]


def blank_to_none(values: dict[str, Any]) -> dict[str, Any]:
    """Turn empty form strings into None so optional fields are omitted."""
    return {key: (None if value == "" else value) for key, value in values.items()}
