"""Validation result value object."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of validating one form.

    ``errors`` maps field keys to human-readable messages and only contains
    failing fields, so ``is_valid`` is exactly ``not errors``.
    """

    errors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the error mapping."""
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @property
    def is_valid(self) -> bool:
        """True when no field failed."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def from_checks(cls, checks: Mapping[str, str | None]) -> Self:
        """Build a result from per-field rule outputs, dropping passes."""
        return cls({key: message for key, message in checks.items() if message})

    def error_for(self, key: str) -> str | None:
        """Get the message for one field, if it failed."""
        return self.errors.get(key)

    @property
    def messages(self) -> list[str]:
        """All messages in field evaluation order."""
        return list(self.errors.values())

    def __str__(self) -> str:
        if self.is_valid:
            return "ValidationResult(valid)"
        return f"ValidationResult(invalid: {', '.join(self.errors)})"
