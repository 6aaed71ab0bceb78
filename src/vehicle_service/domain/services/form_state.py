"""Form state controller shared by every data-entry screen."""

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from vehicle_service.domain.value_objects.validation_result import ValidationResult

logger = logging.getLogger("vehicle_service.forms")

FormValidator = Callable[[Mapping[str, Any]], ValidationResult]
FieldRule = Callable[[Any], str | None]


@dataclass(frozen=True)
class FieldSpec:
    """A named input declared by a form."""
    name: str
    default: Any = ""


@dataclass(frozen=True)
class FormSchema:
    """Static field set of a form together with its composite validator."""
    name: str
    fields: tuple[FieldSpec, ...]
    validator: FormValidator

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    def defaults(self) -> dict[str, Any]:
        """Get the empty-form values."""
        return {spec.name: spec.default for spec in self.fields}


class FormStateController:
    """Holds field values and field errors for one form instance.

    Errors are advisory: any change to a field clears that field's error
    without re-validating, and full validation only runs on submit (or on an
    explicit blur-time ``validate_field``). The field set is fixed at
    construction; touching an undeclared key raises ``KeyError``.

    The controller does not guard against overlapping submits; callers
    disable their submit trigger while a submission is pending.
    """

    def __init__(self, fields: Iterable[str | FieldSpec],
                 initial_values: Mapping[str, Any] | None = None):
        specs = tuple(
            spec if isinstance(spec, FieldSpec) else FieldSpec(spec)
            for spec in fields
        )
        self._defaults = {spec.name: spec.default for spec in specs}
        self._values: dict[str, Any] = {}
        self._errors: dict[str, str | None] = {}
        self._initial: dict[str, Any] = {}
        self.reset(initial_values)

    @classmethod
    def from_schema(cls, schema: FormSchema,
                    initial_data: Mapping[str, Any] | None = None) -> "FormStateController":
        """Create a controller for a schema, optionally in edit mode.

        Keys in ``initial_data`` that the schema does not declare are ignored,
        so an entity record can be passed as is.
        """
        initial = None
        if initial_data is not None:
            initial = {name: initial_data.get(name) for name in schema.field_names}
        return cls(schema.fields, initial)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._defaults)

    @property
    def values(self) -> Mapping[str, Any]:
        """Read-only view of the current field values."""
        return MappingProxyType(self._values)

    @property
    def errors(self) -> Mapping[str, str | None]:
        """Read-only view of recorded errors; cleared entries hold ``None``."""
        return MappingProxyType(self._errors)

    @property
    def active_errors(self) -> dict[str, str]:
        """Errors that are currently displayed."""
        return {key: message for key, message in self._errors.items() if message}

    @property
    def has_errors(self) -> bool:
        return bool(self.active_errors)

    @property
    def is_dirty(self) -> bool:
        """Check if any value differs from the last reset."""
        return self._values != self._initial

    def value(self, key: str) -> Any:
        self._check_key(key)
        return self._values[key]

    def error(self, key: str) -> str | None:
        self._check_key(key)
        return self._errors.get(key)

    def set_field(self, key: str, value: Any) -> None:
        """Overwrite a field value and clear its error, if any."""
        self._check_key(key)
        self._values[key] = value
        if self._errors.get(key):
            self._errors[key] = None

    def validate_field(self, key: str, rule: FieldRule) -> str | None:
        """Run a single-field rule (e.g. on blur) and record its outcome."""
        self._check_key(key)
        message = rule(self._values[key])
        self._errors[key] = message
        return message

    def validate_and_submit(self, validator: FormValidator,
                            on_valid: Callable[[Mapping[str, Any]], Any]) -> ValidationResult:
        """Validate all fields and call ``on_valid`` with the values if they pass.

        On failure the result's errors replace the stored error map and
        ``on_valid`` is not called.
        """
        result = self._run_validator(validator)
        if result.is_valid:
            on_valid(dict(self._values))
        return result

    async def validate_and_submit_async(
        self,
        validator: FormValidator,
        on_valid: Callable[[Mapping[str, Any]], Awaitable[Any]],
    ) -> ValidationResult:
        """Same as ``validate_and_submit`` but awaits ``on_valid``."""
        result = self._run_validator(validator)
        if result.is_valid:
            await on_valid(dict(self._values))
        return result

    def reset(self, initial_values: Mapping[str, Any] | None = None) -> None:
        """Replace all values and clear every error.

        Used for the initial mount and for cancel-edit. Numbers are stored as
        the strings a text input would hold; ``None`` falls back to the
        field default.
        """
        values = dict(self._defaults)
        if initial_values:
            for key, value in initial_values.items():
                self._check_key(key)
                values[key] = self._as_input_value(key, value)
        self._values = values
        self._initial = dict(values)
        self._errors = {}

    def _as_input_value(self, key: str, value: Any) -> Any:
        if value is None:
            return self._defaults[key]
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def _run_validator(self, validator: FormValidator) -> ValidationResult:
        result = validator(dict(self._values))
        if not result.is_valid:
            self._errors = {
                key: message for key, message in result.errors.items()
                if key in self._defaults
            }
            logger.debug(f"Form validation failed: {sorted(self._errors)}")
        return result

    def _check_key(self, key: str) -> None:
        if key not in self._defaults:
            raise KeyError(f"Unknown form field: {key}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fields={list(self._defaults)}, errors={len(self.active_errors)})"
