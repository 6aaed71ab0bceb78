"""Field-level validation rules.

Every rule takes the raw field value and returns ``None`` when the value is
acceptable or a non-empty message otherwise. Rules never raise on bad input.
Empty strings and ``None`` both count as an absent value.
"""

from datetime import date
from typing import Any

from vehicle_service.domain.services.validation.constants import (
    EMAIL_PATTERN,
    MIN_VEHICLE_YEAR,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
    PHONE_PATTERN,
    VIN_LENGTH,
    ErrorMessages,
)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def current_year() -> int:
    """Get the calendar year used for the upper bound of vehicle years."""
    return date.today().year


def validate_email(email: str | None) -> str | None:
    """Required; must look like ``local@domain.tld``."""
    if _is_absent(email):
        return ErrorMessages.FIELD_REQUIRED
    if not EMAIL_PATTERN.fullmatch(str(email)):
        return ErrorMessages.INVALID_EMAIL
    return None


def validate_password(
    password: str | None,
    min_length: int = PASSWORD_MIN_LENGTH,
) -> str | None:
    """Required; at least ``min_length`` characters."""
    if _is_absent(password):
        return ErrorMessages.FIELD_REQUIRED
    if len(str(password)) < min_length:
        return ErrorMessages.password_too_short(min_length)
    return None


def validate_confirm_password(password: str | None, confirm_password: str | None) -> str | None:
    """Required; must equal the paired password verbatim."""
    if _is_absent(confirm_password):
        return ErrorMessages.FIELD_REQUIRED
    if password != confirm_password:
        return ErrorMessages.PASSWORDS_DONT_MATCH
    return None


def validate_name(
    name: str | None,
    field_name: str = "Name",
    min_length: int = NAME_MIN_LENGTH,
    max_length: int = NAME_MAX_LENGTH,
) -> str | None:
    """Required; trimmed length within ``[min_length, max_length]``."""
    if _is_absent(name):
        return ErrorMessages.FIELD_REQUIRED
    length = len(str(name).strip())
    if length < min_length:
        return ErrorMessages.name_too_short(field_name, min_length)
    if length > max_length:
        return ErrorMessages.name_too_long(field_name, max_length)
    return None


def validate_phone(phone: str | None) -> str | None:
    """Optional; digits with an optional leading plus."""
    if _is_absent(phone):
        return None
    if not PHONE_PATTERN.fullmatch(str(phone)):
        return ErrorMessages.INVALID_PHONE
    return None


def validate_required(value: Any, field_name: str = "Field") -> str | None:
    """Reject absent, falsy and whitespace-only values."""
    if not value or (isinstance(value, str) and not value.strip()):
        return ErrorMessages.required(field_name)
    return None


def validate_vin(vin: str | None, length: int = VIN_LENGTH) -> str | None:
    """Optional; exactly ``length`` characters when present."""
    if _is_absent(vin):
        return None
    if len(str(vin)) != length:
        return ErrorMessages.vin_length(length)
    return None


def validate_year(
    year: str | int | None,
    min_year: int = MIN_VEHICLE_YEAR,
    max_year: int | None = None,
) -> str | None:
    """Required; an integer in ``[min_year, current year + 1]``.

    The value is checked on its string form, so ``"2020"`` and ``2020`` are
    equivalent. Only plain ASCII digits count as a number.
    """
    if _is_absent(year):
        return ErrorMessages.FIELD_REQUIRED
    text = str(year).strip()
    if not (text.isascii() and text.isdecimal()):
        return ErrorMessages.INVALID_YEAR
    year_number = int(text)
    upper = max_year if max_year is not None else current_year() + 1
    if year_number < min_year or year_number > upper:
        return ErrorMessages.year_out_of_range(min_year, upper)
    return None
