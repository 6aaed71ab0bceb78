"""Field schemas for the app's forms and their submit-time conversions."""

import logging
from collections.abc import Mapping
from typing import Any

from vehicle_service.domain.services.form_state import FieldSpec, FormSchema
from vehicle_service.domain.services.validation.forms import (
    validate_login_form,
    validate_registration_form,
    validate_service_request_form,
    validate_vehicle_form,
)

logger = logging.getLogger("vehicle_service.forms")

LOGIN_FORM = FormSchema(
    name="login",
    fields=(FieldSpec("email"), FieldSpec("password")),
    validator=validate_login_form,
)

REGISTRATION_FORM = FormSchema(
    name="registration",
    fields=(
        FieldSpec("first_name"),
        FieldSpec("last_name"),
        FieldSpec("email"),
        FieldSpec("password"),
        FieldSpec("confirm_password"),
        FieldSpec("phone_number"),
    ),
    validator=validate_registration_form,
)

VEHICLE_FORM = FormSchema(
    name="vehicle",
    fields=(
        FieldSpec("make"),
        FieldSpec("model"),
        FieldSpec("year"),
        FieldSpec("color"),
        FieldSpec("license_plate"),
        FieldSpec("vin"),
        FieldSpec("mileage"),
        FieldSpec("image", default=None),
    ),
    validator=validate_vehicle_form,
)

SERVICE_REQUEST_FORM = FormSchema(
    name="service_request",
    fields=(
        FieldSpec("vehicle_id"),
        FieldSpec("service_type"),
        FieldSpec("description"),
        FieldSpec("preferred_date"),
        FieldSpec("notes"),
    ),
    validator=validate_service_request_form,
)


def _parse_optional_int(field_name: str, value: Any) -> int | None:
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        # Mileage has no dedicated rule; unparseable input is sent as null.
        logger.warning(f"Ignoring non-numeric {field_name}: {value!r}")
        return None


def vehicle_payload(values: Mapping[str, Any]) -> dict[str, Any]:
    """Convert validated vehicle form values into an API request body."""
    payload = dict(values)
    payload["year"] = int(str(values["year"]).strip())
    payload["mileage"] = _parse_optional_int("mileage", values.get("mileage"))
    return payload


def registration_payload(values: Mapping[str, Any]) -> dict[str, Any]:
    """Drop the confirmation field before sending a sign-up request."""
    return {key: value for key, value in values.items() if key != "confirm_password"}
