"""Composite validators for each form in the app.

Each validator checks every field independently and aggregates the failures
into one ``ValidationResult``.
"""

from collections.abc import Mapping
from typing import Any

from vehicle_service.domain.services.validation.rules import (
    validate_confirm_password,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
    validate_required,
    validate_vin,
    validate_year,
)
from vehicle_service.domain.value_objects.validation_result import ValidationResult

FormData = Mapping[str, Any]


def validate_login_form(form_data: FormData) -> ValidationResult:
    """Validate email and password."""
    return ValidationResult.from_checks({
        "email": validate_email(form_data.get("email")),
        "password": validate_password(form_data.get("password")),
    })


def validate_registration_form(form_data: FormData) -> ValidationResult:
    """Validate the sign-up form.

    The password confirmation is only checked when the form carries a
    ``confirm_password`` key at all.
    """
    checks = {
        "first_name": validate_name(form_data.get("first_name"), "First name"),
        "last_name": validate_name(form_data.get("last_name"), "Last name"),
        "email": validate_email(form_data.get("email")),
        "password": validate_password(form_data.get("password")),
    }
    if "confirm_password" in form_data:
        checks["confirm_password"] = validate_confirm_password(
            form_data.get("password"),
            form_data.get("confirm_password"),
        )
    checks["phone_number"] = validate_phone(form_data.get("phone_number"))
    return ValidationResult.from_checks(checks)


def validate_vehicle_form(form_data: FormData) -> ValidationResult:
    """Validate make, model, year and VIN."""
    return ValidationResult.from_checks({
        "make": validate_required(form_data.get("make"), "Make"),
        "model": validate_required(form_data.get("model"), "Model"),
        "year": validate_year(form_data.get("year")),
        "vin": validate_vin(form_data.get("vin")),
    })


def validate_service_request_form(form_data: FormData) -> ValidationResult:
    """Validate vehicle, service type and description."""
    return ValidationResult.from_checks({
        "vehicle_id": validate_required(form_data.get("vehicle_id"), "Vehicle"),
        "service_type": validate_required(form_data.get("service_type"), "Service type"),
        "description": validate_required(form_data.get("description"), "Description"),
    })
