"""Validation rules and per-form validators."""

from vehicle_service.domain.services.validation.constants import ErrorMessages
from vehicle_service.domain.services.validation.forms import (
    validate_login_form,
    validate_registration_form,
    validate_service_request_form,
    validate_vehicle_form,
)
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

__all__ = [
    "ErrorMessages",
    "validate_confirm_password",
    "validate_email",
    "validate_login_form",
    "validate_name",
    "validate_password",
    "validate_phone",
    "validate_registration_form",
    "validate_required",
    "validate_service_request_form",
    "validate_vehicle_form",
    "validate_vin",
    "validate_year",
]
