"""Tests for composite form validators."""

import pytest

from vehicle_service.domain.services.validation import (
    ErrorMessages,
    validate_login_form,
    validate_registration_form,
    validate_service_request_form,
    validate_vehicle_form,
)
from vehicle_service.domain.value_objects.validation_result import ValidationResult


def _registration(**overrides):
    data = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@email.com",
        "password": "password",
        "phone_number": "+27111234567",
    }
    data.update(overrides)
    return data


class TestLoginForm:
    def test_every_field_reported(self):
        result = validate_login_form({"email": "not-an-email", "password": ""})

        assert result.is_valid is False
        assert dict(result.errors) == {
            "email": ErrorMessages.INVALID_EMAIL,
            "password": ErrorMessages.FIELD_REQUIRED,
        }

    def test_valid(self):
        result = validate_login_form({"email": "john.doe@email.com", "password": "password"})
        assert result.is_valid
        assert dict(result.errors) == {}

    def test_missing_keys_are_absent(self):
        result = validate_login_form({})
        assert set(result.errors) == {"email", "password"}


class TestRegistrationForm:
    def test_valid_without_confirmation_field(self):
        assert validate_registration_form(_registration()).is_valid

    def test_confirmation_checked_when_present(self):
        result = validate_registration_form(_registration(confirm_password="different"))
        assert dict(result.errors) == {"confirm_password": ErrorMessages.PASSWORDS_DONT_MATCH}

    def test_confirmation_empty_when_present(self):
        result = validate_registration_form(_registration(confirm_password=""))
        assert dict(result.errors) == {"confirm_password": ErrorMessages.FIELD_REQUIRED}

    def test_matching_confirmation(self):
        assert validate_registration_form(_registration(confirm_password="password")).is_valid

    def test_phone_optional(self):
        assert validate_registration_form(_registration(phone_number="")).is_valid

    def test_no_short_circuit(self):
        result = validate_registration_form({
            "first_name": "J",
            "last_name": "",
            "email": "bad",
            "password": "123",
            "phone_number": "abc",
        })
        assert set(result.errors) == {"first_name", "last_name", "email", "password", "phone_number"}
        assert result.errors["first_name"] == "First name must be at least 2 characters."


class TestVehicleForm:
    def test_round_trip_example(self):
        result = validate_vehicle_form({
            "make": "Toyota",
            "model": "Camry",
            "year": "2020",
            "vin": "1HGBH41JXMN109186",
        })
        assert result.is_valid is True
        assert dict(result.errors) == {}

    def test_errors(self):
        result = validate_vehicle_form({"make": " ", "model": "", "year": "1800", "vin": "SHORT"})
        assert result.errors["make"] == "Make is required."
        assert result.errors["model"] == "Model is required."
        assert result.errors["year"].startswith("Year must be between 1900")
        assert result.errors["vin"] == "VIN must be exactly 17 characters."

    def test_mileage_not_validated(self):
        result = validate_vehicle_form({"make": "Ford", "model": "Focus", "year": "2015", "mileage": "lots"})
        assert result.is_valid


class TestServiceRequestForm:
    def test_all_required(self):
        result = validate_service_request_form({})
        assert dict(result.errors) == {
            "vehicle_id": "Vehicle is required.",
            "service_type": "Service type is required.",
            "description": "Description is required.",
        }

    def test_valid(self):
        result = validate_service_request_form({
            "vehicle_id": 3,
            "service_type": "Oil change",
            "description": "Due at 15000 km",
        })
        assert result.is_valid


class TestValidationResult:
    def test_is_valid_matches_errors(self):
        assert ValidationResult().is_valid
        assert not ValidationResult({"a": "bad"}).is_valid

    def test_from_checks_drops_passes(self):
        result = ValidationResult.from_checks({"a": None, "b": "bad", "c": ""})
        assert dict(result.errors) == {"b": "bad"}

    def test_errors_are_read_only(self):
        source = {"a": "bad"}
        result = ValidationResult(source)
        source["b"] = "later"
        assert "b" not in result.errors
        with pytest.raises(TypeError):
            result.errors["c"] = "x"  # type: ignore[index]

    def test_truthiness(self):
        assert bool(ValidationResult()) is True
        assert bool(ValidationResult({"a": "bad"})) is False
