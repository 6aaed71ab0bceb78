"""Tests for the form state controller."""

import pytest

from vehicle_service.domain.entities.vehicle import Vehicle
from vehicle_service.domain.services.form_schemas import (
    LOGIN_FORM,
    REGISTRATION_FORM,
    VEHICLE_FORM,
    registration_payload,
    vehicle_payload,
)
from vehicle_service.domain.services.form_state import FieldSpec, FormStateController
from vehicle_service.domain.services.validation import (
    ErrorMessages,
    validate_email,
    validate_login_form,
)


@pytest.fixture
def login_form() -> FormStateController:
    return FormStateController.from_schema(LOGIN_FORM)


class TestInitialState:
    def test_defaults(self, login_form):
        assert dict(login_form.values) == {"email": "", "password": ""}
        assert dict(login_form.errors) == {}
        assert not login_form.is_dirty

    def test_edit_mode_coerces_numbers(self):
        form = FormStateController.from_schema(VEHICLE_FORM, {
            "make": "Toyota",
            "model": "Camry",
            "year": 2020,
            "mileage": 45000,
            "vin": None,
        })
        assert form.value("year") == "2020"
        assert form.value("mileage") == "45000"
        assert form.value("vin") == ""
        assert form.value("color") == ""
        assert form.value("image") is None

    def test_plain_field_names(self):
        form = FormStateController(["a", FieldSpec("b", default="x")])
        assert dict(form.values) == {"a": "", "b": "x"}


class TestSetField:
    def test_updates_value(self, login_form):
        login_form.set_field("email", "john@x.io")
        assert login_form.value("email") == "john@x.io"
        assert login_form.is_dirty

    def test_clears_error_on_any_change_not_just_valid_change(self, login_form):
        login_form.validate_and_submit(validate_login_form, lambda values: None)
        assert login_form.error("email") == ErrorMessages.FIELD_REQUIRED

        login_form.set_field("email", "still-not-an-email")

        assert login_form.error("email") is None
        assert "email" not in login_form.active_errors
        assert login_form.error("password") == ErrorMessages.FIELD_REQUIRED

    def test_clears_even_with_empty_value(self, login_form):
        login_form.validate_and_submit(validate_login_form, lambda values: None)
        login_form.set_field("password", "")
        assert login_form.error("password") is None

    def test_unknown_field(self, login_form):
        with pytest.raises(KeyError):
            login_form.set_field("username", "x")

    def test_values_view_is_read_only(self, login_form):
        with pytest.raises(TypeError):
            login_form.values["email"] = "x"  # type: ignore[index]


class TestValidateAndSubmit:
    def test_invalid_stores_errors_and_skips_submit(self, login_form):
        submitted = []
        login_form.set_field("email", "not-an-email")

        result = login_form.validate_and_submit(validate_login_form, submitted.append)

        assert not result.is_valid
        assert submitted == []
        assert login_form.active_errors == {
            "email": ErrorMessages.INVALID_EMAIL,
            "password": ErrorMessages.FIELD_REQUIRED,
        }

    def test_valid_calls_submit_with_values(self, login_form):
        submitted = []
        login_form.set_field("email", "john.doe@email.com")
        login_form.set_field("password", "password")

        result = login_form.validate_and_submit(validate_login_form, submitted.append)

        assert result.is_valid
        assert dict(result.errors) == {}
        assert submitted == [{"email": "john.doe@email.com", "password": "password"}]
        assert not login_form.has_errors

    def test_new_failure_replaces_error_map(self, login_form):
        login_form.validate_and_submit(validate_login_form, lambda values: None)
        login_form.set_field("password", "password")
        login_form.validate_and_submit(validate_login_form, lambda values: None)
        assert dict(login_form.errors) == {"email": ErrorMessages.FIELD_REQUIRED}

    def test_errors_outside_schema_are_dropped(self, login_form):
        from vehicle_service.domain.value_objects.validation_result import ValidationResult

        login_form.validate_and_submit(lambda values: ValidationResult({"other": "x", "email": "bad"}),
                                       lambda values: None)
        assert dict(login_form.errors) == {"email": "bad"}

    async def test_async_submit(self, login_form):
        seen = []

        async def on_valid(values):
            seen.append(values["email"])

        login_form.set_field("email", "john.doe@email.com")
        login_form.set_field("password", "password")
        result = await login_form.validate_and_submit_async(validate_login_form, on_valid)

        assert result.is_valid
        assert seen == ["john.doe@email.com"]

    async def test_async_submit_invalid(self, login_form):
        async def on_valid(values):
            raise AssertionError("should not be called")

        result = await login_form.validate_and_submit_async(validate_login_form, on_valid)
        assert not result.is_valid


class TestValidateField:
    def test_blur_records_single_error(self, login_form):
        login_form.set_field("email", "nope")
        assert login_form.validate_field("email", validate_email) == ErrorMessages.INVALID_EMAIL
        assert login_form.active_errors == {"email": ErrorMessages.INVALID_EMAIL}

    def test_blur_clears_when_valid(self, login_form):
        login_form.set_field("email", "a@b.co")
        assert login_form.validate_field("email", validate_email) is None
        assert not login_form.has_errors


class TestReset:
    def test_reset_replaces_values_and_clears_errors(self, login_form):
        login_form.validate_and_submit(validate_login_form, lambda values: None)
        login_form.reset({"email": "saved@x.io"})

        assert dict(login_form.values) == {"email": "saved@x.io", "password": ""}
        assert dict(login_form.errors) == {}
        assert not login_form.is_dirty

    def test_cancel_edit(self):
        original = {"make": "Toyota", "model": "Camry", "year": "2020"}
        form = FormStateController.from_schema(VEHICLE_FORM, original)
        form.set_field("model", "Corolla")
        form.reset(original)
        assert form.value("model") == "Camry"

    def test_cancel_edit_with_entity_data_matches_mount(self):
        vehicle = Vehicle(id="3", make="Toyota", model="Camry", year=2020, mileage=45000)
        form = FormStateController.from_schema(VEHICLE_FORM, vehicle.to_form_data())
        mounted = dict(form.values)
        form.set_field("year", "2021")

        form.reset(vehicle.to_form_data())

        assert dict(form.values) == mounted
        assert form.value("year") == "2020"
        assert form.value("mileage") == "45000"
        assert form.value("vin") == ""
        assert not form.is_dirty

    def test_booleans_are_not_stringified(self):
        form = FormStateController([FieldSpec("agree", default=False)], {"agree": True})
        assert form.value("agree") is True


class TestEditMode:
    def test_vehicle_record_prefills_form(self):
        vehicle = Vehicle.from_api({
            "id": 3, "make": "Toyota", "model": "Camry", "year": 2020,
            "licensePlate": "CA 1", "vin": None, "mileage": 45000,
        })

        form = FormStateController.from_schema(VEHICLE_FORM, vehicle.to_form_data())

        assert dict(form.values) == {
            "make": "Toyota",
            "model": "Camry",
            "year": "2020",
            "color": "",
            "license_plate": "CA 1",
            "vin": "",
            "mileage": "45000",
            "image": None,
        }
        assert VEHICLE_FORM.validator(form.values).is_valid

    def test_undeclared_keys_are_ignored(self):
        form = FormStateController.from_schema(LOGIN_FORM, {"email": "a@b.co", "id": 7})
        assert form.field_names == ("email", "password")


class TestPayloads:
    def test_vehicle_payload_parses_numbers(self):
        payload = vehicle_payload({"make": "Toyota", "model": "Camry", "year": "2020", "mileage": "45000"})
        assert payload["year"] == 2020
        assert payload["mileage"] == 45000

    def test_vehicle_payload_blank_mileage(self):
        assert vehicle_payload({"year": "2020", "mileage": ""})["mileage"] is None

    def test_vehicle_payload_non_numeric_mileage_is_dropped(self):
        assert vehicle_payload({"year": "2020", "mileage": "lots"})["mileage"] is None

    def test_registration_payload_omits_confirmation(self):
        form = FormStateController.from_schema(REGISTRATION_FORM)
        form.set_field("confirm_password", "secret1")
        assert "confirm_password" not in registration_payload(form.values)
