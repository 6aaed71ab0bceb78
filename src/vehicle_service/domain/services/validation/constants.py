"""Validation limits, patterns and messages."""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{0,15}$", re.ASCII)

PASSWORD_MIN_LENGTH = 6
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
VIN_LENGTH = 17
MIN_VEHICLE_YEAR = 1900


class ErrorMessages:
    """User-facing validation messages."""
    FIELD_REQUIRED = "This field is required."
    INVALID_EMAIL = "Please enter a valid email address."
    INVALID_PHONE = "Please enter a valid phone number."
    PASSWORD_TOO_SHORT = f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
    PASSWORDS_DONT_MATCH = "Passwords do not match."
    INVALID_YEAR = "Year must be a valid number."

    @staticmethod
    def password_too_short(min_length: int) -> str:
        return f"Password must be at least {min_length} characters."

    @staticmethod
    def name_too_short(field_name: str, min_length: int) -> str:
        return f"{field_name} must be at least {min_length} characters."

    @staticmethod
    def name_too_long(field_name: str, max_length: int) -> str:
        return f"{field_name} must be less than {max_length} characters."

    @staticmethod
    def required(field_name: str) -> str:
        return f"{field_name} is required."

    @staticmethod
    def vin_length(length: int) -> str:
        return f"VIN must be exactly {length} characters."

    @staticmethod
    def year_out_of_range(min_year: int, max_year: int) -> str:
        return f"Year must be between {min_year} and {max_year}."
