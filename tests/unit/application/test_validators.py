"""Tests for the request validators."""

import pytest

from passgate.application.validators import (
    ensure_valid,
    validate_login,
    validate_register,
)
from passgate.domain.shared.exceptions import ErrorCode, ValidationError

VALID_REGISTRATION = {
    "email": "test@example.com",
    "password": "password123",
    "name": "Test User",
}


class TestValidateLogin:
    def test_valid_input_has_no_errors(self):
        assert validate_login({"email": "a@example.com", "password": "x"}) == {}

    def test_empty_body_reports_both_fields(self):
        assert validate_login({}) == {
            "email": "Invalid email format",
            "password": "Password is required",
        }

    def test_bad_email(self):
        errors = validate_login({"email": "nope", "password": "secret"})
        assert errors == {"email": "Invalid email format"}

    @pytest.mark.parametrize("password", ["", None, 12345678])
    def test_missing_password(self, password):
        errors = validate_login({"email": "a@example.com", "password": password})
        assert errors == {"password": "Password is required"}

    def test_login_does_not_enforce_length(self):
        """Short passwords may still be checked against the stored hash."""
        assert validate_login({"email": "a@example.com", "password": "short"}) == {}


class TestValidateRegister:
    def test_valid_input_has_no_errors(self):
        assert validate_register(VALID_REGISTRATION) == {}

    def test_empty_body_reports_all_fields(self):
        errors = validate_register({})
        assert set(errors) == {"email", "password", "name"}

    def test_all_errors_reported_at_once(self):
        errors = validate_register({"email": "bad", "password": "short", "name": "X"})

        assert errors == {
            "email": "Invalid email format",
            "password": "Password must be at least 8 characters",
            "name": "Name must be between 2 and 100 characters",
        }

    @pytest.mark.parametrize(
        ("password", "valid"),
        [("a" * 7, False), ("a" * 8, True), ("a" * 200, True)],
    )
    def test_password_length_boundary(self, password, valid):
        errors = validate_register({**VALID_REGISTRATION, "password": password})
        assert ("password" not in errors) is valid

    @pytest.mark.parametrize(
        ("name", "valid"),
        [
            ("A", False),
            ("Al", True),
            ("x" * 100, True),
            ("x" * 101, False),
            ("", False),
            (None, False),
        ],
    )
    def test_name_length_boundary(self, name, valid):
        errors = validate_register({**VALID_REGISTRATION, "name": name})
        assert ("name" not in errors) is valid

    def test_non_string_password_is_rejected(self):
        errors = validate_register({**VALID_REGISTRATION, "password": 123456789})
        assert "password" in errors


class TestEnsureValid:
    def test_no_errors_passes(self):
        ensure_valid({})

    def test_errors_raise_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid({"email": "Invalid email format"})

        assert exc_info.value.errors == {"email": "Invalid email format"}
        assert exc_info.value.code == ErrorCode.INVALID_ARGUMENT
