"""Tests for the centralized exception-to-response mapping."""

import warnings
from types import SimpleNamespace

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from passgate.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from passgate.domain.user import EmailAlreadyRegisteredError, UserNotFoundError
from passgate.presentation.api.dependencies import JSONBody
from passgate.presentation.api.exception_handlers import (
    ERROR_CODE_TO_STATUS,
    setup_exception_handlers,
)
from passgate_auth import InvalidCredentialsError, InvalidTokenError


def _build_app(debug: bool = False) -> FastAPI:
    app = FastAPI()
    app.state.settings = SimpleNamespace(debug=debug)
    setup_exception_handlers(app)

    raisers = {
        "validation": ValidationError({"email": "Invalid email format"}),
        "credentials": InvalidCredentialsError(),
        "token": InvalidTokenError("Token has expired"),
        "duplicate": EmailAlreadyRegisteredError("a@example.com"),
        "missing": UserNotFoundError(7),
        "domain": DomainException("Something broke a rule"),
        "crash": RuntimeError("database exploded"),
    }

    @app.get("/raise/{name}")
    async def raise_named(name: str):
        raise raisers[name]

    @app.post("/echo")
    async def echo(payload: JSONBody):
        return payload

    return app


class TestErrorCodeTable:
    def test_every_error_code_has_a_status(self):
        assert set(ERROR_CODE_TO_STATUS) == set(ErrorCode)

    def test_unprocessable_status_uses_current_constant(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            expected = status.HTTP_422_UNPROCESSABLE_CONTENT

        assert ERROR_CODE_TO_STATUS[ErrorCode.INVALID_ARGUMENT] == expected == 422

    @pytest.mark.parametrize(
        ("code", "status"),
        [
            (ErrorCode.INVALID_JSON, 400),
            (ErrorCode.INVALID_ARGUMENT, 422),
            (ErrorCode.INVALID_CREDENTIALS, 401),
            (ErrorCode.UNAUTHORIZED, 401),
            (ErrorCode.USER_NOT_FOUND, 404),
            (ErrorCode.DOMAIN_ERROR, 400),
            (ErrorCode.INTERNAL_SERVER_ERROR, 500),
        ],
    )
    def test_status_for_code(self, code, status):
        assert ERROR_CODE_TO_STATUS[code] == status


class TestExceptionHandlers:
    def setup_method(self):
        self.client = TestClient(_build_app(), raise_server_exceptions=False)

    def test_validation_error_lists_fields(self):
        response = self.client.get("/raise/validation")

        assert response.status_code == 422
        assert response.json() == {
            "error": {
                "code": "INVALID_ARGUMENT",
                "message": "Validation failed",
                "status": 422,
            },
            "errors": {"email": "Invalid email format"},
        }

    def test_invalid_credentials(self):
        response = self.client.get("/raise/credentials")

        assert response.status_code == 401
        assert response.json() == {
            "error": {
                "code": "INVALID_CREDENTIALS",
                "message": "Invalid credentials",
                "status": 401,
            },
        }

    def test_invalid_token_hides_reason(self):
        response = self.client.get("/raise/token")

        assert response.status_code == 401
        assert response.json()["error"] == {
            "code": "UNAUTHORIZED",
            "message": "Invalid token",
            "status": 401,
        }
        assert response.headers["www-authenticate"] == "Bearer"

    def test_duplicate_email_is_domain_error(self):
        response = self.client.get("/raise/duplicate")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "DOMAIN_ERROR"
        assert response.json()["error"]["message"] == "Email already registered"

    def test_user_not_found(self):
        response = self.client.get("/raise/missing")

        assert response.status_code == 404
        assert response.json()["error"] == {
            "code": "USER_NOT_FOUND",
            "message": "User not found",
            "status": 404,
        }

    def test_domain_details_are_not_exposed(self):
        response = self.client.get("/raise/duplicate")
        assert "a@example.com" not in response.text

    def test_generic_domain_exception(self):
        response = self.client.get("/raise/domain")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Something broke a rule"

    @pytest.mark.parametrize(
        "body",
        [b"{not json", b"[1, 2, 3]", b'"text"', b"", b"{}"],
    )
    def test_unparsable_body_is_invalid_json(self, body):
        response = self.client.post(
            "/echo",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_JSON"
        assert response.json()["error"]["message"] == "Invalid JSON"


class TestUnhandledExceptions:
    def test_production_hides_details(self):
        client = TestClient(_build_app(debug=False), raise_server_exceptions=False)

        response = client.get("/raise/crash")

        assert response.status_code == 500
        assert response.json() == {
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "Internal server error",
                "status": 500,
            },
        }
        assert "database exploded" not in response.text

    def test_debug_includes_message_and_trace(self):
        client = TestClient(_build_app(debug=True), raise_server_exceptions=False)

        response = client.get("/raise/crash")

        error = response.json()["error"]
        assert response.status_code == 500
        assert error["message"] == "database exploded"
        assert any("RuntimeError" in line for line in error["trace"])
