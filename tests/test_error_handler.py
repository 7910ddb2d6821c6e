"""
Tests for converting outcomes and exceptions into HTTP error responses.
"""

import json

import pytest
from fastapi import HTTPException
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from bookstore import http_exception_handler, unhandled_exception_handler
from bookstore.api.responses import outcome_response
from bookstore.commands.base import Outcome
from bookstore.constants import INTERNAL_ERROR_MESSAGE
from bookstore.schemas.author import AuthorDTO
from bookstore.schemas.errors import FieldError, field_errors_from_pydantic


def make_request(method: str = "GET", path: str = "/api/authors") -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


def body(response) -> dict:
    return json.loads(response.body)


class TestOutcomeResponse:
    """Tests for outcome_response status mapping."""

    def test_success_uses_camel_case(self):
        outcome = Outcome.success(
            AuthorDTO(id=1, first_name="Ursula", last_name="Le Guin")
        )

        response = outcome_response(outcome, 201)

        assert response.status_code == 201
        assert body(response) == {
            "id": 1,
            "firstName": "Ursula",
            "lastName": "Le Guin",
            "bio": None,
            "books": [],
        }

    def test_success_no_content(self):
        response = outcome_response(Outcome.success(), 204)

        assert response.status_code == 204
        assert response.body == b""

    def test_not_found_has_empty_body(self):
        response = outcome_response(Outcome.not_found("Author 9 not found"))

        assert response.status_code == 404
        assert response.body == b""

    def test_invalid_lists_field_errors(self):
        outcome = Outcome.invalid(
            "Request data is invalid",
            [FieldError(field="firstName", message="Field required")],
        )

        response = outcome_response(outcome)

        assert response.status_code == 400
        assert body(response) == {
            "error": {
                "code": "validation_error",
                "msg": "Request data is invalid",
                "details": {
                    "errors": [
                        {"field": "firstName", "message": "Field required"}
                    ]
                },
            }
        }

    def test_conflict(self):
        response = outcome_response(Outcome.conflict("Author 1 has books"))

        assert response.status_code == 409
        assert body(response)["error"]["code"] == "conflict"

    def test_unauthorized_carries_details(self):
        outcome = Outcome.unauthorized(
            "Invalid email or password", {"emailAddress": "a@example.com"}
        )

        response = outcome_response(outcome)

        assert response.status_code == 401
        assert body(response)["error"]["details"] == {
            "emailAddress": "a@example.com"
        }

    def test_failed_hides_details(self):
        response = outcome_response(Outcome.failed("INSERT failed: disk full"))

        assert response.status_code == 500
        assert body(response)["error"]["msg"] == INTERNAL_ERROR_MESSAGE
        assert "disk full" not in response.body.decode()


class TestExceptionHandlers:
    """Tests for application level exception handlers."""

    @pytest.mark.asyncio
    async def test_forbidden(self):
        response = await http_exception_handler(
            make_request(),
            HTTPException(status_code=403, detail="Requires one of roles: Administrator"),
        )

        assert response.status_code == 403
        assert body(response)["error"] == {
            "code": "permission_denied",
            "msg": "Requires one of roles: Administrator",
        }

    @pytest.mark.asyncio
    async def test_unknown_route_is_empty_404(self):
        response = await http_exception_handler(
            make_request(path="/nowhere"),
            StarletteHTTPException(status_code=404, detail="Not Found"),
        )

        assert response.status_code == 404
        assert response.body == b""

    @pytest.mark.asyncio
    async def test_headers_are_kept(self):
        response = await http_exception_handler(
            make_request(),
            HTTPException(
                status_code=401,
                detail="Authentication required",
                headers={"WWW-Authenticate": "Bearer"},
            ),
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_unhandled_exception(self):
        response = await unhandled_exception_handler(
            make_request("POST"), RuntimeError("connection reset by peer")
        )

        assert response.status_code == 500
        assert body(response) == {
            "error": {"code": "internal_error", "msg": INTERNAL_ERROR_MESSAGE}
        }


class TestFieldErrorsFromPydantic:
    """Tests for converting validation errors to field errors."""

    def test_location_prefix_is_dropped(self):
        errors = field_errors_from_pydantic(
            [
                {"loc": ("body", "firstName"), "msg": "Field required"},
                {"loc": ("path", "author_id"), "msg": "Input should be a valid integer"},
            ]
        )

        assert [e.field for e in errors] == ["firstName", "author_id"]

    def test_missing_body(self):
        errors = field_errors_from_pydantic(
            [{"loc": ("body",), "msg": "Field required"}]
        )

        assert errors[0].field == "body"
