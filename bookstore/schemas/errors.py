"""
Error envelope models for HTTP responses.

Every error body produced by the API follows a common shape:
- code: Machine-readable error code (string)
- msg: Human-readable error description
- details: Optional additional context (field errors, echoed email, etc.)

Example validation error response:
    {
        "error": {
            "code": "validation_error",
            "msg": "Request data is invalid",
            "details": {
                "errors": [
                    {"field": "firstName", "message": "Field required"}
                ]
            }
        }
    }
"""

from typing import Any

from pydantic import BaseModel, Field


class FieldError(BaseModel):  # type: ignore[misc]
    """A single failing field and the reason it was rejected."""

    field: str = Field(..., description="Name of the offending field (wire spelling)")
    message: str = Field(..., description="Why the value was rejected")


class ErrorEnvelope(BaseModel):  # type: ignore[misc]
    """
    Error envelope structure embedded in every error response.

    Attributes:
        code: Machine-readable error code for client-side error handling.
        msg: Human-readable error description for display.
        details: Optional additional context.
    """

    code: str = Field(
        ...,
        description="Machine-readable error code (e.g., 'validation_error', 'conflict')",
    )
    msg: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error context",
    )


class HTTPErrorResponse(BaseModel):  # type: ignore[misc]
    """
    HTTP error response envelope.

    Used as the JSON body for HTTP error responses. Replaces FastAPI's
    default ``{"detail": ...}`` structure.
    """

    error: ErrorEnvelope = Field(..., description="Error details envelope")


class ErrorCode:
    """
    Standard error codes for consistent error reporting.

    Categories:
    - Validation errors: VALIDATION_ERROR
    - Resource errors: NOT_FOUND, CONFLICT
    - Permission errors: PERMISSION_DENIED, AUTHENTICATION_FAILED
    - System errors: INTERNAL_ERROR
    """

    VALIDATION_ERROR = "validation_error"

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"

    PERMISSION_DENIED = "permission_denied"
    AUTHENTICATION_FAILED = "authentication_failed"

    INTERNAL_ERROR = "internal_error"


def http_error_response(
    code: str,
    msg: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build a JSON-ready HTTP error body with the unified envelope.

    Args:
        code: Machine-readable error code (use ErrorCode constants).
        msg: Human-readable error message.
        details: Optional additional context.

    Returns:
        Dictionary suitable as JSONResponse content.
    """
    return HTTPErrorResponse(
        error=ErrorEnvelope(code=code, msg=msg, details=details)
    ).model_dump(exclude_none=True)


def field_errors_from_pydantic(errors: list[dict[str, Any]]) -> list[FieldError]:
    """
    Convert pydantic/FastAPI validation errors into FieldError items.

    The location prefix added by FastAPI ("body", "path", "query") is
    dropped; a missing body is reported against the field "body".

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        One FieldError per reported problem, in the original order.
    """
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query") and len(loc) > 1:
            loc = loc[1:]
        field_errors.append(
            FieldError(field=".".join(loc) or "body", message=error["msg"])
        )
    return field_errors
