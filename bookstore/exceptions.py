"""
Custom exception classes for the application.

Expected results of an operation (not found, invalid input, conflicts) are
returned as Outcome values by commands. The exceptions here are reserved for
failures raised outside of command code: token validation in the
authentication backend and persistence faults surfaced by the storage layer.
Each exception carries the HTTP status it maps to.
"""

from starlette.authentication import (
    AuthenticationError as StarletteAuthenticationError,
)


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when the database cannot be reached or initialized.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500


class AuthenticationError(AppException, StarletteAuthenticationError):
    """
    Authentication failed.

    Raised when a bearer token is invalid, expired or cannot be decoded.
    Derives from Starlette's AuthenticationError so that
    AuthenticationMiddleware routes it to its on_error handler.

    HTTP Status: 401 Unauthorized

    Attributes:
        reason: A machine-readable error code (e.g., 'token_expired').
        detail: Human-readable error details.
    """

    http_status = 401

    def __init__(self, reason: str, detail: str) -> None:
        """
        Initialize the AuthenticationError.

        Args:
            reason: A machine-readable error code indicating the failure type
            detail: Human-readable description of the error
        """
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}")

