# File: app/core/exceptions.py

"""
Exception classes for the blog backend.

Stores and services raise these; the handlers registered in app/main.py
turn them into HTTP responses. Routes translate persistence failures into
a RequestFailedError so that internal detail never reaches the client.
"""

from typing import Any, Optional


class BlogError(Exception):
    """Base exception for all blog backend errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Body returned to the client."""
        return {"error": self.message}


class ConfigurationError(BlogError):
    """Required configuration is missing or invalid at startup."""


class InputValidationError(BlogError):
    """Request body did not match the operation's schema."""

    status_code = 400

    def __init__(self, message: str = "Invalid Inputs", details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="INVALID_INPUTS", details=details)


class AuthError(BlogError):
    """
    Request could not be authenticated.

    `reason` is one of missing_token, malformed_header, verification_failed
    or invalid_token. It is used for logging; clients only see the message.
    """

    status_code = 401

    def __init__(self, message: str, reason: str):
        super().__init__(f"Unauthorized: {message}", code="UNAUTHORIZED", details={"reason": reason})
        self.reason = reason


class InvalidTokenError(BlogError):
    """A token failed signature or structural verification."""

    status_code = 401


class NotFoundOrForbiddenError(BlogError):
    """No row matched, either because it does not exist or is owned by someone else."""

    status_code = 404


class PersistenceError(BlogError):
    """Constraint violation or backend fault in the data store."""

    status_code = 500

    def __init__(self, message: str = "Persistence failure", details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="PERSISTENCE_ERROR", details=details)


class RequestFailedError(BlogError):
    """Generic client-visible failure for a single operation."""

    def __init__(self, message: str, status_code: int, key: str = "error"):
        super().__init__(message, code="REQUEST_FAILED")
        self.status_code = status_code
        self.key = key

    def to_dict(self) -> dict[str, Any]:
        return {self.key: self.message}
