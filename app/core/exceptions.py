"""
Base exception classes for application-wide error handling.

This module provides a standardized exception hierarchy that enables:
- Consistent error responses across the application
- Machine-readable error codes for logging and client handling
- An HTTP status per error category, applied at the request boundary

Exception Hierarchy:
    BaseApplicationError (base, 500)
    ├── ValidationError (400) - Input validation failures
    ├── ConflictError (400) - Duplicate email/username
    ├── AuthenticationError (401) - Missing/invalid/expired token
    │   └── InvalidCredentialsError (400) - Bad login identifier or password
    ├── PermissionDeniedError (403) - Authenticated but not allowed
    ├── NotFoundError (404) - Resource absent or hidden from the caller
    └── InternalError (500) - Unexpected storage/runtime failure

Usage:
    from core.exceptions import ValidationError, NotFoundError

    # Raise with message only
    raise NotFoundError("Chat not found or access denied")

    # Raise with error code for logging
    raise ConflictError("Email or username already exists", error_code="USER_EXISTS")

    # Raise with field-level errors
    raise ValidationError(
        "Validation failed",
        errors=[{"field": "email", "message": "Enter a valid email address."}],
    )

Note:
    Services raise these; core.handlers.api_exception_handler converts them
    into JSON responses. Views never build error bodies by hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description (sent to the client)
        error_code: Machine-readable code (logged, not sent)
        errors: Field-level errors as a list of {"field", "message"} dicts
        status_code: HTTP status used by the exception handler

    Example:
        try:
            chat = ChatAuthorizationService.get_member_chat(user, chat_id)
        except NotFoundError as e:
            logger.info(f"Chat lookup denied: {e.error_code}")
            raise
    """

    default_error_code: str = "APPLICATION_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            errors: Field-level errors
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.errors = errors or []
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to the API error body.

        Returns:
            {"errors": [...]} when field errors are present,
            {"error": message} otherwise.
        """
        if self.errors:
            return {"errors": list(self.errors)}
        return {"error": self.message}

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"errors={self.errors!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation fails.

    Use for:
    - Invalid field formats (email)
    - Length rules (password, username)
    - Business input rules (unknown usernames in a new chat, wrong old password)

    Note:
        DRF serializer errors are converted to the same {"errors": [...]}
        shape by the exception handler.
    """

    default_error_code: str = "VALIDATION_ERROR"
    status_code: int = 400


class ConflictError(BaseApplicationError):
    """
    Raised when an operation would violate a uniqueness constraint.

    Example:
        if User.objects.filter(email=email).exists():
            raise ConflictError("Email or username already exists")

    Note:
        Reported as 400, which is what API clients of this service expect.
    """

    default_error_code: str = "CONFLICT"
    status_code: int = 400


class AuthenticationError(BaseApplicationError):
    """
    Raised when a bearer token is missing, malformed, expired, signed with
    the wrong key, or names a user that no longer exists.
    """

    default_error_code: str = "AUTHENTICATION_FAILED"
    status_code: int = 401


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a login identifier/password pair does not match.

    The same message is used for an unknown identifier and a wrong password
    so callers cannot tell which part was wrong.
    """

    default_error_code: str = "INVALID_CREDENTIALS"
    status_code: int = 400

    def __init__(self, message: str = "Invalid credentials", **kwargs):
        super().__init__(message, **kwargs)


class PermissionDeniedError(BaseApplicationError):
    """
    Raised when an authenticated user is not allowed to act on a resource.

    Example:
        if message.author_id != user.id:
            raise PermissionDeniedError("Access denied", error_code="NOT_AUTHOR")
    """

    default_error_code: str = "PERMISSION_DENIED"
    status_code: int = 403


class NotFoundError(BaseApplicationError):
    """
    Raised when a requested resource is not found.

    Chat-scoped lookups also raise this for non-members, so that "does not
    exist" and "exists but hidden" look the same to the caller.
    """

    default_error_code: str = "NOT_FOUND"
    status_code: int = 404


class InternalError(BaseApplicationError):
    """
    Opaque error for unexpected failures.

    The message is generic; the original exception is only logged.
    """

    default_error_code: str = "INTERNAL_ERROR"
    status_code: int = 500

    def __init__(self, message: str = "Internal server error", **kwargs):
        super().__init__(message, **kwargs)
