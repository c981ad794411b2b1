"""
Application error types.

Handlers and dependencies raise these to signal a failure. They carry an
explicit `is_operational` tag: operational errors are anticipated and their
message is safe to show to the caller; anything else is reported as a
generic internal error. No framework imports allowed.
"""

from typing import Any

MIN_ERROR_STATUS = 400
MAX_ERROR_STATUS = 599


class AppError(Exception):
    """Base error for failures that map to an HTTP error response.

    Attributes:
        message: Human-readable description of the failure.
        status_code: HTTP status code in [400, 599].
        code: Explicit machine-readable code, or None to derive it from
            the status code.
        details: Optional extra data included in the error envelope.
        is_operational: Whether the failure is anticipated and safe to
            describe to the caller.
    """

    default_status_code = 500
    default_code: str | None = None
    operational = True

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        is_operational: bool | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        status_code = self.default_status_code if status_code is None else status_code
        if not MIN_ERROR_STATUS <= status_code <= MAX_ERROR_STATUS:
            raise ValueError(f"Invalid error status code: {status_code}")
        self.message = message
        self.status_code = status_code
        self.code = code if code is not None else self.default_code
        self.details = details
        self.is_operational = self.operational if is_operational is None else is_operational
        self.headers = headers
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when caller input is malformed or out of range."""

    default_status_code = 400
    default_code = "VALIDATION_ERROR"


class NotFoundError(AppError):
    """Raised when no route or resource matches the request."""

    default_status_code = 404
    default_code = "NOT_FOUND"


class InternalError(AppError):
    """Raised for unanticipated failures. Never described to the caller."""

    default_status_code = 500
    operational = False
