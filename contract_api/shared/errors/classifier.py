"""
Error classification.

Turns any caught failure into the status code and error envelope the caller
receives. Operational `AppError`s keep their status and message; everything
else becomes a generic 500 that reveals nothing about the original failure.
"""

from dataclasses import dataclass, field
from http import HTTPStatus

from contract_api.shared.errors.types import AppError
from contract_api.shared.responses import ErrorEnvelope, build_error

INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"
CLIENT_ERROR = "CLIENT_ERROR"
SERVER_ERROR = "SERVER_ERROR"

HTTP_500 = 500


@dataclass(frozen=True)
class ClassifiedError:
    """Outcome of classifying a failure.

    Attributes:
        status_code: HTTP status code for the response.
        envelope: Error envelope for the response body.
        headers: Extra response headers (e.g. `Allow` on a 405).
        operational: Whether the failure was an anticipated one.
    """

    status_code: int
    envelope: ErrorEnvelope
    headers: dict[str, str] = field(default_factory=dict)
    operational: bool = True


def code_for_status(status_code: int) -> str:
    """Derive an error code from an HTTP status code.

    Known statuses map to their standard name (404 -> "NOT_FOUND"),
    unknown ones to their family ("CLIENT_ERROR" or "SERVER_ERROR").
    """
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return CLIENT_ERROR if status_code < 500 else SERVER_ERROR


def classify_error(exc: BaseException) -> ClassifiedError:
    """Map a caught failure to a status code and error envelope.

    Args:
        exc: Any exception raised while handling a request.

    Returns:
        The classification. Only operational `AppError`s expose their
        message; any other failure is reported as a generic 500.
    """
    match exc:
        case AppError(is_operational=True):
            return ClassifiedError(
                status_code=exc.status_code,
                envelope=build_error(
                    exc.code or code_for_status(exc.status_code),
                    exc.message,
                    exc.details,
                ),
                headers=dict(exc.headers or {}),
            )
        case _:
            return ClassifiedError(
                status_code=HTTP_500,
                envelope=build_error(INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR_MESSAGE),
                operational=False,
            )
