"""
Centralized error handlers for FastAPI.

Every failure is funneled through `classify_error`, which alone decides
the caller-visible status code and message. Sources covered:

- AppError raised by route handlers and dependencies
- unmatched routes and other Starlette HTTP errors
- request validation and body parsing errors
- rate limit rejections
- anything unexpected

No stack traces or internal details are exposed to clients.
All error responses use the ErrorEnvelope shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from contract_api.shared.errors.classifier import classify_error
from contract_api.shared.errors.types import AppError, NotFoundError, ValidationError
from contract_api.shared.responses import envelope_response

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_429 = 429


def _request_identity(request: Request) -> str:
    return f"{request.method} {request.url.path}"


def error_response(request: Request, exc: BaseException) -> JSONResponse:
    """Classify `exc`, log it, and build the error envelope response."""
    classified = classify_error(exc)
    if classified.operational:
        logger.warning(
            "%s failed with %d: %s",
            _request_identity(request),
            classified.status_code,
            classified.envelope.error.message,
        )
    else:
        logger.error(
            "Unexpected error handling %s: %s",
            _request_identity(request),
            type(exc).__name__,
            exc_info=exc,
        )
    return envelope_response(
        classified.envelope,
        status_code=classified.status_code,
        headers=classified.headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        """Handle errors raised by handlers and dependencies."""
        return error_response(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors: unmatched paths, disallowed methods."""
        # No "endpoint" in scope means the router matched nothing.
        if exc.status_code == HTTP_404 and "endpoint" not in request.scope:
            error: AppError = NotFoundError(f"Route {request.url.path} not found")
        else:
            error = AppError(str(exc.detail), exc.status_code, headers=exc.headers)
        return error_response(request, error)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed bodies and schema violations."""
        error = ValidationError(
            "Request validation failed",
            details={"errors": jsonable_encoder(exc.errors())},
        )
        return error_response(request, error)

    # Sync: SlowAPIMiddleware calls this handler without awaiting it.
    @app.exception_handler(RateLimitExceeded)
    def handle_rate_limit(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        """Handle requests rejected by the rate limiter."""
        error = AppError(f"Rate limit exceeded: {exc.detail}", HTTP_429)
        return error_response(request, error)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        return error_response(request, exc)
