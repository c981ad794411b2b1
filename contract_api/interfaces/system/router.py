"""
System router: API root, health check and diagnostics.

Provides liveness information and a deliberate failure endpoint used to
check the error envelope end to end. No business logic.
"""

from typing import Any

from fastapi import APIRouter, Body

from contract_api.core.config import settings
from contract_api.shared.errors.types import AppError
from contract_api.shared.responses import ErrorEnvelope, SuccessEnvelope, build_success
from contract_api.shared.routing import SanitizingRoute

router = APIRouter(tags=["system"], route_class=SanitizingRoute)


@router.get("", response_model=SuccessEnvelope[dict[str, str]], summary="API root")
def api_root() -> SuccessEnvelope:
    """Confirm the versioned API is up and report the environment."""
    return build_success(
        {
            "message": "API v1 is running",
            "environment": "Production" if settings.is_production else "Development",
        }
    )


@router.get(
    "/health",
    response_model=SuccessEnvelope[dict[str, str]],
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> SuccessEnvelope:
    """Return current application health status."""
    return build_success({"status": "ok", "version": settings.version})


@router.get(
    "/test-error",
    responses={400: {"model": ErrorEnvelope}},
    summary="Simulate a handled error",
)
def test_error() -> None:
    """Raise an operational error to exercise the error pipeline."""
    raise AppError("Simulated controlled error", 400)


@router.post(
    "/echo",
    response_model=SuccessEnvelope[Any],
    responses={400: {"model": ErrorEnvelope}},
    summary="Echo the sanitized body",
    description="Return the JSON body exactly as handlers receive it after sanitization.",
)
def echo(payload: Any = Body(default=None)) -> SuccessEnvelope:
    """Return the request body after input sanitization."""
    return build_success(payload)
