"""
Standard response envelope.

Every API response has one of two shapes:

    Success:  {"data": <T>, "meta": {...}}
    Error:    {"error": {"code": str, "message": str, "details"?: {...}}}

A paginated response is a success envelope whose meta is the page metadata.
Routes and error handlers build envelopes only through the functions below
and never assemble the wire shape by hand.
"""

from typing import Any, Generic, Mapping, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from contract_api.shared.pagination import paginate

T = TypeVar("T")


class SuccessEnvelope(BaseModel, Generic[T]):
    """Success variant: payload plus (possibly empty) metadata."""

    data: T
    meta: dict[str, Any] = Field(default_factory=dict)


class ErrorBody(BaseModel):
    """Error description carried by the error variant."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorEnvelope(BaseModel):
    """Error variant: a single error description, no payload."""

    error: ErrorBody


ApiResponse = SuccessEnvelope | ErrorEnvelope


def build_success(data: Any, meta: Mapping[str, Any] | None = None) -> SuccessEnvelope:
    """Wrap `data` in a success envelope. `meta` defaults to an empty dict."""
    return SuccessEnvelope(data=data, meta=dict(meta) if meta else {})


def build_error(
    code: str, message: str, details: Mapping[str, Any] | None = None
) -> ErrorEnvelope:
    """Build an error envelope. `details` is only present when provided."""
    if details is None:
        return ErrorEnvelope(error=ErrorBody(code=code, message=message))
    return ErrorEnvelope(error=ErrorBody(code=code, message=message, details=dict(details)))


def build_paginated(items: list[Any], total: int, page: int, page_size: int) -> SuccessEnvelope:
    """Wrap one page of `items` with its pagination metadata."""
    meta = paginate(total=total, page=page, page_size=page_size)
    return build_success(items, meta.model_dump(by_alias=True))


def envelope_body(envelope: ApiResponse) -> dict[str, Any]:
    """Return the JSON-compatible wire form of `envelope`."""
    if isinstance(envelope, ErrorEnvelope):
        # Only an explicitly provided `details` appears on the wire.
        return envelope.model_dump(mode="json", exclude_unset=True)
    return jsonable_encoder(envelope)


def envelope_response(
    envelope: ApiResponse,
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Serialize `envelope` into a JSON response."""
    return JSONResponse(
        status_code=status_code,
        content=envelope_body(envelope),
        headers=dict(headers) if headers else None,
    )
