"""
Sanitizing route class.

Every API router is created with `route_class=SanitizingRoute`. Before
FastAPI resolves dependencies or calls the endpoint, the route reads the
request's JSON body, query parameters and path parameters, sanitizes them,
and hands the endpoint a new `Request` built from the normalized inputs.
The original request object is left as it was.

Only JSON bodies are buffered. Other bodies (multipart uploads, plain text)
keep streaming from the transport untouched. A JSON body that fails to
decode is forwarded as-is so FastAPI reports the parsing problem through
the usual validation error path. Non-finite numbers (NaN, Infinity, or
floats overflowing to infinity) are rejected, since JSON cannot carry them
back out.

Unexpected failures raised by the endpoint are turned into the error
envelope here, inside the middleware stack, so 500 responses still get
security and CORS headers.
"""

import json
import math
from collections.abc import Callable, Coroutine
from typing import Any
from urllib.parse import urlencode

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from contract_api.shared.errors.handlers import error_response
from contract_api.shared.errors.types import AppError, ValidationError
from contract_api.shared.sanitization import RequestInputs, sanitize_inputs

_JSON_CONTENT_TYPES = ("application/json",)

NON_FINITE_MESSAGE = "Request body contains a non-finite number"

# Raised errors with a dedicated handler in contract_api.shared.errors.handlers.
HANDLED_ERRORS = (AppError, StarletteHTTPException, RequestValidationError)


class NonFiniteNumberError(ValueError):
    """A JSON number that does not fit a finite float."""


def _is_json(content_type: str) -> bool:
    # FastAPI parses a body without content type as JSON too.
    media_type = content_type.split(";", 1)[0].strip().lower()
    return (
        not media_type
        or media_type in _JSON_CONTENT_TYPES
        or media_type.endswith("+json")
    )


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise NonFiniteNumberError(token)
    return value


def _reject_constant(token: str) -> float:
    raise NonFiniteNumberError(token)


def _decode_json_body(raw: bytes) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw, parse_float=_finite_float, parse_constant=_reject_constant)
    except NonFiniteNumberError:
        raise ValidationError(NON_FINITE_MESSAGE) from None
    except ValueError:
        return None


def _query_dict(request: Request) -> dict[str, list[str]]:
    query: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        query.setdefault(key, []).append(value)
    return query


def _encode_query(query: dict[str, list[str]]) -> bytes:
    pairs = [(key, value) for key, values in query.items() for value in values]
    return urlencode(pairs).encode("latin-1")


def _replace_content_length(
    headers: list[tuple[bytes, bytes]], length: int
) -> list[tuple[bytes, bytes]]:
    kept = [(name, value) for name, value in headers if name != b"content-length"]
    kept.append((b"content-length", str(length).encode("latin-1")))
    return kept


async def read_request_inputs(request: Request) -> tuple[RequestInputs, bytes | None]:
    """Extract the sanitizable inputs of `request`.

    Returns:
        The inputs, and the raw body when it was buffered (JSON requests
        only; None otherwise).

    Raises:
        ValidationError: The JSON body holds a non-finite number.
    """
    raw_body = None
    if _is_json(request.headers.get("content-type", "")):
        raw_body = await request.body()
    inputs = RequestInputs(
        body=_decode_json_body(raw_body) if raw_body else None,
        query=_query_dict(request),
        path_params=dict(request.path_params),
    )
    return inputs, raw_body


async def build_sanitized_request(request: Request) -> Request:
    """Return a new request carrying the sanitized body, query and path params."""
    inputs, raw_body = await read_request_inputs(request)
    sanitized = sanitize_inputs(inputs)

    scope = dict(request.scope)
    scope["query_string"] = _encode_query(sanitized.query)
    scope["path_params"] = sanitized.path_params

    if raw_body is None:
        return Request(scope, request.receive)

    body = raw_body
    if sanitized.body is not None:
        body = json.dumps(sanitized.body).encode("utf-8")
        scope["headers"] = _replace_content_length(list(request.scope["headers"]), len(body))

    body_sent = False

    async def receive() -> Message:
        nonlocal body_sent
        if body_sent:
            # Later messages (disconnects) come from the transport.
            return await request.receive()
        body_sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


class SanitizingRoute(APIRoute):
    """APIRoute that sanitizes request input before the endpoint runs."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def sanitizing_handler(request: Request) -> Response:
            try:
                return await handler(await build_sanitized_request(request))
            except HANDLED_ERRORS:
                raise
            except Exception as exc:
                return error_response(request, exc)

        return sanitizing_handler


class TrailingSlashMiddleware:
    """Serve `/path/` as `/path` instead of redirecting.

    Pure ASGI middleware: it rewrites the scope path before routing, so
    both spellings reach the same route and unmatched paths still get the
    404 envelope.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope, path=path.rstrip("/") or "/")
                raw_path = scope.get("raw_path")
                if raw_path:
                    scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
        await self.app(scope, receive, send)
