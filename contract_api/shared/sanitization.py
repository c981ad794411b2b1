"""
Recursive input sanitization.

Untrusted request input (JSON body, query parameters, path parameters) is
normalized before any route handler sees it. Only string scalars change:
control whitespace becomes a single space, whitespace runs collapse and the
ends are trimmed. Lists and mappings keep their shape, length and keys.

Pure functions only. The request pipeline stage that applies them lives in
`contract_api.shared.routing`.
"""

import re
from dataclasses import dataclass, field
from typing import Any, TypeAlias

_CONTROL_WHITESPACE = re.compile(r"[\t\r\n]+")
_WHITESPACE_RUN = re.compile(r"\s+")

Scalar: TypeAlias = str | int | float | bool | None
SanitizableValue: TypeAlias = (
    Scalar | list["SanitizableValue"] | dict[str, "SanitizableValue"]
)


def normalize_text(text: str) -> str:
    """Collapse whitespace runs in `text` to single spaces and trim it."""
    text = _CONTROL_WHITESPACE.sub(" ", text)
    text = _WHITESPACE_RUN.sub(" ", text)
    return text.strip()


def sanitize(value: Any) -> Any:
    """Return a normalized copy of `value`.

    Strings are passed through `normalize_text`, lists element-wise and
    dicts value-wise. Any other type is returned unchanged. The input is
    never modified.

    Args:
        value: A string, number, boolean, None, or a list/dict nesting them.

    Returns:
        A value with the same structure and only string scalars normalized.
    """
    match value:
        case str():
            return normalize_text(value)
        case list():
            return [sanitize(item) for item in value]
        case dict():
            return {key: sanitize(item) for key, item in value.items()}
        case _:
            return value


@dataclass(frozen=True)
class RequestInputs:
    """The three request-derived inputs a handler can observe.

    Attributes:
        body: Decoded JSON body, or None when the request has none.
        query: Query parameters, each name mapped to its values in order.
        path_params: Path parameters extracted by the router.
    """

    body: SanitizableValue = None
    query: dict[str, list[str]] = field(default_factory=dict)
    path_params: dict[str, SanitizableValue] = field(default_factory=dict)


def sanitize_inputs(inputs: RequestInputs) -> RequestInputs:
    """Sanitize body, query and path parameters independently.

    An absent body is skipped rather than treated as an error.
    """
    body = sanitize(inputs.body) if inputs.body is not None else None
    return RequestInputs(
        body=body,
        query=sanitize(inputs.query),
        path_params=sanitize(inputs.path_params),
    )
