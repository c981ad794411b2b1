"""
Pagination metadata and query parameter parsing.

`paginate` is pure: it assumes `page >= 1` and `page_size >= 1`. Enforcing
that is the caller's job, done for HTTP endpoints by `pagination_params`,
which turns bad `page`/`pageSize` query values into a 400 error before
`paginate` is ever called.
"""

from dataclasses import dataclass

from fastapi import Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from contract_api.core.config import settings
from contract_api.shared.errors.types import ValidationError

INVALID_PARAMETERS = "INVALID_PARAMETERS"
INVALID_PARAMETERS_MESSAGE = "Parameters 'page' and 'pageSize' must be positive integers."


class PaginationMeta(BaseModel):
    """Page metadata attached to a paginated envelope.

    Serialized with camelCase keys: page, pageSize, total, totalPages.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    page: int
    page_size: int
    total: int
    total_pages: int


def paginate(total: int, page: int, page_size: int) -> PaginationMeta:
    """Compute page metadata for `total` records split into `page_size` pages.

    `total_pages` is the ceiling of `total / page_size`, so it is 0 when
    there are no records. `page` is not clamped to the available range.
    """
    total_pages = -(-total // page_size) if total > 0 else 0
    return PaginationMeta(
        page=page, page_size=page_size, total=total, total_pages=total_pages
    )


def page_window(page: int, page_size: int) -> tuple[int, int]:
    """Return the [start, stop) slice bounds for the requested page."""
    start = (page - 1) * page_size
    return start, start + page_size


@dataclass(frozen=True)
class PageRequest:
    """Validated pagination input for list endpoints."""

    page: int
    page_size: int


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(INVALID_PARAMETERS_MESSAGE, code=INVALID_PARAMETERS) from None
    if value < 1:
        raise ValidationError(INVALID_PARAMETERS_MESSAGE, code=INVALID_PARAMETERS)
    return value


def pagination_params(
    page: str | None = Query(default=None, description="1-based page number"),
    page_size: str | None = Query(
        default=None, alias="pageSize", description="Number of records per page"
    ),
) -> PageRequest:
    """FastAPI dependency reading `page` and `pageSize` from the query string.

    Missing values fall back to page 1 and the configured default page size.

    Raises:
        ValidationError: A value is present but not a positive integer.
    """
    return PageRequest(
        page=_positive_int(page, 1),
        page_size=_positive_int(page_size, settings.default_page_size),
    )
