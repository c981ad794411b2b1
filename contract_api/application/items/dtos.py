"""
Data Transfer Objects for the items application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from contract_api.domain.items.entities import Item


@dataclass(frozen=True)
class ListItemsQuery:
    """Input DTO for listing one page of items.

    Attributes:
        page: 1-based page number (already validated, >= 1).
        page_size: Number of items per page (already validated, >= 1).
    """

    page: int
    page_size: int


@dataclass(frozen=True)
class ItemPage:
    """Output DTO for one page of items.

    Attributes:
        items: The items on the requested page, possibly empty.
        total: Total number of items across all pages.
    """

    items: list[Item]
    total: int
