"""
Domain entities for the items bounded context.

They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """A catalogue item exposed by the API."""

    id: int
    name: str
