"""
Port interfaces (ABCs) for the items bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from contract_api.domain.items.entities import Item


class ItemRepository(ABC):
    """Port for reading catalogue items."""

    @abstractmethod
    def count(self) -> int:
        """Return the total number of items."""
        raise NotImplementedError

    @abstractmethod
    def list_slice(self, start: int, stop: int) -> list[Item]:
        """Return items in positions [start, stop), empty past the end."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, item_id: int) -> Optional[Item]:
        """Return the item with `item_id`, or None if it does not exist."""
        raise NotImplementedError
