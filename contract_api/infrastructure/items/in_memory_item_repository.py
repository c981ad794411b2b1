"""
Adapter: In-memory item catalogue.

Implements the ItemRepository port over a fixed, read-only list.
Stands in for a database; nothing is written at runtime.
"""

from typing import Optional

from contract_api.domain.items.entities import Item
from contract_api.domain.items.ports import ItemRepository

DEFAULT_ITEM_COUNT = 50


def seed_items(count: int = DEFAULT_ITEM_COUNT) -> list[Item]:
    """Build `count` items named "Item 1" .. "Item <count>"."""
    return [Item(id=i, name=f"Item {i}") for i in range(1, count + 1)]


class InMemoryItemRepository(ItemRepository):
    """Read-only ItemRepository backed by a tuple of items."""

    def __init__(self, items: Optional[list[Item]] = None) -> None:
        self._items = tuple(seed_items() if items is None else items)
        self._by_id = {item.id: item for item in self._items}

    def count(self) -> int:
        return len(self._items)

    def list_slice(self, start: int, stop: int) -> list[Item]:
        return list(self._items[start:stop])

    def get_by_id(self, item_id: int) -> Optional[Item]:
        return self._by_id.get(item_id)
