"""
Use case: Retrieve a single catalogue item.

Input: item id
Output: Item
Failure cases: NotFoundError.
"""

from contract_api.domain.items.entities import Item
from contract_api.domain.items.ports import ItemRepository
from contract_api.shared.errors.types import NotFoundError


class GetItemUseCase:
    """Looks up one item and fails with NotFoundError when it is missing."""

    def __init__(self, repository: ItemRepository) -> None:
        self._repository = repository

    def execute(self, item_id: int) -> Item:
        item = self._repository.get_by_id(item_id)
        if item is None:
            raise NotFoundError(f"Item {item_id} not found")
        return item
