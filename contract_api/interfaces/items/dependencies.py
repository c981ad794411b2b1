"""
Dependency injection for the items bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
"""

from functools import lru_cache

from fastapi import Depends

from contract_api.application.items.get_item import GetItemUseCase
from contract_api.application.items.list_items import ListItemsUseCase
from contract_api.domain.items.ports import ItemRepository
from contract_api.infrastructure.items.in_memory_item_repository import (
    InMemoryItemRepository,
)


@lru_cache
def get_item_repository() -> ItemRepository:
    """Return the shared read-only item catalogue."""
    return InMemoryItemRepository()


def get_list_items_use_case(
    repository: ItemRepository = Depends(get_item_repository),
) -> ListItemsUseCase:
    """Build ListItemsUseCase with its repository."""
    return ListItemsUseCase(repository=repository)


def get_item_use_case(
    repository: ItemRepository = Depends(get_item_repository),
) -> GetItemUseCase:
    """Build GetItemUseCase with its repository."""
    return GetItemUseCase(repository=repository)
