"""
Tests for the items application layer (use cases).

Use cases run against the in-memory repository or a mocked port.
"""

from unittest.mock import MagicMock

import pytest

from contract_api.application.items.dtos import ListItemsQuery
from contract_api.application.items.get_item import GetItemUseCase
from contract_api.application.items.list_items import ListItemsUseCase
from contract_api.domain.items.entities import Item
from contract_api.domain.items.ports import ItemRepository
from contract_api.infrastructure.items.in_memory_item_repository import (
    InMemoryItemRepository,
    seed_items,
)
from contract_api.shared.errors.types import NotFoundError


@pytest.fixture
def repository() -> InMemoryItemRepository:
    return InMemoryItemRepository()


class TestInMemoryItemRepository:
    """Tests for the in-memory catalogue adapter."""

    def test_seeded_with_fifty_items(self, repository: InMemoryItemRepository) -> None:
        assert repository.count() == 50
        assert repository.get_by_id(50) == Item(id=50, name="Item 50")

    def test_slice_past_end_is_empty(self, repository: InMemoryItemRepository) -> None:
        assert repository.list_slice(60, 70) == []

    def test_custom_items(self) -> None:
        repo = InMemoryItemRepository(seed_items(3))
        assert [item.name for item in repo.list_slice(0, 10)] == ["Item 1", "Item 2", "Item 3"]


class TestListItemsUseCase:
    """Tests for ListItemsUseCase."""

    def test_returns_requested_page(self, repository: InMemoryItemRepository) -> None:
        result = ListItemsUseCase(repository).execute(ListItemsQuery(page=2, page_size=10))
        assert [item.id for item in result.items] == list(range(11, 21))
        assert result.total == 50

    def test_page_past_end(self, repository: InMemoryItemRepository) -> None:
        result = ListItemsUseCase(repository).execute(ListItemsQuery(page=6, page_size=10))
        assert result.items == []
        assert result.total == 50

    def test_delegates_to_port(self) -> None:
        port = MagicMock(spec=ItemRepository)
        port.list_slice.return_value = []
        port.count.return_value = 0
        ListItemsUseCase(port).execute(ListItemsQuery(page=3, page_size=5))
        port.list_slice.assert_called_once_with(10, 15)


class TestGetItemUseCase:
    """Tests for GetItemUseCase."""

    def test_found(self, repository: InMemoryItemRepository) -> None:
        assert GetItemUseCase(repository).execute(3) == Item(id=3, name="Item 3")

    def test_missing_raises_not_found(self, repository: InMemoryItemRepository) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            GetItemUseCase(repository).execute(0)
        assert exc_info.value.status_code == 404
