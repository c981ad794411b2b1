"""
Use case: List one page of catalogue items.

Input: ListItemsQuery (page, page_size)
Output: ItemPage
Side effects: None.
Failure cases: None. A page past the end yields an empty page.
"""

import logging

from contract_api.application.items.dtos import ItemPage, ListItemsQuery
from contract_api.domain.items.ports import ItemRepository
from contract_api.shared.pagination import page_window

logger = logging.getLogger(__name__)


class ListItemsUseCase:
    """Orchestrates retrieval of a page of items from the repository."""

    def __init__(self, repository: ItemRepository) -> None:
        self._repository = repository

    def execute(self, query: ListItemsQuery) -> ItemPage:
        """Run the list use case.

        Args:
            query: The validated page request.

        Returns:
            The items on the page and the overall item count.
        """
        logger.debug("Listing items page=%d page_size=%d", query.page, query.page_size)
        start, stop = page_window(query.page, query.page_size)
        return ItemPage(
            items=self._repository.list_slice(start, stop),
            total=self._repository.count(),
        )
