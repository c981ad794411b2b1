"""
FastAPI router for the items bounded context.

All routes delegate to use cases and return envelopes.
Pagination input is validated by the `pagination_params` dependency.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from contract_api.application.items.dtos import ListItemsQuery
from contract_api.application.items.get_item import GetItemUseCase
from contract_api.application.items.list_items import ListItemsUseCase
from contract_api.interfaces.items.dependencies import (
    get_item_use_case,
    get_list_items_use_case,
)
from contract_api.interfaces.items.schemas import ItemSchema
from contract_api.shared.pagination import PageRequest, pagination_params
from contract_api.shared.responses import (
    ErrorEnvelope,
    SuccessEnvelope,
    build_paginated,
    build_success,
)
from contract_api.shared.routing import SanitizingRoute

router = APIRouter(prefix="/items", tags=["items"], route_class=SanitizingRoute)


@router.get(
    "",
    response_model=SuccessEnvelope[list[ItemSchema]],
    responses={400: {"model": ErrorEnvelope}},
    summary="List items",
    description="Return one page of items with pagination metadata.",
)
def list_items(
    page_request: PageRequest = Depends(pagination_params),
    use_case: ListItemsUseCase = Depends(get_list_items_use_case),
) -> SuccessEnvelope:
    """List a page of items. Pages past the end are empty."""
    result = use_case.execute(
        ListItemsQuery(page=page_request.page, page_size=page_request.page_size)
    )
    return build_paginated(
        [ItemSchema(id=item.id, name=item.name) for item in result.items],
        total=result.total,
        page=page_request.page,
        page_size=page_request.page_size,
    )


@router.get(
    "/{item_id}",
    response_model=SuccessEnvelope[ItemSchema],
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Get an item",
)
def get_item(
    item_id: int,
    use_case: GetItemUseCase = Depends(get_item_use_case),
) -> SuccessEnvelope:
    """Return a single item by id."""
    item = use_case.execute(item_id)
    return build_success(ItemSchema(id=item.id, name=item.name))
