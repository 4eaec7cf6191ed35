"""
Catalog item endpoints.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_master_data
from src.application.dto.requests import ItemRequest
from src.application.dto.responses import ErrorResponse, ItemListResponse, ItemResponse
from src.core.services import MasterDataService

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=ItemListResponse)
async def list_items(
    service: MasterDataService = Depends(get_master_data),
) -> ItemListResponse:
    """List catalog items by name."""
    items = await service.list_items()
    return ItemListResponse(
        items=[ItemResponse.from_entity(i) for i in items],
        total=len(items),
    )


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    request: ItemRequest,
    service: MasterDataService = Depends(get_master_data),
) -> ItemResponse:
    """Add an item to the catalog."""
    item = await service.create_item(request.to_entity())
    return ItemResponse.from_entity(item)


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: int,
    service: MasterDataService = Depends(get_master_data),
) -> ItemResponse:
    return ItemResponse.from_entity(await service.get_item(item_id))


@router.put(
    "/{item_id}",
    response_model=ItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_item(
    item_id: int,
    request: ItemRequest,
    service: MasterDataService = Depends(get_master_data),
) -> ItemResponse:
    """Replace an item's name, SKU and price."""
    item = await service.update_item(item_id, request.to_entity())
    return ItemResponse.from_entity(item)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_item(
    item_id: int,
    service: MasterDataService = Depends(get_master_data),
) -> None:
    await service.delete_item(item_id)
