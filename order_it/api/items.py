from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ..models import Category
from ..schemas import BatchResult, ItemRequest, ItemResponse
from ..services import ItemService
from .deps import get_item_service

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=List[ItemResponse])
def list_items(category: Optional[Category] = None, service: ItemService = Depends(get_item_service)):
    if category is None:
        return service.get_all_items()
    return service.get_items_by_category(category)


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(req: ItemRequest, service: ItemService = Depends(get_item_service)):
    return service.create_item(req)


# Not atomic: valid elements are kept even when others fail
@router.post("/batch", response_model=BatchResult)
def create_items(reqs: List[ItemRequest], service: ItemService = Depends(get_item_service)):
    return service.create_item_batch(reqs)


@router.put("/{item_id}", response_model=ItemResponse)
def update_item(item_id: int, req: ItemRequest, service: ItemService = Depends(get_item_service)):
    return service.update_item(item_id, req)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(item_id: int, service: ItemService = Depends(get_item_service)):
    service.delete_item(item_id)
