"""Crop management endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from krishi.api.deps import get_crop_service, get_stores
from krishi.schemas.entities import Crop, CropCreate, CropStatus, CropStatusChange, CropUpdate
from krishi.services.crop_service import CropService
from krishi.services.entity_store import DEFAULT_ORDER, StoreRegistry

router = APIRouter(prefix="/crops", tags=["crops"])


@router.get("", response_model=List[Crop])
async def list_crops(
    status: Optional[CropStatus] = Query(None, description="Only crops with this status"),
    order_by: str = Query(DEFAULT_ORDER, description="Field, '-' prefix for descending"),
    limit: Optional[int] = Query(None, ge=1, le=500),
    stores: StoreRegistry = Depends(get_stores),
):
    """
    List crops, newest first by default.

    Args:
        status: Optional status filter
        order_by: Sort field
        limit: Maximum number of crops to return
        stores: Entity stores

    Returns:
        List of crops
    """
    if status is not None:
        return await stores.crops.filter({"status": status}, order_by, limit)
    return await stores.crops.list(order_by, limit)


@router.post("", response_model=Crop, status_code=201)
async def create_crop(data: CropCreate, stores: StoreRegistry = Depends(get_stores)):
    """Register a new crop."""
    return await stores.crops.create(data)


@router.get("/{crop_id}", response_model=Crop)
async def get_crop(crop_id: str, stores: StoreRegistry = Depends(get_stores)):
    return await stores.crops.get(crop_id)


@router.patch("/{crop_id}", response_model=Crop)
async def update_crop(
    crop_id: str, data: CropUpdate, stores: StoreRegistry = Depends(get_stores)
):
    """
    Update a crop.

    Only fields present in the body are changed.
    """
    return await stores.crops.update(crop_id, data)


@router.delete("/{crop_id}", status_code=204)
async def delete_crop(crop_id: str, stores: StoreRegistry = Depends(get_stores)) -> None:
    await stores.crops.delete(crop_id)


@router.post("/{crop_id}/status", response_model=Crop)
async def change_crop_status(
    crop_id: str,
    data: CropStatusChange,
    service: CropService = Depends(get_crop_service),
):
    """Mark a crop active, harvested or inactive."""
    return await service.change_status(crop_id, data.status)
