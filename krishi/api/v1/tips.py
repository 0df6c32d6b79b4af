"""Expert tips endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from krishi.api.deps import get_stores, get_tip_service
from krishi.schemas.entities import Difficulty, ExpertTip, ExpertTipCreate, Season, TipCategory
from krishi.services.entity_store import DEFAULT_ORDER, StoreRegistry
from krishi.services.tip_service import TipService

router = APIRouter(prefix="/tips", tags=["tips"])


@router.get("", response_model=List[ExpertTip])
async def list_tips(
    category: Optional[TipCategory] = Query(None),
    difficulty_level: Optional[Difficulty] = Query(None),
    season: Optional[Season] = Query(None, description="Year-round tips are always included"),
    q: Optional[str] = Query(None, max_length=200, description="Search title, content and crop types"),
    order_by: str = Query(DEFAULT_ORDER),
    limit: Optional[int] = Query(None, ge=1, le=500),
    service: TipService = Depends(get_tip_service),
):
    """
    List expert tips.

    Args:
        category: Only tips in this category
        difficulty_level: Only tips at this difficulty
        season: Only tips for this season
        q: Case-insensitive search text
        order_by: Sort field, '-' prefix for descending
        limit: Maximum number of tips
        service: Tip service

    Returns:
        List of tips
    """
    return await service.browse(category, difficulty_level, season, q, order_by, limit)


@router.get("/{tip_id}", response_model=ExpertTip)
async def get_tip(tip_id: str, stores: StoreRegistry = Depends(get_stores)):
    return await stores.tips.get(tip_id)


@router.post("", response_model=ExpertTip, status_code=201)
async def create_tip(data: ExpertTipCreate, stores: StoreRegistry = Depends(get_stores)):
    """Publish an expert tip."""
    return await stores.tips.create(data)
