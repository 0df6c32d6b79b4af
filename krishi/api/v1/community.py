"""Community board endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from krishi.api.deps import get_community_service, get_current_user
from krishi.schemas.entities import (
    BoardStats,
    CommunityPost,
    CommunityPostCreate,
    PostCategory,
    User,
)
from krishi.services.community_service import CommunityService
from krishi.services.entity_store import DEFAULT_ORDER

router = APIRouter(prefix="/community", tags=["community"])


@router.get("/posts", response_model=List[CommunityPost])
async def list_posts(
    category: Optional[PostCategory] = Query(None),
    tag: Optional[str] = Query(None, description="Only posts carrying this tag"),
    q: Optional[str] = Query(None, max_length=200, description="Search title, content and tags"),
    order_by: str = Query(DEFAULT_ORDER),
    limit: Optional[int] = Query(None, ge=1, le=500),
    service: CommunityService = Depends(get_community_service),
):
    """List community posts, newest first by default."""
    return await service.browse(category, tag, q, order_by, limit)


@router.get("/stats", response_model=BoardStats)
async def board_stats(service: CommunityService = Depends(get_community_service)):
    """Post, question, resolved and like totals for the whole board."""
    return await service.stats()


@router.post("/posts", response_model=CommunityPost, status_code=201)
async def create_post(
    data: CommunityPostCreate,
    service: CommunityService = Depends(get_community_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    """
    Publish a post on the community board.

    Tags may be sent as a list or as one comma-separated string.

    Args:
        data: Post content
        service: Community service
        current_user: Author profile, if one exists

    Returns:
        CommunityPost: The stored post
    """
    author = current_user.full_name if current_user is not None else None
    return await service.create_post(data, author)


@router.post("/posts/{post_id}/like", response_model=CommunityPost)
async def like_post(
    post_id: str, service: CommunityService = Depends(get_community_service)
):
    return await service.like(post_id)


@router.post("/posts/{post_id}/resolve", response_model=CommunityPost)
async def resolve_post(
    post_id: str, service: CommunityService = Depends(get_community_service)
):
    """Mark a question as resolved."""
    return await service.resolve(post_id)
