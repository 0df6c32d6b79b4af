"""Community board operations."""

import logging
from typing import Any, Dict, List, Optional

from krishi.schemas.entities import (
    BoardStats,
    CommunityPost,
    CommunityPostCreate,
    CommunityPostUpdate,
    PostCategory,
)
from krishi.services.entity_store import DEFAULT_ORDER, EntityStore, matches_text

logger = logging.getLogger(__name__)


class CommunityService:
    """Posting, liking and resolving questions on the community board."""

    def __init__(self, posts: EntityStore[CommunityPost]):
        self.posts = posts

    async def browse(
        self,
        category: Optional[PostCategory] = None,
        tag: Optional[str] = None,
        q: Optional[str] = None,
        order_by: Optional[str] = DEFAULT_ORDER,
        limit: Optional[int] = None,
    ) -> List[CommunityPost]:
        """Filter posts by category and tag, then search title, content and tags."""
        criteria: Dict[str, Any] = {}
        if category is not None:
            criteria["category"] = category
        if tag:
            criteria["tags"] = tag

        posts = await self.posts.filter(criteria, order_by)
        found = [p for p in posts if matches_text(q, p.title, p.content, p.tags)]
        return found[:limit] if limit else found

    async def stats(self) -> BoardStats:
        """Counts shown above the board, over every post."""
        posts = await self.posts.list(order_by=None)
        return BoardStats(
            total_posts=len(posts),
            questions=sum(1 for p in posts if p.category == "question"),
            resolved=sum(1 for p in posts if p.is_resolved),
            total_likes=sum(p.likes_count for p in posts),
        )

    async def create_post(
        self, data: CommunityPostCreate, author: Optional[str] = None
    ) -> CommunityPost:
        """New posts start with no likes, no replies and unresolved."""
        return await self.posts.create(
            data,
            created_by=author,
            likes_count=0,
            replies_count=0,
            is_resolved=False,
        )

    async def like(self, post_id: str) -> CommunityPost:
        post = await self.posts.get(post_id)
        return await self.posts.update(
            post_id, CommunityPostUpdate(likes_count=post.likes_count + 1)
        )

    async def resolve(self, post_id: str) -> CommunityPost:
        post = await self.posts.update(post_id, CommunityPostUpdate(is_resolved=True))
        logger.info(f"Post {post_id} marked resolved")
        return post
