"""Expert tip browsing."""

import logging
from typing import Any, Dict, List, Optional

from krishi.schemas.entities import Difficulty, ExpertTip, Season, TipCategory
from krishi.services.entity_store import DEFAULT_ORDER, EntityStore, matches_text

logger = logging.getLogger(__name__)

YEAR_ROUND = "all_seasons"


def in_season(tip: ExpertTip, season: Optional[Season]) -> bool:
    """Year-round tips belong to every season."""
    return season is None or tip.season in (season, YEAR_ROUND)


class TipService:
    def __init__(self, tips: EntityStore[ExpertTip]):
        self.tips = tips

    async def browse(
        self,
        category: Optional[TipCategory] = None,
        difficulty_level: Optional[Difficulty] = None,
        season: Optional[Season] = None,
        q: Optional[str] = None,
        order_by: Optional[str] = DEFAULT_ORDER,
        limit: Optional[int] = None,
    ) -> List[ExpertTip]:
        """
        Filter tips for browsing.

        Category and difficulty go to the store; season and the free-text
        query (title, content, crop types) are applied to its result, and
        the limit is taken last.

        Args:
            category: Only tips in this category
            difficulty_level: Only tips at this difficulty
            season: Tips for this season, year-round tips included
            q: Case-insensitive search text
            order_by: Sort field, '-' prefix for descending
            limit: Maximum number of tips

        Returns:
            Matching tips
        """
        criteria: Dict[str, Any] = {}
        if category is not None:
            criteria["category"] = category
        if difficulty_level is not None:
            criteria["difficulty_level"] = difficulty_level

        tips = await self.tips.filter(criteria, order_by)
        found = [
            t for t in tips
            if in_season(t, season) and matches_text(q, t.title, t.content, t.crop_types)
        ]
        logger.debug(f"Tip search q={q!r} season={season}: {len(found)} of {len(tips)}")
        return found[:limit] if limit else found
