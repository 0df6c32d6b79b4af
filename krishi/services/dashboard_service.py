"""Dashboard aggregation."""

import asyncio
import logging
import math
from typing import List, Optional

from krishi.core.exceptions import IntegrationError
from krishi.schemas.dashboard import DashboardStats, DashboardSummary
from krishi.schemas.entities import Crop
from krishi.schemas.weather import WeatherSnapshot
from krishi.services.entity_store import StoreRegistry
from krishi.services.weather_service import WeatherService

logger = logging.getLogger(__name__)

ACTIVE_CROPS_LIMIT = 5
RECENT_DETECTIONS_LIMIT = 3
FEATURED_TIPS_LIMIT = 4
HEALTHY_STAGES = {"vegetative", "flowering", "fruiting", "harvest_ready"}


def crop_health_score(crops: List[Crop]) -> int:
    """Percentage of crops past the seedling stage, rounded half up."""
    if not crops:
        return 0
    healthy = sum(1 for c in crops if c.growth_stage in HEALTHY_STAGES)
    return math.floor(healthy * 100 / len(crops) + 0.5)


class DashboardService:
    """Collects crops, detections, tips and a weather snapshot."""

    def __init__(self, stores: StoreRegistry, weather: WeatherService):
        self.stores = stores
        self.weather = weather

    async def _weather_or_none(
        self, location: Optional[str]
    ) -> tuple[Optional[WeatherSnapshot], Optional[str]]:
        # Weather is decoration: a failure must not take the dashboard down
        try:
            return await self.weather.current(location), None
        except IntegrationError as e:
            logger.warning(f"Dashboard weather unavailable: {type(e).__name__}: {e}")
            return None, type(e).__name__

    async def summary(self, location: Optional[str] = None) -> DashboardSummary:
        """
        Build the dashboard payload.

        Store reads and the weather call run concurrently.

        Args:
            location: Farm location passed to the weather prompt

        Returns:
            DashboardSummary
        """
        crops, detections, tips, (weather, weather_error) = await asyncio.gather(
            self.stores.crops.filter(
                {"status": "active"}, "-created_date", ACTIVE_CROPS_LIMIT
            ),
            self.stores.detections.list("-created_date", RECENT_DETECTIONS_LIMIT),
            self.stores.tips.list("-created_date", FEATURED_TIPS_LIMIT),
            self._weather_or_none(location),
        )

        stats = DashboardStats(
            total_crops=len(crops),
            active_crops=sum(1 for c in crops if c.status == "active"),
            ready_to_harvest=sum(1 for c in crops if c.growth_stage == "harvest_ready"),
            recent_detections=len(detections),
            crop_health_score=crop_health_score(crops),
        )

        return DashboardSummary(
            crops=crops,
            recent_detections=detections,
            featured_tips=tips,
            stats=stats,
            weather=weather,
            weather_error=weather_error,
        )
