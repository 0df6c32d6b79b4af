"""Crop record operations beyond plain CRUD."""

import logging

from krishi.schemas.entities import Crop, CropStatus, CropUpdate
from krishi.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


class CropService:
    def __init__(self, crops: EntityStore[Crop]):
        self.crops = crops

    async def change_status(self, crop_id: str, status: CropStatus) -> Crop:
        """Move a crop between active, harvested and inactive."""
        crop = await self.crops.update(crop_id, CropUpdate(status=status))
        logger.info(f"Crop {crop_id} status -> {status}")
        return crop
