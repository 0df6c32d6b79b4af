"""Pydantic schemas for request/response validation."""

from krishi.schemas.entities import (
    CommunityPost,
    CommunityPostCreate,
    Crop,
    CropCreate,
    CropUpdate,
    DiseaseDetection,
    ExpertTip,
    ExpertTipCreate,
    User,
)
from krishi.schemas.generation import GenerationRequest, GenerationResponse, UploadResult

__all__ = [
    "CropCreate",
    "CropUpdate",
    "Crop",
    "CommunityPostCreate",
    "CommunityPost",
    "DiseaseDetection",
    "ExpertTipCreate",
    "ExpertTip",
    "User",
    "GenerationRequest",
    "GenerationResponse",
    "UploadResult",
]
