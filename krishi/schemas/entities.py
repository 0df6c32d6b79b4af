"""Farm record Pydantic schemas."""

from datetime import date, datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

GrowthStage = Literal["seedling", "vegetative", "flowering", "fruiting", "harvest_ready"]
CropStatus = Literal["active", "harvested", "inactive"]
PostCategory = Literal["question", "tip", "discussion", "success_story"]
Severity = Literal["low", "moderate", "high", "critical"]
TipCategory = Literal[
    "pest_control",
    "fertilization",
    "irrigation",
    "planting",
    "harvesting",
    "soil_management",
    "disease_prevention",
]
Difficulty = Literal["beginner", "intermediate", "advanced"]
Cost = Literal["low", "medium", "high"]
Season = Literal["spring", "summer", "autumn", "winter", "all_seasons"]


class EntityRecord(BaseModel):
    """Fields assigned by the store."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_date: datetime


# ============================================================================
# Crops
# ============================================================================


class CropCreate(BaseModel):
    """Request schema for registering a crop."""

    name: str = Field(..., min_length=1, max_length=120)
    variety: Optional[str] = None
    planting_date: Optional[date] = None
    expected_harvest_date: Optional[date] = None
    field_size: Optional[float] = Field(None, ge=0, description="Acres")
    growth_stage: GrowthStage = "seedling"
    location: Optional[str] = None
    notes: Optional[str] = None
    status: CropStatus = "active"


class CropUpdate(BaseModel):
    """Request schema for updating a crop (all fields optional)."""

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    variety: Optional[str] = None
    planting_date: Optional[date] = None
    expected_harvest_date: Optional[date] = None
    field_size: Optional[float] = Field(None, ge=0)
    growth_stage: Optional[GrowthStage] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[CropStatus] = None


class Crop(CropCreate, EntityRecord):
    """Stored crop."""


class CropStatusChange(BaseModel):
    status: CropStatus


# ============================================================================
# Community posts
# ============================================================================


def split_tags(tags: Union[str, list[str], None]) -> list[str]:
    """
    Normalize tags given as a list or as a comma-separated string.

    Example:
        "wheat, organic,,neem " -> ["wheat", "organic", "neem"]
    """
    if not tags:
        return []
    items = tags.split(",") if isinstance(tags, str) else tags
    return [t.strip() for t in items if isinstance(t, str) and t.strip()]


class CommunityPostCreate(BaseModel):
    """Request schema for a new community post."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    category: PostCategory = "question"
    location: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        return split_tags(v)


class CommunityPostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[PostCategory] = None
    location: Optional[str] = None
    tags: Optional[list[str]] = None
    likes_count: Optional[int] = Field(None, ge=0)
    replies_count: Optional[int] = Field(None, ge=0)
    is_resolved: Optional[bool] = None

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        return None if v is None else split_tags(v)


class CommunityPost(CommunityPostCreate, EntityRecord):
    """Stored community post."""

    created_by: Optional[str] = None
    likes_count: int = 0
    replies_count: int = 0
    is_resolved: bool = False


class BoardStats(BaseModel):
    """Counts shown above the community board."""

    total_posts: int
    questions: int
    resolved: int
    total_likes: int


# ============================================================================
# Disease detections
# ============================================================================


class DiseaseDetectionCreate(BaseModel):
    """Fields recorded for one analysed plant image."""

    image_url: str
    detected_disease: Optional[str] = None
    plant_type: Optional[str] = None
    confidence_score: Optional[float] = Field(None, ge=0, le=100)
    symptoms: list[str] = Field(default_factory=list)
    treatment_recommendations: list[str] = Field(default_factory=list)
    prevention_tips: list[str] = Field(default_factory=list)
    severity: Optional[Severity] = None
    is_healthy: Optional[bool] = None


class DiseaseDetectionUpdate(BaseModel):
    detected_disease: Optional[str] = None
    plant_type: Optional[str] = None
    confidence_score: Optional[float] = Field(None, ge=0, le=100)
    symptoms: Optional[list[str]] = None
    treatment_recommendations: Optional[list[str]] = None
    prevention_tips: Optional[list[str]] = None
    severity: Optional[Severity] = None
    is_healthy: Optional[bool] = None


class DiseaseDetection(DiseaseDetectionCreate, EntityRecord):
    """Stored disease detection."""


# ============================================================================
# Expert tips
# ============================================================================


class ExpertTipCreate(BaseModel):
    """Request schema for publishing an expert tip."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    category: TipCategory
    difficulty_level: Difficulty = "beginner"
    estimated_cost: Cost = "low"
    season: Season = "all_seasons"
    crop_types: list[str] = Field(default_factory=list)
    image_url: Optional[str] = None


class ExpertTipUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[TipCategory] = None
    difficulty_level: Optional[Difficulty] = None
    estimated_cost: Optional[Cost] = None
    season: Optional[Season] = None
    crop_types: Optional[list[str]] = None
    image_url: Optional[str] = None


class ExpertTip(ExpertTipCreate, EntityRecord):
    """Stored expert tip."""


# ============================================================================
# Users
# ============================================================================


class UserCreate(BaseModel):
    """Farmer profile."""

    full_name: str = Field(..., min_length=1, max_length=120)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    preferred_language: str = "en"


class UserUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    preferred_language: Optional[str] = None


class User(UserCreate, EntityRecord):
    """Stored farmer profile."""
