"""Dashboard response schemas."""

from typing import Optional

from pydantic import BaseModel

from krishi.schemas.entities import Crop, DiseaseDetection, ExpertTip
from krishi.schemas.weather import WeatherSnapshot


class DashboardStats(BaseModel):
    total_crops: int
    active_crops: int
    ready_to_harvest: int
    recent_detections: int
    crop_health_score: int = 0


class DashboardSummary(BaseModel):
    """Everything the dashboard page shows in one payload."""

    crops: list[Crop]
    recent_detections: list[DiseaseDetection]
    featured_tips: list[ExpertTip]
    stats: DashboardStats
    weather: Optional[WeatherSnapshot] = None
    weather_error: Optional[str] = None
