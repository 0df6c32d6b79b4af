"""Dashboard endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from krishi.api.deps import get_current_user, get_dashboard_service
from krishi.schemas.dashboard import DashboardSummary
from krishi.schemas.entities import User
from krishi.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
async def get_dashboard(
    location: Optional[str] = Query(None, description="Overrides the profile location"),
    service: DashboardService = Depends(get_dashboard_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    """
    Crops, recent detections, featured tips, stats and a weather snapshot.

    A weather failure is reported in `weather_error` instead of failing
    the whole dashboard.
    """
    if location is None and current_user is not None:
        location = current_user.location
    return await service.summary(location)
