"""Weather endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from krishi.api.deps import get_current_user, get_weather_service
from krishi.schemas.entities import User
from krishi.schemas.weather import WeatherReport, WeatherSnapshot
from krishi.services.weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["weather"])


def _location(location: Optional[str], user: Optional[User]) -> Optional[str]:
    if location is None and user is not None:
        return user.location
    return location


@router.get("/current", response_model=WeatherSnapshot)
async def current_weather(
    location: Optional[str] = Query(None),
    service: WeatherService = Depends(get_weather_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    """Short weather snapshot with farming advice."""
    return await service.current(_location(location, current_user))


@router.get("/forecast", response_model=WeatherReport)
async def weather_forecast(
    location: Optional[str] = Query(None),
    service: WeatherService = Depends(get_weather_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    """
    Full weather report.

    Args:
        location: Place to report on; defaults to the profile location
        service: Weather service
        current_user: Farmer profile, if one exists

    Returns:
        WeatherReport: Current conditions, 7-day forecast, alerts and risks
    """
    return await service.forecast(_location(location, current_user))
