"""API v1 routes."""

from fastapi import APIRouter

from krishi.api.v1 import (
    community,
    crops,
    dashboard,
    detections,
    health,
    i18n,
    tips,
    users,
    weather,
)

api_router = APIRouter()

# Include routers
api_router.include_router(dashboard.router)
api_router.include_router(detections.router)
api_router.include_router(crops.router)
api_router.include_router(tips.router)
api_router.include_router(community.router)
api_router.include_router(weather.router)
api_router.include_router(users.router)
api_router.include_router(i18n.router)
api_router.include_router(health.router)
