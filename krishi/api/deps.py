"""API dependencies: services built once at startup and kept on app.state."""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from krishi.config import Settings, settings
from krishi.core.exceptions import EntityNotFoundError
from krishi.schemas.entities import User
from krishi.services.api_client import CoreAPIClient
from krishi.services.community_service import CommunityService
from krishi.services.crop_service import CropService
from krishi.services.dashboard_service import DashboardService
from krishi.services.disease_service import DiseaseAnalysisService
from krishi.services.entity_store import (
    StoreRegistry,
    build_memory_registry,
    build_remote_registry,
)
from krishi.services.llm.generation_client import StructuredGenerationClient
from krishi.services.localization import Translator
from krishi.services.tip_service import TipService
from krishi.services.upload_client import FileUploadClient
from krishi.services.weather_service import WeatherService

logger = logging.getLogger(__name__)


@dataclass
class AppServices:
    """Everything the routes need, owned by the application instance."""

    generator: StructuredGenerationClient
    uploader: FileUploadClient
    stores: StoreRegistry
    translator: Translator


def build_services(config: Settings = settings) -> AppServices:
    """Wire clients and stores from settings."""
    generator = StructuredGenerationClient(
        base_url=config.API_BASE_URL,
        invoke_path=config.LLM_INVOKE_PATH,
        timeout=config.HTTP_TIMEOUT,
        validate_response=config.LLM_VALIDATE_RESPONSE,
    )
    uploader = FileUploadClient(
        base_url=config.API_BASE_URL,
        upload_path=config.UPLOAD_PATH,
        timeout=config.HTTP_TIMEOUT,
    )

    if config.ENTITY_BACKEND == "remote":
        api = CoreAPIClient(base_url=config.API_BASE_URL, timeout=config.HTTP_TIMEOUT)
        stores = build_remote_registry(api, prefix=config.ENTITY_PATH_PREFIX)
    else:
        stores = build_memory_registry(seed_demo_data=config.SEED_DEMO_DATA)

    logger.info(
        f"Services ready: backend={config.ENTITY_BACKEND} "
        f"service={config.API_BASE_URL} seed_demo={config.SEED_DEMO_DATA}"
    )
    return AppServices(
        generator=generator,
        uploader=uploader,
        stores=stores,
        translator=Translator(default_language=config.DEFAULT_LANGUAGE),
    )


def get_services(request: Request) -> AppServices:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Services are not initialized",
        )
    return services


def get_stores(services: AppServices = Depends(get_services)) -> StoreRegistry:
    return services.stores


def get_translator(services: AppServices = Depends(get_services)) -> Translator:
    return services.translator


def get_generator(services: AppServices = Depends(get_services)) -> StructuredGenerationClient:
    return services.generator


def get_weather_service(services: AppServices = Depends(get_services)) -> WeatherService:
    return WeatherService(services.generator)


def get_disease_service(services: AppServices = Depends(get_services)) -> DiseaseAnalysisService:
    return DiseaseAnalysisService(
        uploader=services.uploader,
        generator=services.generator,
        detections=services.stores.detections,
    )


def get_dashboard_service(
    services: AppServices = Depends(get_services),
    weather: WeatherService = Depends(get_weather_service),
) -> DashboardService:
    return DashboardService(services.stores, weather)


def get_crop_service(stores: StoreRegistry = Depends(get_stores)) -> CropService:
    return CropService(stores.crops)


def get_tip_service(stores: StoreRegistry = Depends(get_stores)) -> TipService:
    return TipService(stores.tips)


def get_community_service(stores: StoreRegistry = Depends(get_stores)) -> CommunityService:
    return CommunityService(stores.posts)


async def get_current_user(stores: StoreRegistry = Depends(get_stores)) -> Optional[User]:
    """The configured farmer profile, or None when it does not exist yet."""
    try:
        return await stores.users.get(settings.CURRENT_USER_ID)
    except EntityNotFoundError:
        logger.debug(f"No profile for current user {settings.CURRENT_USER_ID}")
        return None
