"""Plant disease detection endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile

from krishi.api.deps import get_disease_service, get_stores
from krishi.schemas.entities import DiseaseDetection, Severity
from krishi.services.disease_service import DiseaseAnalysisService
from krishi.services.entity_store import DEFAULT_ORDER, StoreRegistry

router = APIRouter(prefix="/detections", tags=["detections"])
logger = logging.getLogger(__name__)


@router.post("/analyze", response_model=DiseaseDetection, status_code=201)
async def analyze_image(
    file: UploadFile = File(..., description="Photo of the affected plant"),
    service: DiseaseAnalysisService = Depends(get_disease_service),
):
    """
    Analyze a plant photo.

    The image is uploaded to the file service, analyzed by the generation
    service against the disease schema, and stored as a detection.

    Args:
        file: Uploaded image
        service: Disease analysis service

    Returns:
        DiseaseDetection: The stored detection

    Raises:
        InvalidRequestError: Not an image (422)
        IntegrationError: Upload or analysis failure (502/503/504)
    """
    content = await file.read()
    logger.info(
        f"Analyzing {file.filename} ({file.content_type}, {len(content)} bytes)"
    )
    return await service.analyze(
        content,
        file.filename or "upload",
        content_type=file.content_type,
    )


@router.get("", response_model=List[DiseaseDetection])
async def list_detections(
    severity: Optional[Severity] = Query(None),
    order_by: str = Query(DEFAULT_ORDER),
    limit: Optional[int] = Query(None, ge=1, le=500),
    stores: StoreRegistry = Depends(get_stores),
):
    """Detection history, newest first by default."""
    if severity is not None:
        return await stores.detections.filter({"severity": severity}, order_by, limit)
    return await stores.detections.list(order_by, limit)


@router.get("/{detection_id}", response_model=DiseaseDetection)
async def get_detection(detection_id: str, stores: StoreRegistry = Depends(get_stores)):
    return await stores.detections.get(detection_id)


@router.delete("/{detection_id}", status_code=204)
async def delete_detection(
    detection_id: str, stores: StoreRegistry = Depends(get_stores)
) -> None:
    await stores.detections.delete(detection_id)
