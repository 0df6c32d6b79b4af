"""Plant disease analysis: upload, structured generation, record."""

import asyncio
import logging
from typing import Any, Dict, Optional

from krishi.core.exceptions import InvalidRequestError, MalformedResponseError
from krishi.schemas.entities import DiseaseDetection, DiseaseDetectionCreate
from krishi.services.entity_store import EntityStore
from krishi.services.llm.generation_client import StructuredGenerationClient
from krishi.services.llm.prompts import DISEASE_ANALYSIS_PROMPT, DISEASE_ANALYSIS_SCHEMA
from krishi.services.upload_client import FileUploadClient

logger = logging.getLogger(__name__)

SEVERITIES = set(DISEASE_ANALYSIS_SCHEMA["properties"]["severity"]["enum"])
LIST_FIELDS = ("symptoms", "treatment_recommendations", "prevention_tips")


def detection_from_analysis(image_url: str, data: Dict[str, Any]) -> DiseaseDetectionCreate:
    """
    Build a detection record from the service's answer.

    The answer is trusted only as far as its types go: out-of-range
    confidence, unknown severities and non-list fields are dropped.
    """
    confidence = data.get("confidence_score")
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        confidence = None
    elif not 0 <= confidence <= 100:
        confidence = None

    severity = data.get("severity")
    if severity not in SEVERITIES:
        severity = None

    is_healthy = data.get("is_healthy")
    if not isinstance(is_healthy, bool):
        is_healthy = None

    lists = {}
    for field in LIST_FIELDS:
        value = data.get(field)
        lists[field] = [str(v) for v in value] if isinstance(value, list) else []

    def text(field: str) -> Optional[str]:
        value = data.get(field)
        return value if isinstance(value, str) and value else None

    return DiseaseDetectionCreate(
        image_url=image_url,
        detected_disease=text("detected_disease"),
        plant_type=text("plant_type"),
        confidence_score=confidence,
        severity=severity,
        is_healthy=is_healthy,
        **lists,
    )


class DiseaseAnalysisService:
    """Runs one plant image through upload, analysis and storage."""

    def __init__(
        self,
        uploader: FileUploadClient,
        generator: StructuredGenerationClient,
        detections: EntityStore[DiseaseDetection],
    ):
        self.uploader = uploader
        self.generator = generator
        self.detections = detections

    async def analyze(
        self,
        image_bytes: bytes,
        file_name: str,
        content_type: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> DiseaseDetection:
        """
        Analyze a plant photo and store the detection.

        Args:
            image_bytes: Raw image content
            file_name: Original file name
            content_type: MIME type reported by the browser
            cancel_event: Setting this event abandons the remote calls

        Returns:
            The stored DiseaseDetection

        Raises:
            InvalidRequestError: Not an image, or empty content
            IntegrationError: Any upload or generation failure
        """
        if content_type and not content_type.startswith("image/"):
            raise InvalidRequestError(f"Expected an image, got {content_type}")
        if not image_bytes:
            raise InvalidRequestError("Image is empty")

        uploaded = await self.uploader.upload(
            image_bytes, file_name, content_type=content_type, cancel_event=cancel_event
        )

        data = await self.generator.invoke(
            DISEASE_ANALYSIS_PROMPT,
            response_json_schema=DISEASE_ANALYSIS_SCHEMA,
            file_urls=[uploaded.url],
            cancel_event=cancel_event,
        )
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object for the analysis, got {type(data).__name__}"
            )

        record = await self.detections.create(detection_from_analysis(uploaded.url, data))
        logger.info(
            f"Detection {record.id}: {record.detected_disease or 'no disease'} "
            f"on {record.plant_type or 'unknown plant'} (severity={record.severity})"
        )
        return record
