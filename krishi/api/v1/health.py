"""Health check endpoints for monitoring."""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from krishi.api.deps import get_generator
from krishi.config import settings
from krishi.core.error_handler import get_error_counts, get_recent_errors
from krishi.services.llm.generation_client import StructuredGenerationClient

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)

# Track application start time
app_start_time = datetime.now(timezone.utc)


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """
    Basic health check for load balancer.

    Returns:
        Simple healthy status
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    generator: StructuredGenerationClient = Depends(get_generator),
) -> Dict[str, Any]:
    """
    Readiness probe - checks that the generation service answers.

    Args:
        generator: Shared generation client

    Returns:
        Status of the remote service plus uptime and error counts
    """
    start = time.time()
    reachable = await generator.health_check()
    latency = (time.time() - start) * 1000

    checks = {
        "generation_service": (
            {"status": "up", "latency_ms": round(latency, 2)}
            if reachable
            else {"status": "down"}
        )
    }
    uptime_seconds = (datetime.now(timezone.utc) - app_start_time).total_seconds()

    return {
        "status": "healthy" if reachable else "unhealthy",
        "checks": checks,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "entity_backend": settings.ENTITY_BACKEND,
        "uptime_seconds": round(uptime_seconds, 2),
        "error_counts": get_error_counts(),
    }


@router.get("/health/errors")
async def list_recent_errors(limit: int = Query(20, ge=1, le=100)) -> Dict[str, Any]:
    """
    Unhandled errors seen since startup, newest last.

    Args:
        limit: Maximum number of errors to return

    Returns:
        Recent errors with request context, grouped counts by type
    """
    errors = get_recent_errors(limit)

    grouped: Dict[str, int] = {}
    for error in errors:
        grouped[error["error_type"]] = grouped.get(error["error_type"], 0) + 1

    return {
        "total_errors": len(errors),
        "errors": errors,
        "grouped_by_type": grouped,
    }
