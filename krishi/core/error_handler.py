"""Global error handling and tracking."""

import logging
import traceback
from collections import deque
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from krishi.core.exceptions import (
    EntityNotFoundError,
    IntegrationError,
    InvalidQueryError,
    InvalidRecordError,
    InvalidRequestError,
    LocalizationError,
    MalformedResponseError,
    NetworkError,
    NetworkTimeoutError,
    RequestCancelledError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

# Store recent errors in memory (last 100)
recent_errors: deque = deque(maxlen=100)
error_counts: Dict[str, int] = {}

# Non-standard "client closed request" status used by nginx
HTTP_499_CLIENT_CLOSED_REQUEST = 499


class ErrorInfo:
    """Structured error information."""

    def __init__(
        self,
        error_type: str,
        error_message: str,
        stack_trace: str,
        request_context: Dict[str, Any],
        timestamp: datetime,
    ):
        """Initialize error info."""
        self.error_type = error_type
        self.error_message = error_message
        self.stack_trace = stack_trace
        self.request_context = request_context
        self.timestamp = timestamp

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "error_type": self.error_type,
            "error_message": self.error_message,
            "stack_trace": self.stack_trace,
            "request_context": self.request_context,
            "timestamp": self.timestamp.isoformat(),
        }


def _request_context(request: Request) -> Dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "request_id": getattr(request.state, "request_id", None),
        "client_ip": request.client.host if request.client else "unknown",
    }


def integration_status_code(exc: IntegrationError) -> int:
    """
    Map an integration failure to the HTTP status returned to our clients.

    Args:
        exc: Classified integration error

    Returns:
        HTTP status code
    """
    if isinstance(exc, InvalidRequestError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, NetworkTimeoutError):
        return status.HTTP_504_GATEWAY_TIMEOUT
    if isinstance(exc, NetworkError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(exc, RequestCancelledError):
        return HTTP_499_CLIENT_CLOSED_REQUEST
    if isinstance(exc, (UpstreamError, MalformedResponseError)):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_502_BAD_GATEWAY


async def integration_exception_handler(
    request: Request, exc: IntegrationError
) -> JSONResponse:
    """Translate generation/upload failures into JSON error responses."""
    status_code = integration_status_code(exc)
    context = _request_context(request)
    logger.warning(
        f"Integration failure: {type(exc).__name__}: {exc}",
        extra={**context, "status_code": status_code},
    )
    content: Dict[str, Any] = {
        "error": type(exc).__name__,
        "message": str(exc),
        "request_id": context["request_id"],
    }
    if isinstance(exc, UpstreamError):
        content["upstream_status"] = exc.status_code
    return JSONResponse(status_code=status_code, content=content)


async def not_found_exception_handler(
    request: Request, exc: EntityNotFoundError
) -> JSONResponse:
    """Return 404 for unknown record ids."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "message": str(exc)},
    )


async def bad_query_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Return 400 for unusable queries and unsupported languages."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "bad_request", "message": str(exc)},
    )


async def invalid_record_exception_handler(
    request: Request, exc: InvalidRecordError
) -> JSONResponse:
    """Return 422 when a partial update leaves a record invalid."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "invalid_record", "message": str(exc)},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unhandled exceptions.

    Args:
        request: FastAPI request
        exc: Exception that was raised

    Returns:
        JSON response with error details
    """
    error_type = type(exc).__name__
    error_message = str(exc)
    stack_trace = "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__)
    )
    request_context = _request_context(request)

    error_info = ErrorInfo(
        error_type=error_type,
        error_message=error_message,
        stack_trace=stack_trace,
        request_context=request_context,
        timestamp=datetime.now(timezone.utc),
    )
    recent_errors.append(error_info)
    error_counts[error_type] = error_counts.get(error_type, 0) + 1

    logger.error(
        f"Unhandled exception: {error_type}: {error_message}",
        extra={
            **request_context,
            "error_type": error_type,
            "error_message": error_message,
        },
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again later.",
            "request_id": request_context.get("request_id"),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the application."""
    app.add_exception_handler(IntegrationError, integration_exception_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_exception_handler)
    app.add_exception_handler(InvalidQueryError, bad_query_exception_handler)
    app.add_exception_handler(InvalidRecordError, invalid_record_exception_handler)
    app.add_exception_handler(LocalizationError, bad_query_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)


def get_recent_errors(limit: int = 100) -> List[Dict[str, Any]]:
    """Get recent errors."""
    return [error.to_dict() for error in list(recent_errors)[-limit:]]


def get_error_counts() -> Dict[str, int]:
    """Get error counts by type."""
    return dict(error_counts)


def clear_error_tracking() -> None:
    """Clear error tracking (for testing)."""
    recent_errors.clear()
    error_counts.clear()
