"""Request tracing middleware."""

import logging
import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add request ID and trace requests.

    Adds X-Request-ID header to all responses and logs request lifecycle.
    """

    async def dispatch(self, request: Request, call_next):
        """Process request with tracing."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id

        extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }

        start_time = time.time()
        logger.debug(f"Request started: {request.method} {request.url.path}", extra=extra)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            extra["duration_ms"] = duration_ms
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"error={e} duration={duration_ms:.2f}ms",
                extra=extra,
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        extra["status_code"] = response.status_code
        extra["duration_ms"] = duration_ms

        log_level = logging.INFO
        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400:
            log_level = logging.WARNING

        logger.log(
            log_level,
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration_ms:.2f}ms",
            extra=extra,
        )
        return response
