"""Shared HTTP plumbing for clients of the generation/upload service."""

import asyncio
import json
import logging
from typing import Any, Awaitable, Dict, Optional

import httpx

from krishi.config import settings
from krishi.core.exceptions import (
    MalformedResponseError,
    NetworkError,
    NetworkTimeoutError,
    RequestCancelledError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class BaseServiceClient:
    """
    Single-attempt HTTP access to the remote service.

    Handles:
    - Transport and status error classification
    - JSON body parsing
    - Cooperative cancellation through an asyncio.Event

    The client keeps no state between calls besides its configuration, so
    one instance may serve concurrent requests.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: Service base URL, defaults to settings.API_BASE_URL
            timeout: Request timeout in seconds, 0 disables it
            transport: Custom httpx transport (tests pass httpx.MockTransport)
        """
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = settings.HTTP_TIMEOUT if timeout is None else timeout
        self.transport = transport
        self.logger = logger

    def _build_client(self) -> httpx.AsyncClient:
        timeout = httpx.Timeout(self.timeout) if self.timeout else httpx.Timeout(None)
        return httpx.AsyncClient(timeout=timeout, transport=self.transport)

    def url_for(self, path: str) -> str:
        """Join the base URL with an endpoint path."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        files: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        url = self.url_for(path)
        try:
            async with self._build_client() as client:
                response = await client.request(
                    method,
                    url,
                    json=json_body,
                    files=files,
                    params=params,
                )
        except httpx.TimeoutException as e:
            self.logger.error(f"{method} {url} timed out: {e!r}")
            raise NetworkTimeoutError(
                f"Request to {url} timed out after {self.timeout}s"
            ) from e
        except httpx.TransportError as e:
            self.logger.error(f"{method} {url} transport failure: {e!r}")
            raise NetworkError(f"Cannot reach {url}: {e}") from e

        if not response.is_success:
            self.logger.error(f"{method} {url} returned HTTP {response.status_code}")
            raise UpstreamError(response.status_code, detail=response.text[:200] or None)

        return response

    async def send(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        files: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        """
        Perform exactly one HTTP request.

        Args:
            method: HTTP method
            path: Endpoint path relative to the base URL
            json_body: JSON payload
            files: Multipart files
            params: Query parameters
            cancel_event: Setting this event abandons the request

        Returns:
            The successful (2xx) response

        Raises:
            NetworkError: Transport failure
            NetworkTimeoutError: Request timed out
            UpstreamError: Non-2xx status
            RequestCancelledError: cancel_event was set first
        """
        request = self._request(
            method, path, json_body=json_body, files=files, params=params
        )
        return await self._run_cancellable(request, cancel_event)

    async def _run_cancellable(
        self, request: Awaitable[httpx.Response], cancel_event: Optional[asyncio.Event]
    ) -> httpx.Response:
        if cancel_event is None:
            return await request

        if cancel_event.is_set():
            request.close()  # type: ignore[attr-defined]
            raise RequestCancelledError("Request cancelled before it was sent")

        request_task = asyncio.ensure_future(request)
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            request_task.cancel()
            cancel_task.cancel()
            raise

        if request_task in done:
            cancel_task.cancel()
            return request_task.result()

        request_task.cancel()
        try:
            await request_task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            self.logger.debug(f"Abandoned request finished with {e!r}")
        self.logger.info("Request cancelled by caller")
        raise RequestCancelledError("Request cancelled while in flight")

    @staticmethod
    def parse_json(response: httpx.Response) -> Any:
        """
        Decode a response body as JSON.

        Raises:
            MalformedResponseError: If the body is not valid JSON
        """
        try:
            return json.loads(response.content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedResponseError(
                f"Response body is not valid JSON: {response.text[:100]!r}"
            ) from e
