"""Client for the structured generation (InvokeLLM) endpoint."""

import asyncio
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from krishi.config import settings
from krishi.core.exceptions import (
    InvalidRequestError,
    MalformedResponseError,
    SchemaError,
)
from krishi.schemas.generation import GenerationRequest, GenerationResponse
from krishi.services.base_client import BaseServiceClient
from krishi.services.llm.schema import check_schema, conforms

logger = logging.getLogger(__name__)


def is_valid_file_url(url: Any) -> bool:
    """Check that an attachment is an absolute http(s) URL with a host."""
    if not isinstance(url, str) or not url.strip():
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_generation_request(request: GenerationRequest) -> None:
    """
    Local checks performed before anything is sent.

    Raises:
        InvalidRequestError: Empty prompt, malformed URL or malformed schema
    """
    if not isinstance(request.prompt, str) or not request.prompt.strip():
        raise InvalidRequestError("Prompt must not be empty")

    for url in request.file_urls:
        if not is_valid_file_url(url):
            raise InvalidRequestError(f"Malformed file URL: {url!r}")

    if request.response_json_schema is not None:
        try:
            check_schema(request.response_json_schema)
        except SchemaError as e:
            raise InvalidRequestError(f"Invalid response schema: {e}") from e


class StructuredGenerationClient(BaseServiceClient):
    """
    Sends a prompt plus an optional JSON Schema to the generation service.

    One POST per call, no retries. Errors are raised as exactly one of
    InvalidRequestError, NetworkError, UpstreamError, MalformedResponseError
    or RequestCancelledError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        invoke_path: str = settings.LLM_INVOKE_PATH,
        timeout: Optional[float] = None,
        validate_response: bool = settings.LLM_VALIDATE_RESPONSE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize generation client.

        Args:
            base_url: Service base URL
            invoke_path: Sub-path of the invoke endpoint
            timeout: Request timeout in seconds
            validate_response: Check structured responses against their schema
            transport: Custom httpx transport
        """
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)
        self.invoke_path = invoke_path
        self.validate_response = validate_response

    async def generate(
        self,
        request: GenerationRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationResponse:
        """
        Run one generation request.

        Args:
            request: Prompt, schema, attachments and context flag
            cancel_event: Setting this event abandons the call

        Returns:
            GenerationResponse with the parsed JSON value

        Raises:
            InvalidRequestError: Request failed local validation
            NetworkError: Service unreachable or timed out
            UpstreamError: Service answered with a failure status
            MalformedResponseError: Body is not JSON (or breaks the schema
                when response validation is enabled)
            RequestCancelledError: Caller cancelled the call
        """
        validate_generation_request(request)

        self.logger.info(
            f"Invoking generation at {self.invoke_path} "
            f"(structured={request.is_structured}, "
            f"attachments={len(request.file_urls)}, "
            f"internet={request.add_context_from_internet})"
        )

        response = await self.send(
            "POST",
            self.invoke_path,
            json_body=request.to_wire(),
            cancel_event=cancel_event,
        )

        try:
            data = self.parse_json(response)
        except MalformedResponseError:
            self.logger.error("Generation service returned a non-JSON body")
            raise

        if self.validate_response and request.is_structured:
            problems = conforms(data, request.response_json_schema)
            if problems:
                self.logger.error(
                    f"Generation response breaks its schema: {problems[:5]}"
                )
                raise MalformedResponseError(
                    "Response does not match schema: " + "; ".join(problems[:5])
                )

        return GenerationResponse(data=data, structured=request.is_structured)

    async def invoke(
        self,
        prompt: str,
        *,
        response_json_schema: Optional[Dict[str, Any]] = None,
        file_urls: Optional[List[str]] = None,
        add_context_from_internet: bool = False,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Any:
        """Keyword shortcut around generate() that returns the payload only."""
        try:
            request = GenerationRequest(
                prompt=prompt,
                response_json_schema=response_json_schema,
                file_urls=file_urls or [],
                add_context_from_internet=add_context_from_internet,
            )
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid generation request: {e}") from e
        result = await self.generate(request, cancel_event=cancel_event)
        return result.data

    async def health_check(self) -> bool:
        """
        Check whether the service base URL answers at all.

        Returns:
            True if any HTTP response came back, False on transport failure
        """
        try:
            async with self._build_client() as client:
                await client.get(self.base_url, timeout=5)
            return True
        except httpx.HTTPError as e:
            self.logger.error(f"Generation service health check failed: {e!r}")
            return False
