"""Client for the file upload endpoint."""

import asyncio
import logging
import mimetypes
from pathlib import Path
from typing import Optional

import httpx

from krishi.config import settings
from krishi.core.exceptions import InvalidRequestError, UploadError
from krishi.schemas.generation import UploadResult
from krishi.services.base_client import BaseServiceClient

logger = logging.getLogger(__name__)


class FileUploadClient(BaseServiceClient):
    """
    Uploads raw bytes as a single multipart field named ``file``.

    No chunking, resumability or client-side size limit.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        upload_path: str = settings.UPLOAD_PATH,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)
        self.upload_path = upload_path

    async def upload(
        self,
        file_bytes: bytes,
        file_name: str,
        content_type: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> UploadResult:
        """
        Upload a file and return the URL the service stored it under.

        Args:
            file_bytes: File content
            file_name: Original file name
            content_type: MIME type, guessed from the name when omitted
            cancel_event: Setting this event abandons the upload

        Returns:
            UploadResult with the stored file URL

        Raises:
            InvalidRequestError: File name is empty or has no base name
            NetworkError: Service unreachable or timed out
            UpstreamError: Service answered with a failure status
            MalformedResponseError: Body is not JSON
            UploadError: JSON body carries no usable file_url
            RequestCancelledError: Caller cancelled the upload
        """
        safe_name = Path(file_name).name if file_name else ""
        if safe_name.strip() in ("", ".", ".."):
            raise InvalidRequestError(f"File name {file_name!r} has no usable base name")

        content_type = (
            content_type
            or mimetypes.guess_type(safe_name)[0]
            or "application/octet-stream"
        )

        self.logger.info(
            f"Uploading {safe_name} ({len(file_bytes)} bytes, {content_type})"
        )

        response = await self.send(
            "POST",
            self.upload_path,
            files={"file": (safe_name, file_bytes, content_type)},
            cancel_event=cancel_event,
        )
        payload = self.parse_json(response)

        file_url = payload.get("file_url") if isinstance(payload, dict) else None
        if not isinstance(file_url, str) or not file_url:
            self.logger.error(f"Upload response carries no file_url: {payload!r}")
            raise UploadError("Upload response did not include a file_url")

        self.logger.info(f"Uploaded {safe_name} to {file_url}")
        return UploadResult(url=file_url)
