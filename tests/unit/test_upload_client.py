"""Unit tests for the file upload client."""

import asyncio

import httpx
import pytest

from krishi.core.exceptions import (
    InvalidRequestError,
    MalformedResponseError,
    NetworkError,
    RequestCancelledError,
    UploadError,
    UpstreamError,
)
from krishi.schemas.generation import UploadResult
from tests.utils import PNG_BYTES, UPLOAD_PATH, raising


@pytest.mark.unit
@pytest.mark.asyncio
class TestFileUploadClient:
    """Test multipart uploads and their failure taxonomy."""

    async def test_upload_returns_file_url(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": "https://x/y.png"})

        result = await uploader.upload(PNG_BYTES, "leaf.png")

        assert result == UploadResult(url="https://x/y.png")
        assert fake_service.calls == 1

    async def test_sends_single_multipart_file_field(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": "https://x/y.png"})

        await uploader.upload(PNG_BYTES, "leaf.png")

        request = fake_service.requests[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.content
        assert b'name="file"' in body
        assert b'filename="leaf.png"' in body
        assert b"Content-Type: image/png" in body
        assert PNG_BYTES in body

    async def test_directory_parts_are_dropped_from_name(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": "https://x/y.jpg"})

        await uploader.upload(b"jpeg", "../../photos/field/leaf.jpg")

        assert b'filename="leaf.jpg"' in fake_service.requests[0].content

    async def test_explicit_content_type_wins(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": "https://x/y"})

        await uploader.upload(b"raw", "capture", content_type="image/webp")

        assert b"Content-Type: image/webp" in fake_service.requests[0].content

    async def test_unknown_extension_falls_back_to_octet_stream(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": "https://x/y"})

        await uploader.upload(b"raw", "capture.zzz-unknown")

        assert b"Content-Type: application/octet-stream" in fake_service.requests[0].content

    @pytest.mark.parametrize("name", ["", "   ", "/", "photos/..", "."])
    async def test_empty_name_is_invalid_without_network_call(
        self, uploader, fake_service, name
    ):
        with pytest.raises(InvalidRequestError):
            await uploader.upload(PNG_BYTES, name)

        assert fake_service.calls == 0

    async def test_empty_file_is_uploaded(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": "https://x/empty.txt"})

        result = await uploader.upload(b"", "empty.txt")

        assert result.url == "https://x/empty.txt"

    async def test_failure_status_raises_upstream_error(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, status_code=413, text="too large")

        with pytest.raises(UpstreamError) as exc_info:
            await uploader.upload(PNG_BYTES, "leaf.png")

        assert exc_info.value.status_code == 413

    async def test_connection_error_raises_network_error(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, raising(httpx.ConnectError("refused")))

        with pytest.raises(NetworkError):
            await uploader.upload(PNG_BYTES, "leaf.png")

    async def test_non_json_body_is_malformed(self, uploader, fake_service):
        fake_service.on("POST", UPLOAD_PATH, content=b"uploaded!")

        with pytest.raises(MalformedResponseError):
            await uploader.upload(PNG_BYTES, "leaf.png")

    @pytest.mark.parametrize(
        "payload", [{}, {"file_url": ""}, {"file_url": 42}, {"url": "https://x/y"}, ["https://x/y"]]
    )
    async def test_missing_file_url_raises_upload_error(self, uploader, fake_service, payload):
        fake_service.on("POST", UPLOAD_PATH, json=payload)

        with pytest.raises(UploadError) as exc_info:
            await uploader.upload(PNG_BYTES, "leaf.png")

        assert isinstance(exc_info.value, MalformedResponseError)

    async def test_cancelled_before_send(self, uploader, fake_service):
        cancel = asyncio.Event()
        cancel.set()

        with pytest.raises(RequestCancelledError):
            await uploader.upload(PNG_BYTES, "leaf.png", cancel_event=cancel)

        assert fake_service.calls == 0
