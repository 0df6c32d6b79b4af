"""Pytest configuration and fixtures for testing."""

import os

# Settings are read at import time; keep tests off the filesystem
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("ENVIRONMENT", "test")

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from faker import Faker  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from krishi.api.deps import AppServices  # noqa: E402
from krishi.core.error_handler import clear_error_tracking  # noqa: E402
from krishi.main import app  # noqa: E402
from krishi.services.entity_store import StoreRegistry, build_memory_registry  # noqa: E402
from krishi.services.llm.generation_client import StructuredGenerationClient  # noqa: E402
from krishi.services.localization import Translator  # noqa: E402
from krishi.services.upload_client import FileUploadClient  # noqa: E402
from tests.utils import SERVICE_URL, FakeService  # noqa: E402

# Initialize Faker
fake = Faker()


# ============================================================================
# Remote service fakes
# ============================================================================


@pytest.fixture
def fake_service() -> FakeService:
    """Scriptable generation/upload service behind httpx.MockTransport."""
    return FakeService()


@pytest.fixture
def generator(fake_service: FakeService) -> StructuredGenerationClient:
    """Generation client wired to the fake service."""
    return StructuredGenerationClient(
        base_url=SERVICE_URL,
        invoke_path="/llm/invoke",
        timeout=5,
        validate_response=False,
        transport=fake_service.transport,
    )


@pytest.fixture
def uploader(fake_service: FakeService) -> FileUploadClient:
    """Upload client wired to the fake service."""
    return FileUploadClient(
        base_url=SERVICE_URL,
        upload_path="/upload",
        timeout=5,
        transport=fake_service.transport,
    )


# ============================================================================
# Stores
# ============================================================================


@pytest.fixture
def stores() -> StoreRegistry:
    """Empty in-memory stores."""
    return build_memory_registry()


@pytest.fixture
def seeded_stores() -> StoreRegistry:
    """In-memory stores preloaded with the demo records."""
    return build_memory_registry(seed_demo_data=True)


# ============================================================================
# Application
# ============================================================================


@pytest.fixture
def app_services(
    generator: StructuredGenerationClient,
    uploader: FileUploadClient,
    stores: StoreRegistry,
) -> AppServices:
    return AppServices(
        generator=generator,
        uploader=uploader,
        stores=stores,
        translator=Translator(),
    )


@pytest_asyncio.fixture
async def async_client(app_services: AppServices) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with injected services."""
    app.state.services = app_services
    clear_error_tracking()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.state.services = None
    app.dependency_overrides.clear()
