"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from krishi.api.deps import build_services
from krishi.api.v1 import api_router
from krishi.config import settings
from krishi.core.error_handler import register_exception_handlers
from krishi.core.logging_config import setup_logging
from krishi.middleware.tracing import RequestTracingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Builds the shared clients and stores unless they were injected already.
    """
    logger.info(f"Starting {settings.PROJECT_NAME} {settings.VERSION}")
    logger.info(f"API Docs: http://{settings.HOST}:{settings.PORT}/docs")

    if getattr(app.state, "services", None) is None:
        app.state.services = build_services()

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")


# Configure logging before app initialization
setup_logging()

# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Farming assistant: crop records, disease detection, weather and community",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestTracingMiddleware)

register_exception_handlers(app)


# Root endpoint
@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """
    Root endpoint with API information.

    Returns:
        dict: Welcome message and API documentation link
    """
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "docs": "/docs",
        "health": f"{settings.API_V1_PREFIX}/health",
    }


# Include API v1 router
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "krishi.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
