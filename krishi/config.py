"""Application configuration settings."""

from typing import Literal, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Krishi Sakhi"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"
    ENVIRONMENT: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: Union[str, list[str]] = (
        "http://localhost:3000,http://localhost:8000"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode="after")
    @classmethod
    def parse_cors_origins(cls, v) -> list[str]:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    # Remote generation / upload service
    API_BASE_URL: str = "http://localhost:3001/api"
    LLM_INVOKE_PATH: str = "/llm/invoke"
    UPLOAD_PATH: str = "/upload"
    ENTITY_PATH_PREFIX: str = "/entities"
    HTTP_TIMEOUT: float = 60.0  # seconds, 0 disables
    LLM_VALIDATE_RESPONSE: bool = False

    @field_validator("API_BASE_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Base URL is joined with paths that start with a slash."""
        return v.rstrip("/")

    # Entity storage
    ENTITY_BACKEND: Literal["memory", "remote"] = "memory"
    SEED_DEMO_DATA: bool = False
    CURRENT_USER_ID: str = "demo-farmer"

    # Localization
    DEFAULT_LANGUAGE: str = "en"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()
