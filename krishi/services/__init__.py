"""Remote service clients and business logic services."""

from krishi.services.llm.generation_client import StructuredGenerationClient
from krishi.services.upload_client import FileUploadClient

__all__ = ["StructuredGenerationClient", "FileUploadClient"]
