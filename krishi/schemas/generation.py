"""Structured generation and upload value objects."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class GenerationRequest(BaseModel):
    """
    A single prompt sent to the generation service.

    Pydantic only enforces field types. Content checks (empty prompt, URL
    shape, schema syntax) happen in the client before anything is sent.
    """

    prompt: str = Field(..., description="Instruction for the generation service")
    response_json_schema: Optional[Any] = Field(
        None, description="JSON Schema the response must follow; None for text"
    )
    file_urls: List[str] = Field(
        default_factory=list, description="Attached file references (URLs)"
    )
    add_context_from_internet: bool = Field(
        False, description="Service may ground its answer in live external data"
    )

    @property
    def is_structured(self) -> bool:
        return self.response_json_schema is not None

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON body expected by the invoke endpoint."""
        return {
            "prompt": self.prompt,
            "add_context_from_internet": self.add_context_from_internet,
            "response_json_schema": self.response_json_schema,
            "file_urls": list(self.file_urls),
        }


class GenerationResponse(BaseModel):
    """Parsed response from the generation service."""

    data: Any
    structured: bool = False


class UploadResult(BaseModel):
    """Result of a successful file upload."""

    url: str
