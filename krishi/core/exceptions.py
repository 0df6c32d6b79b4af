"""Custom exception hierarchy for remote integrations and entity storage."""

from typing import Optional


class IntegrationError(Exception):
    """Base exception for calls to the generation/upload service."""

    pass


class InvalidRequestError(IntegrationError):
    """Raised when a request fails local validation. Never reaches the network."""

    pass


class NetworkError(IntegrationError):
    """Raised on transport failures (DNS, connection refused, reset)."""

    pass


class NetworkTimeoutError(NetworkError):
    """Raised when the request times out."""

    pass


class UpstreamError(IntegrationError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        message = f"Upstream service returned status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedResponseError(IntegrationError):
    """Raised when the service body is not valid JSON or breaks the contract."""

    pass


class RequestCancelledError(IntegrationError):
    """Raised when the caller cancels an in-flight request."""

    pass


class UploadError(MalformedResponseError):
    """Raised when an upload succeeds at HTTP level but yields no file URL."""

    pass


class SchemaError(ValueError):
    """Raised when a JSON Schema is not syntactically valid."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{path}: {message}")


class StoreError(Exception):
    """Base exception for entity store operations."""

    pass


class EntityNotFoundError(StoreError):
    """Raised when a record id does not exist in the store."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")


class InvalidQueryError(StoreError):
    """Raised when an order_by value, criteria or limit is unusable."""

    pass


class InvalidRecordError(StoreError):
    """Raised when an update would leave a record failing its own schema."""

    pass


class LocalizationError(Exception):
    """Raised when a language code is not supported."""

    pass
