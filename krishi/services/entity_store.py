"""Record storage behind a swappable interface."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, Type, TypeVar, Union
from uuid import uuid4

from pydantic import BaseModel, ValidationError

from krishi.core.exceptions import (
    EntityNotFoundError,
    InvalidQueryError,
    InvalidRecordError,
    UpstreamError,
)
from krishi.schemas.entities import (
    CommunityPost,
    Crop,
    DiseaseDetection,
    EntityRecord,
    ExpertTip,
    User,
)
from krishi.services.api_client import CoreAPIClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=EntityRecord)
Payload = Union[BaseModel, Dict[str, Any]]

DEFAULT_ORDER = "-created_date"
READ_ONLY_FIELDS = {"id", "created_date"}


def _payload_dict(data: Payload, partial: bool = False) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=partial)
    return dict(data)


def parse_order_by(order_by: Optional[str], model: Type[BaseModel]) -> Tuple[Optional[str], bool]:
    """
    Split an order_by value into (field, descending).

    "-created_date" sorts newest first, "name" sorts ascending.

    Raises:
        InvalidQueryError: If the field does not exist on the model
    """
    if not order_by:
        return None, False
    descending = order_by.startswith("-")
    field = order_by.lstrip("-+")
    if field not in model.model_fields:
        raise InvalidQueryError(f"Cannot order by unknown field {field!r}")
    return field, descending


def check_limit(limit: Optional[int]) -> None:
    if limit is not None and limit <= 0:
        raise InvalidQueryError(f"Limit must be positive, got {limit}")


def check_criteria(criteria: Dict[str, Any], model: Type[BaseModel]) -> None:
    unknown = [key for key in criteria if key not in model.model_fields]
    if unknown:
        raise InvalidQueryError(f"Cannot filter by unknown field(s): {unknown}")


def matches(record: BaseModel, criteria: Dict[str, Any]) -> bool:
    """
    Equality match on every criteria key.

    A list-valued field matches a scalar criterion when it contains it,
    so {"tags": "wheat"} finds posts tagged wheat.
    """
    for key, expected in criteria.items():
        actual = getattr(record, key)
        if isinstance(actual, list) and not isinstance(expected, list):
            if expected not in actual:
                return False
        elif actual != expected:
            return False
    return True


def matches_text(query: Optional[str], *values: Any) -> bool:
    """
    Case-insensitive substring search over strings and lists of strings.

    A blank query matches everything.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return True
    for value in values:
        texts = value if isinstance(value, list) else [value]
        if any(isinstance(t, str) and needle in t.lower() for t in texts):
            return True
    return False


def sort_records(records: List[ModelT], order_by: Optional[str], model: Type[BaseModel]) -> List[ModelT]:
    """Sort by an order_by value; records with a None value always come last."""
    field, descending = parse_order_by(order_by, model)
    if field is None:
        return list(records)
    present = [r for r in records if getattr(r, field) is not None]
    missing = [r for r in records if getattr(r, field) is None]
    present.sort(key=lambda r: getattr(r, field), reverse=descending)
    return present + missing


class EntityStore(ABC, Generic[ModelT]):
    """
    Storage interface for one record kind.

    Implementations raise EntityNotFoundError for unknown ids,
    InvalidQueryError for unusable order_by values, criteria or limits,
    and InvalidRecordError when an update would break the record.
    """

    def __init__(self, kind: str, model: Type[ModelT]) -> None:
        self.kind = kind
        self.model = model

    @abstractmethod
    async def list(self, order_by: Optional[str] = DEFAULT_ORDER, limit: Optional[int] = None) -> List[ModelT]:
        raise NotImplementedError

    @abstractmethod
    async def filter(
        self,
        criteria: Dict[str, Any],
        order_by: Optional[str] = DEFAULT_ORDER,
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        raise NotImplementedError

    @abstractmethod
    async def get(self, entity_id: str) -> ModelT:
        raise NotImplementedError

    @abstractmethod
    async def create(self, data: Payload, **extra: Any) -> ModelT:
        raise NotImplementedError

    @abstractmethod
    async def update(self, entity_id: str, data: Payload) -> ModelT:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        raise NotImplementedError


class InMemoryEntityStore(EntityStore[ModelT]):
    """Dict-backed store used for development and tests."""

    def __init__(
        self,
        kind: str,
        model: Type[ModelT],
        seed: Optional[Iterable[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(kind, model)
        self._records: Dict[str, ModelT] = {}
        if seed:
            self.seed(seed)

    def seed(self, records: Iterable[Dict[str, Any]]) -> None:
        """Load complete records (id and created_date included) as-is."""
        for raw in records:
            record = self.model.model_validate(raw)
            self._records[record.id] = record
        logger.debug(f"Seeded {len(self._records)} {self.kind} record(s)")

    def __len__(self) -> int:
        return len(self._records)

    async def list(self, order_by: Optional[str] = DEFAULT_ORDER, limit: Optional[int] = None) -> List[ModelT]:
        return await self.filter({}, order_by=order_by, limit=limit)

    async def filter(
        self,
        criteria: Dict[str, Any],
        order_by: Optional[str] = DEFAULT_ORDER,
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        check_limit(limit)
        check_criteria(criteria, self.model)
        found = [r for r in self._records.values() if matches(r, criteria)]
        found = sort_records(found, order_by, self.model)
        return found[:limit] if limit else found

    async def get(self, entity_id: str) -> ModelT:
        try:
            return self._records[entity_id]
        except KeyError:
            raise EntityNotFoundError(self.kind, entity_id) from None

    async def create(self, data: Payload, **extra: Any) -> ModelT:
        payload = {**_payload_dict(data), **extra}
        for field in READ_ONLY_FIELDS:
            payload.pop(field, None)
        record = self.model(
            id=uuid4().hex,
            created_date=datetime.now(timezone.utc),
            **payload,
        )
        self._records[record.id] = record
        logger.info(f"Created {self.kind} {record.id}")
        return record

    async def update(self, entity_id: str, data: Payload) -> ModelT:
        current = await self.get(entity_id)
        changes = _payload_dict(data, partial=True)
        for field in READ_ONLY_FIELDS:
            changes.pop(field, None)
        try:
            record = self.model.model_validate({**current.model_dump(), **changes})
        except ValidationError as e:
            raise InvalidRecordError(f"Invalid update for {self.kind} {entity_id}: {e}") from e
        self._records[entity_id] = record
        logger.info(f"Updated {self.kind} {entity_id}: {sorted(changes)}")
        return record

    async def delete(self, entity_id: str) -> None:
        if self._records.pop(entity_id, None) is None:
            raise EntityNotFoundError(self.kind, entity_id)
        logger.info(f"Deleted {self.kind} {entity_id}")


class RemoteEntityStore(EntityStore[ModelT]):
    """
    Store backed by the service's entity endpoints.

    Records live under ``{prefix}/{collection}``; list and filter pass
    order_by, limit and criteria as query parameters.
    """

    def __init__(
        self,
        kind: str,
        model: Type[ModelT],
        api: CoreAPIClient,
        collection: str,
        prefix: str = "/entities",
    ) -> None:
        super().__init__(kind, model)
        self.api = api
        self.path = f"{prefix.rstrip('/')}/{collection}"

    def _not_found_or_raise(self, exc: UpstreamError, entity_id: str) -> None:
        if exc.status_code == 404:
            raise EntityNotFoundError(self.kind, entity_id) from exc
        raise exc

    async def list(self, order_by: Optional[str] = DEFAULT_ORDER, limit: Optional[int] = None) -> List[ModelT]:
        return await self.filter({}, order_by=order_by, limit=limit)

    async def filter(
        self,
        criteria: Dict[str, Any],
        order_by: Optional[str] = DEFAULT_ORDER,
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        check_limit(limit)
        check_criteria(criteria, self.model)
        parse_order_by(order_by, self.model)

        params: Dict[str, Any] = dict(criteria)
        if order_by:
            params["order_by"] = order_by
        if limit:
            params["limit"] = limit

        rows = await self.api.get(self.path, params=params)
        return [self.model.model_validate(row) for row in rows or []]

    async def get(self, entity_id: str) -> ModelT:
        try:
            row = await self.api.get(f"{self.path}/{entity_id}")
        except UpstreamError as e:
            self._not_found_or_raise(e, entity_id)
        return self.model.model_validate(row)

    async def create(self, data: Payload, **extra: Any) -> ModelT:
        if isinstance(data, BaseModel):
            payload = data.model_dump(mode="json")
        else:
            payload = dict(data)
        payload.update(extra)
        row = await self.api.post(self.path, payload)
        return self.model.model_validate(row)

    async def update(self, entity_id: str, data: Payload) -> ModelT:
        if isinstance(data, BaseModel):
            payload = data.model_dump(mode="json", exclude_unset=True)
        else:
            payload = dict(data)
        try:
            row = await self.api.put(f"{self.path}/{entity_id}", payload)
        except UpstreamError as e:
            self._not_found_or_raise(e, entity_id)
        return self.model.model_validate(row)

    async def delete(self, entity_id: str) -> None:
        try:
            await self.api.delete(f"{self.path}/{entity_id}")
        except UpstreamError as e:
            self._not_found_or_raise(e, entity_id)


@dataclass
class StoreRegistry:
    """One store per record kind."""

    crops: EntityStore[Crop]
    posts: EntityStore[CommunityPost]
    detections: EntityStore[DiseaseDetection]
    tips: EntityStore[ExpertTip]
    users: EntityStore[User]


def build_memory_registry(seed_demo_data: bool = False) -> StoreRegistry:
    """Create in-memory stores, optionally preloaded with demo records."""
    seeds: Dict[str, List[Dict[str, Any]]] = {}
    if seed_demo_data:
        from krishi.services import demo_data

        seeds = demo_data.ALL

    return StoreRegistry(
        crops=InMemoryEntityStore("crop", Crop, seeds.get("crops")),
        posts=InMemoryEntityStore("community_post", CommunityPost, seeds.get("posts")),
        detections=InMemoryEntityStore(
            "disease_detection", DiseaseDetection, seeds.get("detections")
        ),
        tips=InMemoryEntityStore("expert_tip", ExpertTip, seeds.get("tips")),
        users=InMemoryEntityStore("user", User, seeds.get("users")),
    )


def build_remote_registry(api: CoreAPIClient, prefix: str = "/entities") -> StoreRegistry:
    """Create stores that talk to the service's entity endpoints."""
    return StoreRegistry(
        crops=RemoteEntityStore("crop", Crop, api, "crops", prefix),
        posts=RemoteEntityStore("community_post", CommunityPost, api, "community-posts", prefix),
        detections=RemoteEntityStore(
            "disease_detection", DiseaseDetection, api, "disease-detections", prefix
        ),
        tips=RemoteEntityStore("expert_tip", ExpertTip, api, "expert-tips", prefix),
        users=RemoteEntityStore("user", User, api, "users", prefix),
    )
