"""
YouMDB Record Store — one client contract over interchangeable backends.

Each record kind (creators, videos, reviews, suggestions) is a ``Collection``
exposing get-all, get-by-id, insert, update, upsert-by-conflict-key and
predicate queries (``equals`` / ``icontains``). Backends implement the small
``_``-prefixed hooks; validation, id/timestamp stamping and field checks live
here so every backend behaves the same.

There is no cache: every call goes to the backend.
"""
from __future__ import annotations

import enum
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import ValidationError

from youmdb.core.errors import InvalidArgument
from youmdb.schemas.schemas import Creator, Record, Review, Suggestion, Video

R = TypeVar("R", bound=Record)

_IMMUTABLE_FIELDS = {"id", "created_at"}


class Op(str, enum.Enum):
    EQUALS = "equals"
    ICONTAINS = "icontains"


@dataclass(frozen=True)
class Predicate:
    field: str
    op: Op
    value: Any

    def matches(self, doc: Dict[str, Any]) -> bool:
        current = doc.get(self.field)
        if self.op is Op.EQUALS:
            return _plain(current) == _plain(self.value)
        if current is None:
            return False
        return str(self.value).lower() in str(current).lower()


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, enum.Enum) else value


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex


class Collection(ABC, Generic[R]):
    """Client for one record collection."""

    # Whether ``icontains`` is evaluated by the backend rather than in Python
    supports_substring_push: bool = False

    def __init__(self, name: str, record_type: Type[R]):
        self.name = name
        self.record_type = record_type

    # ── Public contract ──────────────────────────────────────────────────

    async def get_all(self) -> List[R]:
        return await self._fetch([])

    async def get_by_id(self, record_id: str) -> Optional[R]:
        """Return the record, or ``None`` when no record has this id."""
        return await self._get(record_id)

    async def where(self, field: str, op: Op | str, value: Any) -> List[R]:
        try:
            op = Op(op)
        except ValueError:
            raise InvalidArgument(f"Unknown operator '{op}' for {self.name}")
        return await self.find(Predicate(field, op, value))

    async def find(self, *predicates: Predicate) -> List[R]:
        for predicate in predicates:
            self._check_field(predicate.field)
        return await self._fetch(list(predicates))

    async def insert(self, data: Dict[str, Any]) -> R:
        now = utcnow()
        doc = {**data, "id": data.get("id") or new_id(), "created_at": now, "updated_at": now}
        record = self._validate(doc)
        return await self._insert(_dump(record))

    async def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[R]:
        """Apply ``changes`` to one record; ``None`` when the id is unknown."""
        for field in changes:
            self._check_field(field)
        clean = {k: _plain(v) for k, v in changes.items() if k not in _IMMUTABLE_FIELDS}
        clean["updated_at"] = utcnow()
        return await self._update(record_id, clean)

    async def upsert(self, data: Dict[str, Any], conflict_key: str = "id") -> R:
        """Insert ``data`` or update the record sharing its ``conflict_key`` value."""
        self._check_field(conflict_key)
        key_value = data.get(conflict_key)
        if key_value is not None:
            matches = await self._fetch([Predicate(conflict_key, Op.EQUALS, key_value)])
            if matches:
                existing = matches[0]
                merged = {**_dump(existing), **data}
                self._validate({**merged, "updated_at": utcnow()})
                updated = await self.update(existing.id, data)
                if updated is not None:
                    return updated
        return await self.insert(data)

    # ── Backend hooks ────────────────────────────────────────────────────

    @abstractmethod
    async def _fetch(self, predicates: List[Predicate]) -> List[R]:
        """Records matching every predicate (all records for an empty list)."""

    @abstractmethod
    async def _get(self, record_id: str) -> Optional[R]:
        ...

    @abstractmethod
    async def _insert(self, doc: Dict[str, Any]) -> R:
        ...

    @abstractmethod
    async def _update(self, record_id: str, changes: Dict[str, Any]) -> Optional[R]:
        ...

    # ── Helpers ──────────────────────────────────────────────────────────

    def _check_field(self, field: str) -> None:
        if field not in self.record_type.model_fields:
            raise InvalidArgument(f"Unknown field '{field}' for {self.name}")

    def _validate(self, doc: Dict[str, Any]) -> R:
        try:
            return self.record_type.model_validate(doc)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid {self.name} record: {e}") from e


def _dump(record: Record) -> Dict[str, Any]:
    return {k: _plain(v) for k, v in record.model_dump().items()}


class RecordStore(ABC):
    """Handle on all four collections of one backend."""

    backend: str = ""

    creators: Collection[Creator]
    videos: Collection[Video]
    reviews: Collection[Review]
    suggestions: Collection[Suggestion]

    async def startup(self) -> None:
        """Prepare the backend (tables, connections)."""

    async def shutdown(self) -> None:
        """Release backend resources."""
