"""In-memory entity store and its FastAPI dependency.

All state lives in process memory and is lost on restart.
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Generic, Iterator, Mapping, Optional, TypeVar
from uuid import uuid4

from ..models import IMMUTABLE_FIELDS, Record, StoredFile, Tour, Tourist, Transaction
from .aggregation import DashboardSnapshot, compute_dashboard_stats

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


def _mutable_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Drop store-assigned keys from a caller payload."""
    return {key: value for key, value in fields.items() if key not in IMMUTABLE_FIELDS}


class Repository(Generic[RecordT]):
    """
    Ordered, lock-guarded collection of one record type.

    Records are kept in insertion order. Missing ids are reported as
    ``None``/``False`` rather than raised, so callers decide how to surface them.
    Identifiers of deleted records are retired and never handed out again.
    """

    def __init__(self, record_type: type[RecordT], kind: str):
        self.record_type = record_type
        self.kind = kind
        self._records: dict[str, RecordT] = {}
        self._retired_ids: set[str] = set()
        self._lock = threading.RLock()

    def _next_id(self) -> str:
        # Caller holds the lock
        while True:
            candidate = str(uuid4())
            if candidate not in self._records and candidate not in self._retired_ids:
                return candidate

    def list(self) -> list[RecordT]:
        """Return all records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def get(self, record_id: str) -> Optional[RecordT]:
        """Return the record with ``record_id`` or None."""
        with self._lock:
            return self._records.get(record_id)

    def create(self, fields: Mapping[str, Any]) -> RecordT:
        """
        Store a new record built from pre-validated ``fields``.

        Args:
            fields: Field values for the record; ``id``/``created_at`` are ignored

        Returns:
            The stored record with its assigned id and creation timestamp
        """
        payload = _mutable_fields(fields)
        with self._lock:
            record = self.record_type(
                id=self._next_id(),
                created_at=datetime.now(timezone.utc),
                **payload,
            )
            self._records[record.id] = record

        logger.debug("Record created", extra={"kind": self.kind, "record_id": record.id})
        return record

    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[RecordT]:
        """
        Merge ``changes`` onto an existing record.

        Fields not present in ``changes`` are preserved; ``id`` and
        ``created_at`` are never changed.

        Returns:
            The merged record, or None if ``record_id`` is unknown
        """
        payload = _mutable_fields(changes)
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = replace(existing, **payload)
            self._records[record_id] = updated

        logger.debug(
            "Record updated",
            extra={"kind": self.kind, "record_id": record_id, "fields": sorted(payload)}
        )
        return updated

    def delete(self, record_id: str) -> bool:
        """Remove a record; return whether one was actually removed."""
        with self._lock:
            if self._records.pop(record_id, None) is None:
                return False
            self._retired_ids.add(record_id)

        logger.debug("Record deleted", extra={"kind": self.kind, "record_id": record_id})
        return True

    def count(self) -> int:
        """Return the number of stored records."""
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        """Drop every record. Cleared ids stay retired."""
        with self._lock:
            self._retired_ids.update(self._records)
            self._records.clear()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.list())


class EntityStore:
    """Owner of the four application collections."""

    def __init__(self):
        self.tours: Repository[Tour] = Repository(Tour, "tour")
        self.tourists: Repository[Tourist] = Repository(Tourist, "tourist")
        self.transactions: Repository[Transaction] = Repository(Transaction, "transaction")
        self.files: Repository[StoredFile] = Repository(StoredFile, "file")

    @property
    def repositories(self) -> tuple[Repository, ...]:
        return (self.tours, self.tourists, self.transactions, self.files)

    def dashboard_stats(self) -> DashboardSnapshot:
        """Recompute dashboard statistics from the current collections."""
        return compute_dashboard_stats(
            self.tours.list(),
            self.tourists.list(),
            self.transactions.list(),
        )

    def clear(self) -> None:
        """Drop all records from every collection."""
        for repository in self.repositories:
            repository.clear()


# Process-wide store instance
store = EntityStore()


def get_store() -> EntityStore:
    """
    Dependency function that returns the entity store.

    Returns:
        EntityStore: The process-wide store
    """
    return store


def init_store() -> None:
    """Log the store's starting state."""
    logger.info(
        "In-memory store ready",
        extra={repository.kind: repository.count() for repository in store.repositories}
    )


def close_store() -> None:
    """Discard all in-memory state on shutdown."""
    store.clear()
