"""Shared CRUD service logic over a single store repository."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..core.exceptions import NotFoundError
from ..core.observability import metrics_collector
from ..core.storage import EntityStore, Repository
from ..models import Record
from ..schemas.common import CamelModel, PartialUpdate

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class EntityService(ABC, Generic[RecordT]):
    """
    CRUD operations for one entity kind.

    The store reports missing records as ``None``/``False``; this layer turns
    those into ``NotFoundError`` for the HTTP boundary.
    """

    resource_type: str = "resource"

    def __init__(self, store: EntityStore):
        self.store = store

    @property
    @abstractmethod
    def repository(self) -> Repository[RecordT]:
        """Repository holding this service's records."""

    def list_all(self) -> list[RecordT]:
        """Return every record in insertion order."""
        return self.repository.list()

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        """
        Get a record by ID.

        Args:
            record_id: ID to search for

        Returns:
            Record if found, None otherwise
        """
        return self.repository.get(record_id)

    def get_by_id_or_raise(self, record_id: str) -> RecordT:
        """
        Get a record by ID or raise NotFoundError.

        Raises:
            NotFoundError: If no record has this ID
        """
        record = self.get_by_id(record_id)
        if record is None:
            self._raise_not_found(record_id)
        return record

    def create(self, request: CamelModel) -> RecordT:
        """Store a new record from a validated request."""
        record = self.repository.create(request.model_dump())
        metrics_collector.record_created(self.resource_type)

        logger.info(
            f"{self.resource_type.capitalize()} created successfully",
            extra={"resource_type": self.resource_type, "record_id": record.id}
        )
        return record

    def update_or_raise(self, record_id: str, request: PartialUpdate) -> RecordT:
        """
        Merge the fields present in ``request`` onto an existing record.

        Raises:
            NotFoundError: If no record has this ID
        """
        changes = request.changes()
        record = self.repository.update(record_id, changes)
        if record is None:
            self._raise_not_found(record_id)

        logger.info(
            f"{self.resource_type.capitalize()} updated successfully",
            extra={
                "resource_type": self.resource_type,
                "record_id": record_id,
                "fields": sorted(changes),
            }
        )
        return record

    def delete_or_raise(self, record_id: str) -> RecordT:
        """
        Delete a record and return what was removed.

        Raises:
            NotFoundError: If no record has this ID
        """
        record = self.get_by_id(record_id)
        if record is None or not self.repository.delete(record_id):
            self._raise_not_found(record_id)

        metrics_collector.record_deleted(self.resource_type)
        logger.info(
            f"{self.resource_type.capitalize()} deleted successfully",
            extra={"resource_type": self.resource_type, "record_id": record_id}
        )
        return record

    def _raise_not_found(self, record_id: str):
        logger.warning(
            f"{self.resource_type.capitalize()} not found",
            extra={"resource_type": self.resource_type, "record_id": record_id}
        )
        raise NotFoundError(
            resource_type=self.resource_type,
            resource_id=record_id
        )
