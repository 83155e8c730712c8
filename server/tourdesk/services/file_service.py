"""File service for uploaded documents and their stored blobs."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional
from uuid import uuid4

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from ..core.config import settings
from ..core.exceptions import PayloadTooLargeError, ValidationError
from ..core.observability import metrics_collector
from ..core.storage import EntityStore, Repository
from ..models import DEFAULT_FILE_CATEGORY, StoredFile
from .base import EntityService

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class FileService(EntityService[StoredFile]):
    """Service for uploaded file metadata and blobs."""

    resource_type = "file"

    def __init__(
        self,
        store: EntityStore,
        upload_dir: Optional[str] = None,
        max_size_bytes: Optional[int] = None,
    ):
        super().__init__(store)
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.max_size_bytes = max_size_bytes or settings.max_upload_size_bytes

    @property
    def repository(self) -> Repository[StoredFile]:
        return self.store.files

    async def _read_limited(self, upload: UploadFile) -> bytes:
        """Read the upload, refusing anything above the size limit."""
        chunks = []
        size = 0
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if size > self.max_size_bytes:
                logger.warning(
                    "Upload rejected - too large",
                    extra={"original_name": upload.filename, "max_size_bytes": self.max_size_bytes}
                )
                raise PayloadTooLargeError(max_size_bytes=self.max_size_bytes)
            chunks.append(chunk)
        return b"".join(chunks)

    def _write_blob(self, stored_name: str, content: bytes) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        (self.upload_dir / stored_name).write_bytes(content)

    def _remove_blob(self, stored_name: str) -> None:
        (self.upload_dir / stored_name).unlink(missing_ok=True)

    async def register_upload(
        self,
        upload: Optional[UploadFile],
        category: Optional[str] = None,
    ) -> StoredFile:
        """
        Persist an uploaded blob and record its metadata.

        Args:
            upload: Multipart file part, or None if the client sent none
            category: Optional category; defaults to "other"

        Returns:
            Stored file metadata

        Raises:
            ValidationError: If no file was uploaded
            PayloadTooLargeError: If the file exceeds the configured limit
        """
        if upload is None or not upload.filename:
            raise ValidationError(detail="No file uploaded")

        content = await self._read_limited(upload)
        stored_name = uuid4().hex
        await run_in_threadpool(self._write_blob, stored_name, content)

        record = self.repository.create({
            "filename": stored_name,
            "original_name": upload.filename,
            "file_type": upload.content_type or "application/octet-stream",
            "file_size": len(content),
            "category": category or DEFAULT_FILE_CATEGORY,
            "upload_date": date.today(),
        })

        metrics_collector.record_created(self.resource_type)
        metrics_collector.record_upload(len(content))

        logger.info(
            "File uploaded successfully",
            extra={
                "record_id": record.id,
                "original_name": record.original_name,
                "file_size": record.file_size,
                "category": record.category,
            }
        )
        return record

    async def delete_with_blob(self, record_id: str) -> StoredFile:
        """Delete the metadata record and its blob, if the blob still exists."""
        record = self.delete_or_raise(record_id)
        await run_in_threadpool(self._remove_blob, record.filename)
        return record
