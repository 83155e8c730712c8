"""File-related Pydantic schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, PartialUpdate


class UpdateFileRequest(PartialUpdate):
    """Request schema for renaming or re-categorizing an uploaded file."""

    original_name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=64)


class StoredFile(CamelModel):
    """Uploaded file metadata response schema."""

    id: str
    filename: str = Field(..., description="Opaque stored name")
    original_name: str = Field(..., description="Name supplied by the uploader")
    file_type: str = Field(..., description="MIME type")
    file_size: int = Field(..., description="Size in bytes")
    category: str
    upload_date: date
    created_at: datetime
