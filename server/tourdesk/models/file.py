"""Uploaded file metadata record definition."""

from dataclasses import dataclass
from datetime import date

from .base import Record

DEFAULT_FILE_CATEGORY = "other"

FILE_CATEGORIES = ("documents", "images", "reports", "contracts", DEFAULT_FILE_CATEGORY)


@dataclass(frozen=True)
class StoredFile(Record):
    """Metadata for an uploaded blob; ``filename`` is the opaque stored name."""

    filename: str
    original_name: str
    file_type: str
    file_size: int
    upload_date: date
    category: str = DEFAULT_FILE_CATEGORY
