"""Base record shared by every stored entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Record:
    """
    Fields the store assigns on insertion.

    Both are immutable for the lifetime of the record; updates never touch them.
    """

    id: str
    created_at: datetime


IMMUTABLE_FIELDS = frozenset({"id", "created_at"})
