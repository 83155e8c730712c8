"""Models module exporting all stored record types."""

from .base import IMMUTABLE_FIELDS, Record
from .file import DEFAULT_FILE_CATEGORY, FILE_CATEGORIES, StoredFile
from .tour import Tour, TourStatus
from .tourist import Tourist, TouristStatus
from .transaction import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    Transaction,
    TransactionType,
)

__all__ = [
    # Base
    "Record",
    "IMMUTABLE_FIELDS",

    # Tours and bookings
    "Tour",
    "TourStatus",
    "Tourist",
    "TouristStatus",

    # Finances
    "Transaction",
    "TransactionType",
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",

    # Files
    "StoredFile",
    "FILE_CATEGORIES",
    "DEFAULT_FILE_CATEGORY",
]
