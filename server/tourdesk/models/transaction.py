"""Financial transaction record definition."""

from dataclasses import dataclass
import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from .base import Record


class TransactionType(str, Enum):
    """Direction of money flow."""
    INCOME = "income"
    EXPENSE = "expense"


# Suggested categories offered by the front end; category stays free-form.
INCOME_CATEGORIES = (
    "tour-bookings",
    "additional-services",
    "merchandise",
    "tips",
    "other-income",
)

EXPENSE_CATEGORIES = (
    "transportation",
    "accommodation",
    "food",
    "equipment",
    "marketing",
    "insurance",
    "staff-wages",
    "maintenance",
    "other-expenses",
)


@dataclass(frozen=True)
class Transaction(Record):
    """
    Income or expense entry.

    ``tour_id`` is a weak reference to a tour; see ``Tourist``.
    """

    type: TransactionType
    category: str
    description: str
    amount: Decimal
    date: datetime.date
    tour_id: Optional[str] = None
