"""Tour record definition."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from .base import Record


class TourStatus(str, Enum):
    """Tour status enumeration."""
    ACTIVE = "active"
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Tour(Record):
    """Tour offered by the operator."""

    name: str
    location: str
    start_date: date
    end_date: date
    capacity: int
    price: Decimal
    description: Optional[str] = None
    status: TourStatus = TourStatus.ACTIVE
