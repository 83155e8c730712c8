"""Tourist (booking) record definition."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .base import Record


class TouristStatus(str, Enum):
    """Booking status enumeration."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Tourist(Record):
    """
    A tourist booked (or tentatively booked) on a tour.

    ``tour_id`` is a lookup, not ownership: it is never checked against the
    tour collection and deleting the tour leaves this record untouched.
    """

    name: str
    email: str
    booking_date: date
    phone: Optional[str] = None
    nationality: Optional[str] = None
    tour_id: Optional[str] = None
    status: TouristStatus = TouristStatus.PENDING
