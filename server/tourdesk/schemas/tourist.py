"""Tourist-related Pydantic schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from ..models.tourist import TouristStatus
from .common import CamelModel, PartialUpdate


class CreateTouristRequest(CamelModel):
    """Request schema for registering a tourist."""

    name: str = Field(..., min_length=1, max_length=255, description="Full name")
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$", description="Contact email")
    phone: Optional[str] = Field(None, max_length=64, description="Contact phone")
    nationality: Optional[str] = Field(None, max_length=128, description="Nationality")
    tour_id: Optional[str] = Field(None, description="Tour the tourist is booked on; not checked for existence")
    booking_date: date = Field(..., description="Date the booking was made")
    status: TouristStatus = Field(TouristStatus.PENDING, description="Booking status")


class UpdateTouristRequest(PartialUpdate):
    """Request schema for partially updating a tourist."""

    nullable_fields = frozenset({"phone", "nationality", "tour_id"})

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: Optional[str] = Field(None, max_length=64)
    nationality: Optional[str] = Field(None, max_length=128)
    tour_id: Optional[str] = None
    booking_date: Optional[date] = None
    status: Optional[TouristStatus] = None


class Tourist(CamelModel):
    """Tourist response schema."""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    nationality: Optional[str] = None
    tour_id: Optional[str] = None
    booking_date: date
    status: TouristStatus
    created_at: datetime
