"""Tour-related Pydantic schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from ..models.tour import TourStatus
from .common import CamelModel, Money, PartialUpdate


class CreateTourRequest(CamelModel):
    """Request schema for creating a tour."""

    name: str = Field(..., min_length=1, max_length=255, description="Tour name")
    description: Optional[str] = Field(None, max_length=2000, description="Tour description")
    location: str = Field(..., min_length=1, max_length=255, description="Where the tour takes place")
    start_date: date = Field(..., description="First day of the tour")
    end_date: date = Field(..., description="Last day of the tour")
    capacity: int = Field(..., gt=0, description="Maximum number of tourists")
    price: Money = Field(..., description="Price per tourist")
    status: TourStatus = Field(TourStatus.ACTIVE, description="Tour status")


class UpdateTourRequest(PartialUpdate):
    """Request schema for partially updating a tour."""

    nullable_fields = frozenset({"description"})

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    capacity: Optional[int] = Field(None, gt=0)
    price: Optional[Money] = None
    status: Optional[TourStatus] = None


class Tour(CamelModel):
    """Tour response schema."""

    id: str = Field(..., description="Unique tour ID")
    name: str = Field(..., description="Tour name")
    description: Optional[str] = Field(None, description="Tour description")
    location: str = Field(..., description="Where the tour takes place")
    start_date: date = Field(..., description="First day of the tour")
    end_date: date = Field(..., description="Last day of the tour")
    capacity: int = Field(..., description="Maximum number of tourists")
    price: Money = Field(..., description="Price per tourist")
    status: TourStatus = Field(..., description="Tour status")
    created_at: datetime = Field(..., description="When the tour was recorded")
