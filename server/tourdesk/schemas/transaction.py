"""Transaction-related Pydantic schemas."""

import datetime
from typing import Optional

from pydantic import Field

from ..models.transaction import TransactionType
from .common import CamelModel, Money, PartialUpdate


class CreateTransactionRequest(CamelModel):
    """Request schema for recording a transaction."""

    type: TransactionType = Field(..., description="income or expense")
    category: str = Field(..., min_length=1, max_length=128, description="Free-form category")
    description: str = Field(..., min_length=1, max_length=2000, description="What the money was for")
    amount: Money = Field(..., description="Non-negative amount")
    date: datetime.date = Field(..., description="Date of the transaction")
    tour_id: Optional[str] = Field(None, description="Related tour; not checked for existence")


class UpdateTransactionRequest(PartialUpdate):
    """Request schema for partially updating a transaction."""

    nullable_fields = frozenset({"tour_id"})

    type: Optional[TransactionType] = None
    category: Optional[str] = Field(None, min_length=1, max_length=128)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    amount: Optional[Money] = None
    date: Optional[datetime.date] = None
    tour_id: Optional[str] = None


class Transaction(CamelModel):
    """Transaction response schema."""

    id: str
    type: TransactionType
    category: str
    description: str
    amount: Money
    date: datetime.date
    tour_id: Optional[str] = None
    created_at: datetime.datetime


class TransactionCategories(CamelModel):
    """Suggested categories per transaction type."""

    income: list[str]
    expense: list[str]
