"""Export-related Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, Field


class ExportKind(str, Enum):
    """Collections that can be exported."""
    TOURS = "tours"
    TOURISTS = "tourists"
    TRANSACTIONS = "transactions"


class ExportFormat(str, Enum):
    """Document formats the front end offers."""
    PDF = "pdf"
    EXCEL = "excel"
    WORD = "word"


class ExportRequest(BaseModel):
    """Request schema for an export."""

    format: ExportFormat = Field(ExportFormat.PDF, description="Target document format")


class ExportResponse(BaseModel):
    """Metadata describing the export that would be produced."""

    message: str
    filename: str
    count: int = Field(..., ge=0, description="Number of records included")
