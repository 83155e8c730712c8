"""Service layer package."""

from .base import EntityService
from .dashboard_service import DashboardService
from .export_service import ExportService
from .file_service import FileService
from .tour_service import TourService
from .tourist_service import TouristService
from .transaction_service import TransactionService

__all__ = [
    "DashboardService",
    "EntityService",
    "ExportService",
    "FileService",
    "TourService",
    "TouristService",
    "TransactionService",
]
