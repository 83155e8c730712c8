"""FastAPI routers package."""

from .export import router as export_router
from .file import router as file_router
from .metrics import router as metrics_router
from .stats import router as stats_router
from .tour import router as tour_router
from .tourist import router as tourist_router
from .transaction import router as transaction_router

__all__ = [
    "export_router",
    "file_router",
    "metrics_router",
    "stats_router",
    "tour_router",
    "tourist_router",
    "transaction_router",
]
