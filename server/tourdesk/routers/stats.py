"""Dashboard statistics router."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.storage import EntityStore, get_store
from ..schemas.dashboard import DashboardStats
from ..services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/stats", tags=["dashboard"])

STORE_DEPENDENCY = Depends(get_store)


@router.get("", response_model=DashboardStats)
async def get_dashboard_stats(store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """
    Dashboard figures, recomputed from the current data on every request.

    Money values are decimal strings with two fractional digits.
    """
    snapshot = DashboardService(store).get_stats()
    return JSONResponse(status_code=200, content=DashboardStats.model_validate(snapshot).to_payload())
