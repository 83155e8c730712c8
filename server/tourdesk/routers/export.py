"""Export router returning export metadata."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.storage import EntityStore, get_store
from ..schemas.export import ExportKind, ExportRequest, ExportResponse
from ..services.export_service import ExportService

router = APIRouter(prefix="/api/export", tags=["export"])

STORE_DEPENDENCY = Depends(get_store)


@router.post("/{kind}", response_model=ExportResponse)
async def export_collection(
    kind: ExportKind,
    request: ExportRequest,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    """
    Export tours, tourists or transactions.

    Only the export's metadata is returned; no document is generated.
    """
    response_data = ExportService(store).export(kind, request.format)
    return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))
