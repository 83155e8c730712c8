"""Tourist router for booking records."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.storage import EntityStore, get_store
from ..schemas.common import MessageResponse
from ..schemas.tourist import CreateTouristRequest, Tourist, UpdateTouristRequest
from ..services.tourist_service import TouristService

router = APIRouter(prefix="/api/tourists", tags=["tourists"])

STORE_DEPENDENCY = Depends(get_store)


@router.get("", response_model=list[Tourist])
async def list_tourists(store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """List all tourists in registration order."""
    tourists = TouristService(store).list_all()
    return JSONResponse(
        status_code=200,
        content=[Tourist.model_validate(tourist).to_payload() for tourist in tourists]
    )


@router.get("/{tourist_id}", response_model=Tourist)
async def get_tourist(tourist_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    tourist = TouristService(store).get_by_id_or_raise(tourist_id)
    return JSONResponse(status_code=200, content=Tourist.model_validate(tourist).to_payload())


@router.post("", response_model=Tourist, status_code=201)
async def create_tourist(
    request: CreateTouristRequest,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    """
    Register a tourist.

    ``tourId`` is stored as given, even if no such tour exists.
    """
    tourist = TouristService(store).create(request)
    return JSONResponse(status_code=201, content=Tourist.model_validate(tourist).to_payload())


@router.put("/{tourist_id}", response_model=Tourist)
async def update_tourist(
    tourist_id: str,
    request: UpdateTouristRequest,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    tourist = TouristService(store).update_or_raise(tourist_id, request)
    return JSONResponse(status_code=200, content=Tourist.model_validate(tourist).to_payload())


@router.delete("/{tourist_id}", response_model=MessageResponse)
async def delete_tourist(tourist_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    TouristService(store).delete_or_raise(tourist_id)
    return JSONResponse(
        status_code=200,
        content=MessageResponse(message="Tourist deleted successfully").model_dump()
    )
