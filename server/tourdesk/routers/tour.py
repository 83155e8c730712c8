"""Tour router for tour management operations."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.storage import EntityStore, get_store
from ..schemas.common import MessageResponse
from ..schemas.tour import CreateTourRequest, Tour, UpdateTourRequest
from ..schemas.tourist import Tourist
from ..services.tour_service import TourService
from ..services.tourist_service import TouristService

router = APIRouter(prefix="/api/tours", tags=["tours"])

# Define dependencies to avoid B008 linting errors
STORE_DEPENDENCY = Depends(get_store)


@router.get("", response_model=list[Tour])
async def list_tours(store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """List all tours in creation order."""
    tours = TourService(store).list_all()
    return JSONResponse(
        status_code=200,
        content=[Tour.model_validate(tour).to_payload() for tour in tours]
    )


@router.get("/{tour_id}", response_model=Tour)
async def get_tour(tour_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """Get a single tour."""
    tour = TourService(store).get_by_id_or_raise(tour_id)
    return JSONResponse(status_code=200, content=Tour.model_validate(tour).to_payload())


@router.get("/{tour_id}/tourists", response_model=list[Tourist])
async def list_tour_tourists(tour_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """
    List tourists whose booking references this tour.

    The reference is a plain lookup, so tourists of a deleted tour are still listed.
    """
    tourists = TouristService(store).list_for_tour(tour_id)
    return JSONResponse(
        status_code=200,
        content=[Tourist.model_validate(tourist).to_payload() for tourist in tourists]
    )


@router.post("", response_model=Tour, status_code=201)
async def create_tour(request: CreateTourRequest, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """Create a new tour."""
    tour = TourService(store).create(request)
    return JSONResponse(status_code=201, content=Tour.model_validate(tour).to_payload())


@router.put("/{tour_id}", response_model=Tour)
async def update_tour(
    tour_id: str,
    request: UpdateTourRequest,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    """Update the supplied fields of a tour."""
    tour = TourService(store).update_or_raise(tour_id, request)
    return JSONResponse(status_code=200, content=Tour.model_validate(tour).to_payload())


@router.delete("/{tour_id}", response_model=MessageResponse)
async def delete_tour(tour_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """
    Delete a tour.

    Tourists and transactions referencing it are left as they are.
    """
    TourService(store).delete_or_raise(tour_id)
    return JSONResponse(
        status_code=200,
        content=MessageResponse(message="Tour deleted successfully").model_dump()
    )
