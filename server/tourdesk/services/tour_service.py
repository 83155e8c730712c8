"""Tour service for business logic operations."""

from ..core.storage import Repository
from ..models import Tour
from .base import EntityService


class TourService(EntityService[Tour]):
    """Service for tour-related operations."""

    resource_type = "tour"

    @property
    def repository(self) -> Repository[Tour]:
        return self.store.tours
