"""Tourist service for booking records."""

from ..core.storage import Repository
from ..models import Tourist
from .base import EntityService


class TouristService(EntityService[Tourist]):
    """
    Service for tourist-related operations.

    A tourist's ``tour_id`` is stored as given; it is not resolved against the
    tour collection.
    """

    resource_type = "tourist"

    @property
    def repository(self) -> Repository[Tourist]:
        return self.store.tourists

    def list_for_tour(self, tour_id: str) -> list[Tourist]:
        """Return tourists whose booking references ``tour_id``."""
        return [tourist for tourist in self.list_all() if tourist.tour_id == tour_id]
