"""Accommodation service."""

from ..core.transport import Transport
from ..schemas.accommodation import Accommodation, ListAccommodationsQuery
from .base import EntityRef, ResourceService
from .room_type_service import RoomTypeService


class AccommodationService(ResourceService[Accommodation]):
    """Service for accommodation operations."""

    model = Accommodation
    query_model = ListAccommodationsQuery

    def __init__(self, transport: Transport):
        super().__init__(transport, "accommodations")

    def room_types(self, accommodation: EntityRef) -> RoomTypeService:
        """Room types of an accommodation."""
        return RoomTypeService(self.transport, accommodation)
