"""Room type service."""

from ..core.transport import Transport
from ..schemas.common import Relation
from ..schemas.room_type import ListRoomTypesQuery, RoomType
from .attachments import Attachment, attachment_for
from .base import EntityRef, ResourceService, entity_id


class RoomTypeService(ResourceService[RoomType]):
    """Service for the room types of one accommodation, ordered within it."""

    model = RoomType
    query_model = ListRoomTypesQuery
    orderable = True

    def __init__(self, transport: Transport, accommodation: EntityRef):
        self.accommodation_id = entity_id(accommodation)
        super().__init__(transport, f"accommodations/{self.accommodation_id}/roomTypes")

    def content(self, room_type: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(room_type), Relation.CONTENT)

    def images(self, room_type: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(room_type), Relation.IMAGES)
