"""Location service."""

from typing import List, Optional, Union

from ..core.transport import Transport
from ..helpers import nest
from ..schemas.common import EntityType, Owner, Relation
from ..schemas.location import ListLocationsQuery, Location
from .attachments import Attachment, attachment_for
from .base import EntityRef, ResourceService


class LocationService(ResourceService[Location]):
    """Service for locations. Locations are ordered among siblings and form a tree."""

    model = Location
    query_model = ListLocationsQuery
    orderable = True

    def __init__(self, transport: Transport):
        super().__init__(transport, "locations")

    async def tree(
        self, query: Optional[ListLocationsQuery] = None, strict: bool = False
    ) -> List[Location]:
        """List a page of locations and nest it into a forest."""
        page = await self.list(query)
        return nest(page.data, strict=strict)

    def attached(self, type: Union[EntityType, str], owner_id: str) -> Attachment:
        """Locations attached to one owner entity."""
        return attachment_for(self.transport, Owner(EntityType(type), owner_id), Relation.LOCATIONS)

    def images(self, location: EntityRef) -> Attachment:
        """Images attached to a location."""
        return attachment_for(self.transport, self.owner(location), Relation.IMAGES)
