"""Content item service."""

from typing import Any, List, Union

from ..core.transport import Transport
from ..schemas.common import EntityType, Owner, Relation
from ..schemas.content import ContentItem, ListContentsQuery
from .attachments import Attachment, attachment_for
from .base import EntityRef, ResourceService


class ContentService(ResourceService[ContentItem]):
    """Service for the content items of one entity type."""

    model = ContentItem
    query_model = ListContentsQuery
    orderable = True

    def __init__(self, transport: Transport, type: Union[EntityType, str]):
        self.type = EntityType(type)
        super().__init__(transport, f"{self.type.value}/content")

    async def uses(self, item: EntityRef) -> List[Any]:
        """
        Get the entities a content item is attached to.

        The records are returned as decoded JSON; their type depends on the
        owner type.
        """
        return await self.transport.get(f"{self.path(item)}/uses")

    def attached(self, owner_id: str) -> Attachment:
        """Content items of this type attached to one owner entity."""
        return attachment_for(self.transport, Owner(self.type, owner_id), Relation.CONTENT)

    def images(self, item: EntityRef) -> Attachment:
        """Images attached to a content item."""
        return attachment_for(self.transport, self.owner(item), Relation.IMAGES)
