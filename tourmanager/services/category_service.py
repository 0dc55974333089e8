"""Category service."""

from typing import List, Optional, Union

from ..core.transport import Transport
from ..helpers import nest
from ..schemas.category import Category, ListCategoriesQuery
from ..schemas.common import EntityType, Owner, Relation
from .attachments import Attachment, attachment_for
from .base import ResourceService


class CategoryService(ResourceService[Category]):
    """
    Service for the categories of one entity type.

    Categories are ordered among their siblings and form a tree.
    """

    model = Category
    query_model = ListCategoriesQuery
    orderable = True

    def __init__(self, transport: Transport, type: Union[EntityType, str]):
        self.type = EntityType(type)
        super().__init__(transport, f"{self.type.value}/categories")

    async def tree(
        self, query: Optional[ListCategoriesQuery] = None, strict: bool = False
    ) -> List[Category]:
        """
        List a page of categories and nest it into a forest.

        Args:
            query: List query; use a large ``limit`` to get whole trees
            strict: Raise on categories whose parent is not in the page
                instead of treating them as roots

        Returns:
            Root categories with ``children`` filled in
        """
        page = await self.list(query)
        return nest(page.data, strict=strict)

    def attached(self, owner_id: str) -> Attachment:
        """Categories of this type attached to one owner entity."""
        return attachment_for(self.transport, Owner(self.type, owner_id), Relation.CATEGORIES)
