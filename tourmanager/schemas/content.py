"""Content item Pydantic schemas."""

from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, Field

from .category import Category
from .common import Entity, EntityType, Relation, ReorderCommand, SortableQuery


class ContentItem(Entity):
    """Reusable content block, scoped by the type of entity it describes."""

    entity_type: ClassVar[EntityType] = EntityType.CONTENT
    relations: ClassVar[FrozenSet[Relation]] = frozenset({Relation.IMAGES})

    type: EntityType = Field(..., description="Type of entity this content describes")
    title: str = Field(..., description="Content title")
    content: str = Field("", description="Content body")
    ordering: int = Field(0, description="Manual rank")
    published: bool = Field(False, description="Publishing status")
    alias: Optional[str] = Field(None, description="Alias used to reference the item")
    category: Optional[Category] = Field(None, description="Content category")


class CreateContentItemRequest(BaseModel):
    """Request schema for creating a content item."""

    title: str = Field(..., min_length=1, max_length=255, description="Content title")
    content: str = Field(..., description="Content body")
    category_id: str = Field(..., description="Content category ID")
    published: Optional[bool] = None


class UpdateContentItemRequest(BaseModel):
    """Request schema for updating a content item."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    category_id: Optional[str] = None
    published: Optional[bool] = None
    alias: Optional[str] = None
    ordering: Optional[ReorderCommand] = None


class ListContentsQuery(SortableQuery):
    """Filters for listing content items."""

    sort: Optional[Literal["title", "ordering", "created_at", "updated_at"]] = None
    published: Optional[bool] = None
    title: Optional[str] = None
    category: Optional[str] = Field(None, description="Filter by category ID")
    search: Optional[str] = None
