"""Category-related Pydantic schemas."""

from typing import ClassVar, List, Literal, Optional

from pydantic import BaseModel, Field

from .common import Entity, EntityType, ReorderCommand, SEOProperties, SortableQuery
from .fields import FieldData


class Category(Entity):
    """
    Category response schema.

    Categories are scoped by ``type`` (the kind of entity they classify) and
    form a tree through ``parent_id``. ``children`` is filled either by the
    server (``children=True`` in the list query) or by tree reconstruction.
    """

    entity_type: ClassVar[EntityType] = EntityType.CATEGORY

    type: EntityType = Field(..., description="Type of entity this category classifies")
    name: str = Field(..., description="Category name")
    slug: Optional[str] = Field(None, description="URL-friendly slug")
    parent_id: Optional[str] = Field(None, description="Parent category ID, None for a root")
    published: bool = Field(False, description="Publishing status")
    searchable: bool = Field(False, description="Whether the category is a search facet")
    description: Optional[str] = Field(None, description="Category description")
    ordering: int = Field(0, description="Rank among siblings")
    seo: Optional[SEOProperties] = Field(None, description="Search engine metadata")
    fields: FieldData = Field(default_factory=dict, description="Custom field values")
    children: List["Category"] = Field(default_factory=list, description="Nested child categories")


class CreateCategoryRequest(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=255, description="Category name")
    slug: Optional[str] = Field(None, pattern=r"^[a-z0-9-]+$", description="URL-friendly slug")
    parent_id: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    searchable: Optional[bool] = None
    seo: Optional[SEOProperties] = None
    fields: Optional[FieldData] = None


class UpdateCategoryRequest(BaseModel):
    """Request schema for updating a category."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, pattern=r"^[a-z0-9-]+$")
    parent_id: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    searchable: Optional[bool] = None
    seo: Optional[SEOProperties] = None
    fields: Optional[FieldData] = None
    ordering: Optional[ReorderCommand] = None


class ListCategoriesQuery(SortableQuery):
    """Filters for listing categories."""

    sort: Optional[Literal["name", "parent_id", "ordering"]] = None
    name: Optional[str] = None
    search: Optional[str] = None
    published: Optional[bool] = None
    searchable: Optional[bool] = None
    children: Optional[bool] = Field(None, description="Include each category's children")
    ancestors: Optional[bool] = Field(None, description="Include each category's ancestors")
    parent_id: Optional[str] = Field(None, description="Filter by parent ID")
