"""Location-related Pydantic schemas."""

from typing import ClassVar, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field

from .category import Category
from .common import Entity, EntityType, Relation, ReorderCommand, SortableQuery
from .fields import FieldData


class Location(Entity):
    """Location response schema. Locations nest through ``parent_id``."""

    entity_type: ClassVar[EntityType] = EntityType.LOCATION
    relations: ClassVar[FrozenSet[Relation]] = frozenset({Relation.IMAGES})

    name: str = Field(..., description="Location name")
    parent_id: Optional[str] = Field(None, description="Parent location ID, None for a root")
    published: bool = Field(False, description="Publishing status")
    description: Optional[str] = Field(None, description="Location description")
    category: Optional[Category] = Field(None, description="Location category")
    ordering: int = Field(0, description="Rank among siblings")
    fields: FieldData = Field(default_factory=dict, description="Custom field values")
    children: List["Location"] = Field(default_factory=list, description="Nested child locations")


class CreateLocationRequest(BaseModel):
    """Request schema for creating a location."""

    name: str = Field(..., min_length=1, max_length=255, description="Location name")
    category_id: str = Field(..., description="Location category ID")
    parent_id: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    fields: Optional[FieldData] = None


class UpdateLocationRequest(BaseModel):
    """Request schema for updating a location."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category_id: Optional[str] = None
    parent_id: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    fields: Optional[FieldData] = None
    ordering: Optional[ReorderCommand] = None


class ListLocationsQuery(SortableQuery):
    """Filters for listing locations."""

    sort: Optional[Literal["name", "parent_id", "ordering"]] = None
    name: Optional[str] = None
    search: Optional[str] = None
    published: Optional[bool] = None
    children: Optional[bool] = Field(None, description="Include each location's children")
    ancestors: Optional[bool] = Field(None, description="Include each location's ancestors")
    parent_id: Optional[str] = Field(None, description="Filter by parent ID")
