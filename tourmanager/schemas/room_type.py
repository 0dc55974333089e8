"""Room type Pydantic schemas."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import Entity, EntityType, PaginatedQuery, Relation, ReorderCommand
from .fields import FieldData


class Occupancy(BaseModel):
    """Inclusive guest range."""

    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(..., alias="from", ge=0)
    to: int = Field(..., ge=0)


class RoomType(Entity):
    """Room type response schema. Room types are ordered within their accommodation."""

    entity_type: ClassVar[EntityType] = EntityType.ROOM_TYPE
    relations: ClassVar[FrozenSet[Relation]] = frozenset({Relation.CONTENT, Relation.IMAGES})

    accommodation_id: str = Field(..., description="Owning accommodation")
    name: str = Field(..., description="Room type name")
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: bool = False
    occupancy: Optional[Occupancy] = None
    ordering: int = Field(0, description="Rank within the accommodation")
    fields: FieldData = Field(default_factory=dict, description="Custom field values")


class CreateRoomTypeRequest(BaseModel):
    """Request schema for creating a room type."""

    name: str = Field(..., min_length=1, max_length=255)
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: bool = False
    occupancy: Occupancy
    fields: Optional[FieldData] = None


class UpdateRoomTypeRequest(BaseModel):
    """Request schema for updating a room type."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    occupancy: Optional[Occupancy] = None
    fields: Optional[FieldData] = None
    ordering: Optional[ReorderCommand] = None


class ListRoomTypesQuery(PaginatedQuery):
    """Filters for listing room types."""

    name: Optional[str] = None
    search: Optional[str] = None
    published: Optional[bool] = None
    description: Optional[str] = None
