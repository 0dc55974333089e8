"""Holiday-related Pydantic schemas."""

from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, Field

from .common import Entity, EntityType, Relation, ReorderCommand, SortableQuery
from .fields import FieldData


class Holiday(Entity):
    """Holiday response schema."""

    entity_type: ClassVar[EntityType] = EntityType.HOLIDAY
    relations: ClassVar[FrozenSet[Relation]] = frozenset({Relation.CATEGORIES, Relation.CONTENT})

    name: str = Field(..., description="Holiday name")
    code: str = Field(..., description="Holiday code")
    introduction: Optional[str] = Field(None, description="Short introduction")
    description: Optional[str] = Field(None, description="Holiday description")
    published: bool = Field(False, description="Publishing status")
    ordering: int = Field(0, description="Manual rank among holidays")
    fields: FieldData = Field(default_factory=dict, description="Custom field values")


class CreateHolidayRequest(BaseModel):
    """Request schema for creating a holiday."""

    name: str = Field(..., min_length=1, max_length=255, description="Holiday name")
    code: str = Field(..., min_length=1, max_length=255, description="Holiday code")
    introduction: Optional[str] = Field(None, description="Short introduction")
    description: Optional[str] = Field(None, description="Holiday description")
    rank: Optional[int] = Field(None, description="Initial rank")
    published: Optional[bool] = Field(None, description="Publishing status")


class UpdateHolidayRequest(BaseModel):
    """Request schema for updating a holiday."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    code: Optional[str] = Field(None, min_length=1, max_length=255)
    introduction: Optional[str] = None
    description: Optional[str] = None
    rank: Optional[int] = None
    published: Optional[bool] = None
    ordering: Optional[ReorderCommand] = None


class HolidayListQuery(SortableQuery):
    """Filters for listing holidays."""

    sort: Optional[Literal["id", "name", "code", "ordering", "created_at", "updated_at"]] = None
    name: Optional[str] = Field(None, description="Filter holidays by name")
    code: Optional[str] = Field(None, description="Filter holidays by code")
    search: Optional[str] = Field(None, description="Free-text search query")
    published: Optional[bool] = Field(None, description="Filter by publishing status")


class HolidayVersion(Entity):
    """
    A version of a holiday's content and itinerary.

    Versions are ordered within their holiday and own its departures.
    """

    entity_type: ClassVar[EntityType] = EntityType.HOLIDAY_VERSION
    relations: ClassVar[FrozenSet[Relation]] = frozenset({Relation.CATEGORIES, Relation.LOCATIONS})

    holiday_id: str = Field(..., description="Owning holiday")
    name: str = Field(..., description="Version name")
    code: str = Field(..., description="Version code")
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: bool = False
    ordering: int = Field(0, description="Rank within the holiday")
    duration: Optional[int] = Field(None, ge=0, description="Length in days")
    map_id: Optional[str] = None
    fields: FieldData = Field(default_factory=dict, description="Custom field values")


class CreateHolidayVersionRequest(CreateHolidayRequest):
    """Request schema for creating a holiday version."""

    duration: Optional[int] = Field(None, ge=0)
    map_id: Optional[str] = None


class UpdateHolidayVersionRequest(UpdateHolidayRequest):
    """Request schema for updating a holiday version."""

    duration: Optional[int] = Field(None, ge=0)
    map_id: Optional[str] = None
