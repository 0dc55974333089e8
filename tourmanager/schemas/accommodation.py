"""Accommodation-related Pydantic schemas."""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from .common import Entity, EntityType, PaginatedQuery
from .fields import FieldData


class Accommodation(Entity):
    """Accommodation response schema."""

    entity_type: ClassVar[EntityType] = EntityType.ACCOMMODATION

    name: str = Field(..., description="Accommodation name")
    code: str = Field(..., description="Accommodation code")
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: bool = False
    capacity: int = Field(0, ge=0, description="Number of guests")
    fields: FieldData = Field(default_factory=dict, description="Custom field values")


class CreateAccommodationRequest(BaseModel):
    """Request schema for creating an accommodation."""

    name: str = Field(..., min_length=1, max_length=255, description="Accommodation name")
    code: str = Field(..., min_length=1, max_length=255, description="Accommodation code")
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    capacity: Optional[int] = Field(None, ge=0)
    fields: Optional[FieldData] = None


class UpdateAccommodationRequest(BaseModel):
    """Request schema for updating an accommodation."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    code: Optional[str] = Field(None, min_length=1, max_length=255)
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    capacity: Optional[int] = Field(None, ge=0)
    fields: Optional[FieldData] = None


class ListAccommodationsQuery(PaginatedQuery):
    """Filters for listing accommodations."""

    name: Optional[str] = None
    published: Optional[bool] = None
    description: Optional[str] = None
