"""Extra (optional add-on) Pydantic schemas."""

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from .common import Entity, EntityType, PaginatedQuery, Relation, ReorderCommand, SortableQuery
from .fields import FieldData
from .room_type import Occupancy


class Extra(Entity):
    """Extra response schema."""

    entity_type: ClassVar[EntityType] = EntityType.EXTRA
    relations: ClassVar[FrozenSet[Relation]] = frozenset({Relation.CATEGORIES, Relation.CONTENT, Relation.IMAGES})

    name: str = Field(..., description="Extra name")
    code: str = Field(..., description="Extra code")
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: bool = False
    ordering: int = Field(0, description="Manual rank among extras")
    fields: FieldData = Field(default_factory=dict, description="Custom field values")


class CreateExtraRequest(BaseModel):
    """Request schema for creating an extra."""

    name: str = Field(..., min_length=1, max_length=255, description="Extra name")
    code: str = Field(..., min_length=1, max_length=255, description="Extra code")
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    fields: Optional[FieldData] = None


class UpdateExtraRequest(BaseModel):
    """Request schema for updating an extra."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    code: Optional[str] = Field(None, min_length=1, max_length=255)
    introduction: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None
    fields: Optional[FieldData] = None
    ordering: Optional[ReorderCommand] = None


class ListExtrasQuery(SortableQuery):
    """Filters for listing extras."""

    name: Optional[str] = None
    code: Optional[str] = None
    search: Optional[str] = None
    published: Optional[bool] = None


class ExtraPrice(Entity):
    """Price of an extra for one date range, occupancy band and currency."""

    extra_id: str = Field(..., description="Owning extra")
    start: datetime = Field(..., description="First date the price applies")
    end: datetime = Field(..., description="Last date the price applies")
    occupancy: Occupancy
    currency: str = Field(..., min_length=3, max_length=3, description="ISO 4217 currency code")
    value: float = Field(..., description="Price in ``currency``")


class CreateExtraPriceRequest(BaseModel):
    """Request schema for creating an extra price."""

    start: datetime
    end: datetime
    occupancy: Occupancy
    currency: str = Field(..., min_length=3, max_length=3)
    value: float


class UpdateExtraPriceRequest(BaseModel):
    """Request schema for updating an extra price."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    occupancy: Optional[Occupancy] = None
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    value: Optional[float] = None


class ListExtraPricesQuery(PaginatedQuery):
    """Filters for listing the prices of an extra."""

    before: Optional[datetime] = None
    after: Optional[datetime] = None
    currency: Optional[str] = None
    value: Optional[float] = None
