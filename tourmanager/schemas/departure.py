"""Departure-related Pydantic schemas."""

from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field

from .common import Entity, EntityType, Relation, SortableQuery

DepartureRangeType = Literal["fixed", "fixed_duration", "flexible"]


class Departure(Entity):
    """Departure response schema: one dated run of a holiday version."""

    entity_type: ClassVar[EntityType] = EntityType.DEPARTURE
    relations: ClassVar[FrozenSet[Relation]] = frozenset({Relation.CATEGORIES})

    version_id: str = Field(..., description="Holiday version this departure runs")
    start: datetime = Field(..., description="Departure start")
    end: datetime = Field(..., description="Departure end")
    range_type: DepartureRangeType = Field("fixed", description="How start and end are bounded")
    source_id: Optional[str] = Field(None, description="Departure this one was copied from")
    inventory: Dict[str, Any] = Field(default_factory=dict, description="Places and availability")
    elements: List[Dict[str, Any]] = Field(default_factory=list, description="Priced departure elements")


class CreateDepartureRequest(BaseModel):
    """Request schema for creating a departure."""

    version_id: Optional[str] = Field(None, description="Holiday version; set by a version-scoped service")
    range_type: DepartureRangeType
    start: datetime
    end: datetime
    inventory: Optional[Dict[str, Any]] = None


class UpdateDepartureRequest(BaseModel):
    """Request schema for updating a departure. The version cannot change."""

    range_type: Optional[DepartureRangeType] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    inventory: Optional[Dict[str, Any]] = None


class ListDeparturesQuery(SortableQuery):
    """Filters for listing departures."""

    sort: Optional[Literal["id", "created_at", "updated_at", "start", "end"]] = None
    after: Optional[datetime] = Field(None, description="Departures starting after this time")
    before: Optional[datetime] = Field(None, description="Departures starting before this time")
    version: Optional[str] = Field(None, description="Filter by holiday version id")
    holiday: Optional[str] = Field(None, description="Filter by holiday id")
