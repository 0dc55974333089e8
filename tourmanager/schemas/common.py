"""Common Pydantic schemas shared by every resource."""

from datetime import datetime
from enum import Enum
from typing import ClassVar, FrozenSet, Generic, List, Literal, NamedTuple, Optional, Set, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EntityType(str, Enum):
    """Resource type tags used to scope typed collections and attachments."""

    HOLIDAY = "holiday"
    HOLIDAY_VERSION = "holiday_version"
    DEPARTURE = "departure"
    CONTENT = "content"
    EXTRA = "extra"
    LOCATION = "location"
    ROOM_TYPE = "room_type"
    ACCOMMODATION = "accommodation"
    IMAGE = "image"
    CATEGORY = "category"
    ORGANIZATION = "organization"


class Relation(str, Enum):
    """Target collections that can be attached to an owner entity."""

    CATEGORIES = "categories"
    CONTENT = "content"
    IMAGES = "images"
    LOCATIONS = "locations"
    EXTRAS = "extras"


class Owner(NamedTuple):
    """The entity an attachment hangs off."""

    type: EntityType
    id: str


class LifecycleState(str, Enum):
    """Soft-delete state of an entity as last seen by this client."""

    ACTIVE = "active"
    TRASHED = "trashed"


class Entity(BaseModel):
    """
    Base schema for server-managed records.

    Timestamps are parsed into ``datetime`` when the model is validated.
    Keys the schema does not declare are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    #: Type tag used when this entity owns attachments.
    entity_type: ClassVar[Optional[EntityType]] = None
    #: Relations this entity can own.
    relations: ClassVar[FrozenSet[Relation]] = frozenset()

    id: str = Field(..., frozen=True, description="Server-assigned identifier")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    deleted_at: Optional[datetime] = Field(None, description="Soft-delete marker")

    @property
    def state(self) -> LifecycleState:
        return LifecycleState.TRASHED if self.deleted_at is not None else LifecycleState.ACTIVE

    @property
    def trashed(self) -> bool:
        return self.deleted_at is not None

    @property
    def owner(self) -> Owner:
        """This entity as an attachment owner."""
        if self.entity_type is None:
            raise TypeError(f"{type(self).__name__} cannot own attachments")
        return Owner(self.entity_type, self.id)


EntityT = TypeVar("EntityT", bound=BaseModel)


class Paginated(BaseModel, Generic[EntityT]):
    """
    A page of results.

    ``from``/``to`` are the 1-indexed inclusive bounds of ``data`` within the
    whole result set and are absent for an empty page.
    """

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(..., ge=0, description="Total number of results")
    current_page: int = Field(..., ge=1, description="Current page number")
    last_page: int = Field(..., ge=1, description="Total number of pages")
    from_: Optional[int] = Field(None, alias="from", ge=1, description="Index of first item in data")
    to: Optional[int] = Field(None, ge=1, description="Index of last item in data")
    data: List[EntityT] = Field(..., description="Page of results")

    @model_validator(mode="after")
    def check_bounds(self) -> "Paginated[EntityT]":
        """Check the envelope invariants of a non-empty page."""
        if not self.data:
            return self
        if self.from_ is None or self.to is None:
            raise ValueError("non-empty page must report 'from' and 'to'")
        if self.to - self.from_ + 1 != len(self.data):
            raise ValueError(
                f"page bounds {self.from_}..{self.to} do not match {len(self.data)} items"
            )
        if self.current_page > self.last_page:
            raise ValueError(
                f"current_page {self.current_page} exceeds last_page {self.last_page}"
            )
        return self

    @property
    def has_more(self) -> bool:
        return self.current_page < self.last_page


class PaginatedQuery(BaseModel):
    """Paging and trash filter parameters accepted by every list endpoint."""

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    page: Optional[int] = Field(None, ge=1, description="Page number (1-indexed)")
    limit: Optional[int] = Field(None, gt=0, description="Page size")
    trash: Optional[bool] = Field(
        None,
        description="True for trashed rows only, False for active rows only, unset for the server default"
    )


class SortableQuery(PaginatedQuery):
    """List query with a sort field and direction."""

    sort: Optional[str] = Field(None, description="Sort field")
    order: Optional[Literal["asc", "desc"]] = Field(None, description="Sort direction")


class AttachmentResponse(BaseModel):
    """
    Change report of an attach/replace/detach call.

    Each set holds only the ids whose link changed on this call; it is not a
    snapshot of the relation.
    """

    attached: Set[str] = Field(default_factory=set, description="Ids newly linked")
    detached: Set[str] = Field(default_factory=set, description="Ids newly unlinked")
    updated: Set[str] = Field(default_factory=set, description="Ids whose pivot data changed")

    @field_validator("attached", "detached", "updated", mode="before")
    @classmethod
    def coerce_ids(cls, v):
        """
        Accept id lists, or maps keyed by id, with non-string ids.

        A map with positional keys and scalar values is a serialized list;
        any other map is keyed by id, with pivot data as its values.
        """
        if v is None:
            return set()
        if isinstance(v, dict):
            as_list = all(str(k).isdigit() for k in v) and not any(
                isinstance(i, (dict, list)) for i in v.values()
            )
            v = v.values() if as_list else v.keys()
        return {str(i) for i in v}

    @property
    def changed(self) -> bool:
        return bool(self.attached or self.detached or self.updated)


class ReorderDirection(str, Enum):
    """Symbolic moves of the ordering protocol."""

    UP = "up"
    DOWN = "down"
    FIRST = "first"
    LAST = "last"


#: A symbolic move, or an explicit target position.
ReorderCommand = Union[ReorderDirection, Literal["up", "down", "first", "last"], int, str]


class SEOProperties(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    description: Optional[str] = None
