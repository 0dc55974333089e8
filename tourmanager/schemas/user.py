"""User and organization Pydantic schemas."""

from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field

from .common import Entity, EntityType


class User(Entity):
    """Profile of the API caller."""

    name: str = Field(..., description="User's full name")
    rezkit_id: str = Field(..., description="User's RezKit ID")
    organization_id: str = Field(..., description="User's organization (tour manager) ID")
    email: str = Field(..., description="User email")
    preferences: Optional[dict] = None


class ImagePreset(BaseModel):
    x: int
    y: int
    name: str


class MapPreset(BaseModel):
    thickness: int
    hue: int
    name: str


class DepositDefaults(BaseModel):
    balance_due: int
    percentage: float


class Organization(Entity):
    """Organization (tour manager) schema."""

    entity_type: ClassVar[EntityType] = EntityType.ORGANIZATION

    name: str = Field(..., description="Organization name")
    rezkit_id: str = Field(..., description="Organization's RezKit ID")
    currencies: List[str] = Field(default_factory=list)
    deposit_defaults: Optional[DepositDefaults] = None
    image_settings: List[ImagePreset] = Field(default_factory=list)
    map_settings: List[MapPreset] = Field(default_factory=list)
