"""Image Pydantic schemas.

Uploading image files is not supported by this client; images can be listed,
fetched, updated, linked and deleted.
"""

from typing import ClassVar, List, Literal, Optional

from pydantic import BaseModel, Field

from .category import Category
from .common import Entity, EntityType, SortableQuery


class ImageDimensions(BaseModel):
    width: int
    height: int


class Point(BaseModel):
    x: float
    y: float


class Image(Entity):
    """Image response schema."""

    entity_type: ClassVar[EntityType] = EntityType.IMAGE

    title: str = Field(..., description="Image title")
    published: bool = Field(False, description="Publishing status")
    content: Optional[str] = Field(None, description="Caption or description")
    dimensions: Optional[ImageDimensions] = None
    focus: Optional[Point] = Field(None, description="Focal point used when cropping")
    file_path: Optional[str] = None
    file_size: Optional[str] = None
    category: Optional[Category] = None
    tags: List[str] = Field(default_factory=list)
    ordering: Optional[int] = Field(None, description="Position within an attached gallery")
    thumbnail: Optional[str] = Field(None, description="Thumbnail URL")
    original: Optional[str] = Field(None, description="Original file URL")


class UpdateImageRequest(BaseModel):
    """Request schema for updating image metadata."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    published: Optional[bool] = None
    focus_x: Optional[float] = None
    focus_y: Optional[float] = None
    category_id: Optional[str] = None
    tags: Optional[List[str]] = None


class ImageLinkParams(BaseModel):
    """Transformations applied to a generated image link."""

    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)
    quality: Optional[int] = Field(None, ge=1, le=100)
    blur: Optional[int] = Field(None, ge=0)
    auto_optimize: Optional[Literal["low", "medium", "high"]] = None
    hue: Optional[int] = None
    saturation: Optional[int] = None
    brightness: Optional[int] = None


class ListImagesQuery(SortableQuery):
    """Filters for listing images."""

    sort: Optional[Literal["ordering", "title", "id", "created_at", "updated_at"]] = None
    search: Optional[str] = None
    category: Optional[str] = Field(None, description="Filter by category ID")
