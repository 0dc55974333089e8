"""API key Pydantic schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import Entity


class ApiKey(Entity):
    """API key response schema. The secret itself is only returned on creation."""

    name: str = Field(..., description="Key name")
    abilities: List[str] = Field(default_factory=list, description="Granted abilities")
    last_used_at: Optional[datetime] = Field(None, description="Last time the key was used")


class CreateApiKeyRequest(BaseModel):
    """Request schema for creating an API key."""

    name: str = Field(..., min_length=1, max_length=255, description="Key name")
    abilities: Optional[List[str]] = None


class UpdateApiKeyRequest(BaseModel):
    """Request schema for updating an API key."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    abilities: Optional[List[str]] = None


class CreateApiKeyResponse(BaseModel):
    """A newly created key together with its plain-text secret."""

    model_config = ConfigDict(populate_by_name=True)

    plain_text_token: str = Field(..., alias="plainTextToken")
    access_token: ApiKey = Field(..., alias="accessToken")
