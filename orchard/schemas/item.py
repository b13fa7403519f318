"""Marketplace item schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from orchard.schemas.fields import Checkbox, OptionalCheckbox


class ItemCreate(BaseModel):
    """List a new item for sale."""

    title: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    description: str | None = Field(None, max_length=5000)
    category: str | None = Field(None, max_length=100)
    condition: str | None = Field(None, max_length=50)
    image_urls: list[str] = Field(default_factory=list)
    is_available: Checkbox = True


class ItemUpdate(BaseModel):
    """Update an item."""

    title: str | None = Field(None, min_length=1, max_length=255)
    price: float | None = Field(None, ge=0, allow_inf_nan=False)
    description: str | None = Field(None, max_length=5000)
    category: str | None = Field(None, max_length=100)
    condition: str | None = Field(None, max_length=50)
    image_urls: list[str] | None = None
    is_available: OptionalCheckbox = None


class ItemResponse(BaseModel):
    """Item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    price: float
    description: str | None
    category: str | None
    condition: str | None
    image_urls: list[str]
    is_available: bool
    created_at: datetime
    updated_at: datetime
