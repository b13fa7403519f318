"""Fruit schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from orchard.schemas.fields import Checkbox, OptionalCheckbox


class FruitCreate(BaseModel):
    """Create a new fruit."""

    name: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., min_length=1, max_length=100)
    ready_to_eat: Checkbox = False


class FruitUpdate(BaseModel):
    """Update a fruit."""

    name: str | None = Field(None, min_length=1, max_length=255)
    color: str | None = Field(None, min_length=1, max_length=100)
    ready_to_eat: OptionalCheckbox = None


class FruitResponse(BaseModel):
    """Fruit response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    name: str
    color: str
    ready_to_eat: bool
    created_at: datetime
    updated_at: datetime
