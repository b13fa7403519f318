"""Blog post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from orchard.schemas.fields import Checkbox, OptionalCheckbox


class PostCreate(BaseModel):
    """Write a new post."""

    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)
    published: Checkbox = False


class PostUpdate(BaseModel):
    """Update a post."""

    title: str | None = Field(None, min_length=1, max_length=255)
    body: str | None = Field(None, min_length=1)
    tags: list[str] | None = None
    published: OptionalCheckbox = None


class PostResponse(BaseModel):
    """Post response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    body: str
    tags: list[str]
    published: bool
    views: int
    created_at: datetime
    updated_at: datetime
