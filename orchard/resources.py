"""Owned resource types and the rules the generic controller applies to them."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel

from orchard.models.fruit import Fruit
from orchard.models.item import Item
from orchard.models.post import Post
from orchard.schemas.fruit import FruitCreate, FruitResponse, FruitUpdate
from orchard.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from orchard.schemas.post import PostCreate, PostResponse, PostUpdate


class ListScope(str, Enum):
    """Which rows a resource's index returns."""

    OWNED = "owned"  # the caller's owned-set
    GLOBAL = "global"  # every row, narrowed by available_field


@dataclass(frozen=True)
class ResourceDefinition:
    """Describes one owned resource type."""

    name: str
    label: str
    model: type
    owned_attr: str  # User relationship holding the owned-set
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    mutable_fields: frozenset[str]
    checkbox_fields: frozenset[str] = field(default_factory=frozenset)
    search_fields: tuple[str, ...] = ()
    category_field: str | None = None
    scope: ListScope = ListScope.OWNED
    available_field: str | None = None
    counts_views: bool = False

    @property
    def plural(self) -> str:
        return f"{self.name}s"


FRUITS = ResourceDefinition(
    name="fruit",
    label="Fruit",
    model=Fruit,
    owned_attr="fruits",
    create_schema=FruitCreate,
    update_schema=FruitUpdate,
    response_schema=FruitResponse,
    mutable_fields=frozenset({"name", "color", "ready_to_eat"}),
    checkbox_fields=frozenset({"ready_to_eat"}),
    search_fields=("name", "color"),
)

ITEMS = ResourceDefinition(
    name="item",
    label="Item",
    model=Item,
    owned_attr="items",
    create_schema=ItemCreate,
    update_schema=ItemUpdate,
    response_schema=ItemResponse,
    mutable_fields=frozenset(
        {"title", "price", "description", "category", "condition", "image_urls", "is_available"}
    ),
    checkbox_fields=frozenset({"is_available"}),
    search_fields=("title", "description"),
    category_field="category",
    scope=ListScope.GLOBAL,
    available_field="is_available",
)

POSTS = ResourceDefinition(
    name="post",
    label="Post",
    model=Post,
    owned_attr="posts",
    create_schema=PostCreate,
    update_schema=PostUpdate,
    response_schema=PostResponse,
    mutable_fields=frozenset({"title", "body", "tags", "published"}),
    checkbox_fields=frozenset({"published"}),
    search_fields=("title", "body"),
    counts_views=True,
)
