"""SQLAlchemy models."""

from orchard.models.fruit import Fruit, user_fruits
from orchard.models.item import Item, user_items
from orchard.models.post import Post, user_posts
from orchard.models.user import User

__all__ = [
    "User",
    "Fruit",
    "Item",
    "Post",
    "user_fruits",
    "user_items",
    "user_posts",
]
