"""Pydantic schemas for API requests and responses."""

from orchard.schemas.auth import (
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from orchard.schemas.fruit import FruitCreate, FruitResponse, FruitUpdate
from orchard.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from orchard.schemas.post import PostCreate, PostResponse, PostUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "AuthResponse",
    "MessageResponse",
    "FruitCreate",
    "FruitUpdate",
    "FruitResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
]
