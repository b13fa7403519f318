"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from orchard.database import Base
from orchard.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lower-cased
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)

    # Owned-sets: set collections, so adding a member twice is a no-op
    fruits = relationship(
        "Fruit", secondary="user_fruits", back_populates="holders", collection_class=set
    )
    items = relationship(
        "Item", secondary="user_items", back_populates="holders", collection_class=set
    )
    posts = relationship(
        "Post", secondary="user_posts", back_populates="holders", collection_class=set
    )
