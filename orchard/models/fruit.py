"""Fruit model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from orchard.database import Base
from orchard.models.mixins import OwnedMixin, TimestampMixin

user_fruits = Table(
    "user_fruits",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("fruit_id", Integer, ForeignKey("fruits.id", ondelete="CASCADE"), primary_key=True),
)


class Fruit(Base, TimestampMixin, OwnedMixin):
    """Fruit in a user's collection."""

    __tablename__ = "fruits"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    color = Column(String(100), nullable=False)
    ready_to_eat = Column(Boolean, nullable=False, default=False)

    # Relationships
    holders = relationship(
        "User", secondary=user_fruits, back_populates="fruits", collection_class=set
    )
