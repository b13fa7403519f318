"""Marketplace item model."""

from sqlalchemy import JSON, Boolean, Column, Float, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from orchard.database import Base
from orchard.models.mixins import OwnedMixin, TimestampMixin

user_items = Table(
    "user_items",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("item_id", Integer, ForeignKey("items.id", ondelete="CASCADE"), primary_key=True),
)


class Item(Base, TimestampMixin, OwnedMixin):
    """Item listed for sale on the marketplace."""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(String, nullable=True)
    price = Column(Float, nullable=False)
    category = Column(String(100), nullable=True, index=True)
    condition = Column(String(50), nullable=True)  # "new", "used", ...
    image_urls = Column(JSON, nullable=False, default=list)
    is_available = Column(Boolean, nullable=False, default=True, index=True)

    # Relationships
    holders = relationship(
        "User", secondary=user_items, back_populates="items", collection_class=set
    )
