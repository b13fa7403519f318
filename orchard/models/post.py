"""Blog post model."""

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from orchard.database import Base
from orchard.models.mixins import OwnedMixin, TimestampMixin

user_posts = Table(
    "user_posts",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
)


class Post(Base, TimestampMixin, OwnedMixin):
    """Blog post written by a user."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    body = Column(String, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    published = Column(Boolean, nullable=False, default=False)
    views = Column(Integer, nullable=False, default=0)  # bumped on every read

    # Relationships
    holders = relationship(
        "User", secondary=user_posts, back_populates="posts", collection_class=set
    )
