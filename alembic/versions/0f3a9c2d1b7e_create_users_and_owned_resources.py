"""Create users and owned resources

Revision ID: 0f3a9c2d1b7e
Revises:
Create Date: 2026-10-17 09:12:44.118203

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0f3a9c2d1b7e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
    ]


def owner_column() -> sa.Column:
    return sa.Column(
        "owner_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )


def owned_set_table(table: str, resource_table: str, resource_column: str) -> None:
    op.create_table(
        table,
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            resource_column,
            sa.Integer(),
            sa.ForeignKey(f"{resource_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        *timestamps(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "fruits",
        sa.Column("id", sa.Integer(), primary_key=True),
        owner_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("color", sa.String(100), nullable=False),
        sa.Column("ready_to_eat", sa.Boolean(), nullable=False),
        *timestamps(),
    )
    op.create_index("ix_fruits_id", "fruits", ["id"])
    op.create_index("ix_fruits_owner_id", "fruits", ["owner_id"])

    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True),
        owner_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("condition", sa.String(50), nullable=True),
        sa.Column("image_urls", sa.JSON(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False),
        *timestamps(),
    )
    op.create_index("ix_items_id", "items", ["id"])
    op.create_index("ix_items_owner_id", "items", ["owner_id"])
    op.create_index("ix_items_category", "items", ["category"])
    op.create_index("ix_items_is_available", "items", ["is_available"])

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True),
        owner_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("body", sa.String(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        *timestamps(),
    )
    op.create_index("ix_posts_id", "posts", ["id"])
    op.create_index("ix_posts_owner_id", "posts", ["owner_id"])

    owned_set_table("user_fruits", "fruits", "fruit_id")
    owned_set_table("user_items", "items", "item_id")
    owned_set_table("user_posts", "posts", "post_id")


def downgrade() -> None:
    op.drop_table("user_posts")
    op.drop_table("user_items")
    op.drop_table("user_fruits")
    op.drop_table("posts")
    op.drop_table("items")
    op.drop_table("fruits")
    op.drop_table("users")
