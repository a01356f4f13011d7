"""Create users, sessions, collection and wishlist tables

Revision ID: 4f2a9c1d7e3b
Revises:
Create Date: 2026-10-19 10:12:41.208311

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e3b"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("show_kids_shoes", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("gender_filter", sa.String(length=10), nullable=False, server_default="both"),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "sessions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(length=36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("token", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
    )
    op.create_index("ix_sessions_user_id", "sessions", ["user_id"])
    op.create_index("ix_sessions_token", "sessions", ["token"], unique=True)
    op.create_index("ix_sessions_expires_at", "sessions", ["expires_at"])

    op.create_table(
        "collection_items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(length=36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("sneaker_id", sa.String(length=100), nullable=False),
        sa.Column("sku", sa.String(length=100), nullable=False),
        sa.Column("brand", sa.String(length=100), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("colorway", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("image", sa.String(length=1024), nullable=True),
        sa.Column("size_us", sa.String(length=10), nullable=False),
        sa.Column("size_eu", sa.String(length=10), nullable=True),
        sa.Column("size_uk", sa.String(length=10), nullable=True),
        sa.Column("condition", sa.String(length=10), nullable=False),
        sa.Column("purchase_date", sa.Date(), nullable=True),
        sa.Column("retail_price", sa.Float(), nullable=True),
        sa.Column("purchase_price", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("labels", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_collection_items_user_id", "collection_items", ["user_id"])

    op.create_table(
        "wishlist_items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(length=36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("sneaker_id", sa.String(length=100), nullable=False),
        sa.Column("sneaker_name", sa.String(length=255), nullable=False),
        sa.Column("brand", sa.String(length=100), nullable=False),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        sa.Column("size", sa.String(length=10), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "sneaker_id", "size", name="uq_wishlist_user_sneaker_size"),
    )
    op.create_index("ix_wishlist_items_user_id", "wishlist_items", ["user_id"])


def downgrade() -> None:
    op.drop_table("wishlist_items")
    op.drop_table("collection_items")
    op.drop_table("sessions")
    op.drop_table("users")
