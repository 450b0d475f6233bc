"""Initial schema — users, photos, likes, comments, follows, bans.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(16), nullable=False, unique=True),
    )

    op.create_table(
        "photos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "owner_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("content", sa.LargeBinary, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_photos_owner_id", "photos", ["owner_id"])

    op.create_table(
        "likes",
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "photo_id", sa.Integer,
            sa.ForeignKey("photos.id", ondelete="CASCADE"), primary_key=True,
        ),
    )

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "photo_id", sa.Integer,
            sa.ForeignKey("photos.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "owner_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_comments_photo_id", "comments", ["photo_id"])

    op.create_table(
        "follows",
        sa.Column(
            "follower_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "followed_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.CheckConstraint("follower_id <> followed_id", name="ck_follows_not_self"),
    )

    op.create_table(
        "bans",
        sa.Column(
            "banner_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "banned_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.CheckConstraint("banner_id <> banned_id", name="ck_bans_not_self"),
    )


def downgrade() -> None:
    op.drop_table("bans")
    op.drop_table("follows")
    op.drop_index("ix_comments_photo_id", table_name="comments")
    op.drop_table("comments")
    op.drop_table("likes")
    op.drop_index("ix_photos_owner_id", table_name="photos")
    op.drop_table("photos")
    op.drop_table("users")
