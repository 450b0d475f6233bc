"""Photo ORM — immutable binary content owned by exactly one user.

Invariants:
    - owner_id is non-nullable; only the owner may delete the row
    - content is never updated after insert
    - Likes and comments go with the photo (same transaction in the store, FK cascade in PostgreSQL)

Design Decisions:
    - content deferred: listings never load image bytes
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, LargeBinary, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from wasaphoto.db.base import Base


class Photo(Base):
    """Uploaded photo."""
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    content: Mapped[bytes] = mapped_column(
        LargeBinary, nullable=False, deferred=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
