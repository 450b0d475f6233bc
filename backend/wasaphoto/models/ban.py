"""Ban ORM — directed (banner, banned) relation.

Invariants:
    - Composite primary key: a pair is banned at most once
    - CHECK banner_id != banned_id: irreflexive at the DB level too
    - Independent of follows: banning never removes a follow row
"""

from sqlalchemy import Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from wasaphoto.db.base import Base


class Ban(Base):
    __tablename__ = "bans"
    __table_args__ = (
        CheckConstraint("banner_id != banned_id", name="ck_bans_not_self"),
    )

    banner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    )
    banned_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    )
