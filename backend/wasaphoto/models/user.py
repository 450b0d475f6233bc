"""User ORM — a registered account; its id doubles as the bearer credential.

Invariants:
    - id is an autoincrement integer assigned at first login, never reassigned
    - username is unique and mutable (validated before it reaches the DB)

Design Decisions:
    - No password column: credentials are opaque identifiers, not secrets
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from wasaphoto.db.base import Base


class User(Base):
    """Registered user."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(
        String(16), nullable=False, unique=True,
    )
