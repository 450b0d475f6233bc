"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the root; every other row references a user

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata holds every table before
      create_all or Alembic autogenerate runs
"""

from wasaphoto.models.user import User  # noqa: F401
from wasaphoto.models.photo import Photo  # noqa: F401
from wasaphoto.models.like import Like  # noqa: F401
from wasaphoto.models.comment import Comment  # noqa: F401
from wasaphoto.models.follow import Follow  # noqa: F401
from wasaphoto.models.ban import Ban  # noqa: F401
