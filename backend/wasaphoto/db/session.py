"""Schema bootstrap — creates tables directly from the ORM metadata.

Invariants:
    - Used for SQLite runs (local dev, tests) where Alembic is not run
    - Idempotent: existing tables are left alone

Design Decisions:
    - Separate from infrastructure/database.py: works on any AsyncEngine, including
      the test fixtures' in-memory engine
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from wasaphoto.db.base import Base


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table known to Base.metadata."""
    import wasaphoto.models  # noqa: F401  (registers all tables)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
