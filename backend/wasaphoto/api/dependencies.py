"""API Dependencies — per-request Store, services, and the access-guard dependency.

Invariants:
    - One SqlSocialStore per request, shared by the guard and the service
      (FastAPI caches get_store within a request)
    - require_user(route_name) fails at import time for undeclared routes
    - The guard reads the raw Authorization header and raw path params

Design Decisions:
    - Store injected explicitly into every service (ADR: no ambient DB handle;
      tests override get_db or hand services a fake)
    - Route roles passed by route name so every guarded route appears in
      core/route_roles.ROUTE_ROLES
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wasaphoto.config import get_settings
from wasaphoto.core.domain_types import UserId
from wasaphoto.core.route_roles import roles_for
from wasaphoto.infrastructure.database import get_db
from wasaphoto.infrastructure.sql_store import SqlSocialStore
from wasaphoto.services.access_guard import authenticate
from wasaphoto.services.account_service import AccountService
from wasaphoto.services.feed_composer import FeedComposer
from wasaphoto.services.photo_interactions import PhotoInteractions
from wasaphoto.services.relationship_policy import RelationshipPolicy


async def get_store(db: AsyncSession = Depends(get_db)) -> SqlSocialStore:
    return SqlSocialStore(db)


def get_account_service(store: SqlSocialStore = Depends(get_store)) -> AccountService:
    return AccountService(store)


def get_relationship_policy(
    store: SqlSocialStore = Depends(get_store),
) -> RelationshipPolicy:
    return RelationshipPolicy(store)


def get_photo_interactions(
    store: SqlSocialStore = Depends(get_store),
) -> PhotoInteractions:
    return PhotoInteractions(store, max_photo_bytes=get_settings().max_photo_bytes)


def get_feed_composer(store: SqlSocialStore = Depends(get_store)) -> FeedComposer:
    return FeedComposer(store)


def require_user(route_name: str):
    """Build the guard dependency for one route. Returns the verified caller."""
    roles = roles_for(route_name)

    async def _guard(
        request: Request, store: SqlSocialStore = Depends(get_store),
    ) -> UserId:
        return await authenticate(
            store,
            request.headers.get("Authorization"),
            request.path_params,
            roles,
        )

    _guard.__name__ = f"require_user_{route_name}"
    return _guard

