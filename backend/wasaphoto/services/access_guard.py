"""Access Guard — authenticates the caller and binds the credential to the path.

Invariants:
    - Unparsable or unknown credentials fail with UnauthenticatedError (401)
    - A bound path identity different from the credential fails with ForbiddenError (403)
    - The guard holds no state; every fact comes from the injected Store
    - Returns the verified identity, which handlers use as the caller

Design Decisions:
    - Which path parameter to reconcile comes from core/route_roles.ROUTE_ROLES,
      resolved by name (ADR: explicit subject/actor tagging per route)
    - Kept framework-agnostic (plain mapping of path params): the FastAPI dependency
      in api/dependencies.py is a thin adapter
"""

import logging
from collections.abc import Mapping

from wasaphoto.core.domain_types import UserId
from wasaphoto.core.errors import UnauthenticatedError, ErrorContext
from wasaphoto.core.repository_protocols import SocialStore
from wasaphoto.core.resolve_identity import resolve_identity
from wasaphoto.core.route_roles import RouteRoles, reconcile_path_identity

logger = logging.getLogger(__name__)


async def verify_caller(store: SocialStore, authorization: str | None) -> UserId:
    """Resolve the header and require the identity to exist."""
    candidate = resolve_identity(authorization)
    if not await store.user_exists(candidate):
        raise UnauthenticatedError(context=ErrorContext(user_id=candidate))
    return candidate


async def authenticate(
    store: SocialStore,
    authorization: str | None,
    path_params: Mapping[str, str],
    roles: RouteRoles,
) -> UserId:
    """Full guard: verify the caller, then reconcile against the route's bound parameter."""
    candidate = await verify_caller(store, authorization)
    verified = reconcile_path_identity(candidate, path_params, roles)
    logger.debug("Caller verified", extra={"user_id": verified})
    return verified
