"""Route Roles — explicit per-route declaration of identity-bearing path parameters.

Invariants:
    - Every guarded route has exactly one entry in ROUTE_ROLES (keyed by route name)
    - subject = the user the resource path belongs to; actor = the acting user
    - The bound parameter is the actor when declared, else the subject
    - A bound parameter present in the path MUST equal the credential identity
    - reconcile=False routes only authenticate; the path is never compared

Design Decisions:
    - Parameters resolved by NAME, not by position in the path (ADR: positional
      dispatch broke silently whenever a route gained or reordered a parameter)
    - Table over per-route flags: every route's role visible in one place
      (ADR: no convention-over-config)
"""

from collections.abc import Mapping
from dataclasses import dataclass

from wasaphoto.core.domain_types import UserId
from wasaphoto.core.errors import ForbiddenError, ErrorContext


@dataclass(frozen=True)
class RouteRoles:
    """Which path parameters carry identities, and whether to reconcile them."""
    subject: str | None = None
    actor: str | None = None
    reconcile: bool = True

    @property
    def bound_parameter(self) -> str | None:
        return self.actor or self.subject


SUBJECT = RouteRoles(subject="user_id")
SUBJECT_AND_ACTOR = RouteRoles(subject="user_id", actor="authenticated_user_id")
IDENTITY_ONLY = RouteRoles(subject="user_id", reconcile=False)

ROUTE_ROLES: dict[str, RouteRoles] = {
    # Profile
    "set_my_username": SUBJECT,
    "get_user_profile": SUBJECT,
    "search_user": SUBJECT,
    # Social actions
    "follow_user": SUBJECT,
    "unfollow_user": SUBJECT,
    "ban_user": SUBJECT,
    "unban_user": SUBJECT,
    # Photos
    "get_my_stream": SUBJECT,
    "upload_photo": SUBJECT,
    "get_photo": SUBJECT,
    "delete_photo": SUBJECT,
    # Likes: user_id is the photo owner, the liker is the actor
    "like_photo": SUBJECT_AND_ACTOR,
    "unlike_photo": SUBJECT_AND_ACTOR,
    # Comments
    "comment_photo": IDENTITY_ONLY,
    "get_photo_comments": IDENTITY_ONLY,
    "delete_comment": IDENTITY_ONLY,
}


def roles_for(route_name: str) -> RouteRoles:
    """Look up a route's roles. Unknown names are a programming error."""
    try:
        return ROUTE_ROLES[route_name]
    except KeyError:
        raise KeyError(f"No route roles declared for '{route_name}'") from None


def reconcile_path_identity(
    candidate: UserId, path_params: Mapping[str, str], roles: RouteRoles,
) -> UserId:
    """Bind the credential to the identity the path claims to act as."""
    if not roles.reconcile:
        return candidate

    name = roles.bound_parameter
    if name is None or name not in path_params:
        return candidate

    raw = str(path_params[name])
    try:
        path_identity = UserId(int(raw))
    except ValueError:
        raise ForbiddenError(
            "Invalid identifier in the path",
            ErrorContext(user_id=candidate, debug_info={"parameter": name}),
        ) from None

    if path_identity != candidate:
        raise ForbiddenError(
            "The path tokens and the auth token aren't equal",
            ErrorContext(user_id=candidate, debug_info={"parameter": name}),
        )
    return path_identity
