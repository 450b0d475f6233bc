"""Relationship Rules — pure precondition checks for social and photo actions.

Invariants:
    - Every check raises on the first violated precondition; returns None otherwise
    - No check touches the Store: the shell fetches facts, the core decides
    - Self-action is forbidden for every user-to-user relation
    - A user banned by X can neither act on X nor see X's content
    - Follow and ban are independent bits: neither check reads the other relation's state

Design Decisions:
    - One parametrized transition check for follow/unfollow/ban/unban
      (ADR: the four actions differ only in their mutation primitive)
    - Removal of an absent follow/ban answers 403 while a duplicate add answers 409;
      both carry RelationshipStateError.already_present so clients can tell them apart
"""

from collections.abc import Iterable

from wasaphoto.core.domain_types import RelationKind, UserId, PhotoId
from wasaphoto.core.errors import (
    ErrorContext,
    ForbiddenError,
    BadRequestError,
    RelationshipStateError,
)

REMOVING_ABSENT_RELATION_STATUS = 403


def check_not_self(caller: UserId, target: UserId) -> None:
    if caller == target:
        raise ForbiddenError(
            "Cannot act on yourself", ErrorContext(user_id=caller),
        )


def check_not_banned(banned_by_target: bool, caller: UserId) -> None:
    """The target has banned the caller: every action on the target is denied."""
    if banned_by_target:
        raise ForbiddenError(
            "Forbidden Action", ErrorContext(user_id=caller),
        )


def check_relation_transition(
    kind: RelationKind, present: bool, is_removal: bool,
) -> None:
    """Adding requires absence, removing requires presence."""
    if present == is_removal:
        return
    if is_removal:
        raise RelationshipStateError(
            kind.value, already_present=False,
            http_status=REMOVING_ABSENT_RELATION_STATUS,
        )
    raise RelationshipStateError(kind.value, already_present=True)


def check_like_transition(present: bool, is_removal: bool) -> None:
    """Like twice, or unlike without a like: both are conflicts."""
    if present == is_removal:
        return
    raise RelationshipStateError("like", already_present=present)


def check_claimed_owner(
    actual_owner: UserId, claimed_owner: UserId, photo_id: PhotoId,
) -> None:
    """The owner named in the path must be the photo's real owner (stale path)."""
    if actual_owner != claimed_owner:
        raise BadRequestError(
            "The request is not valid", field="user_id",
            context=ErrorContext(user_id=claimed_owner, photo_id=photo_id),
        )


def check_ownership(owner: UserId | None, caller: UserId) -> None:
    """Only the owner may mutate. A missing owner (unknown resource) is denied too."""
    if owner is None or owner != caller:
        raise ForbiddenError(
            "Forbidden Action", ErrorContext(user_id=caller),
        )


def stream_owner_ids(
    viewer: UserId, followed: Iterable[UserId], banned_by: Iterable[UserId],
) -> set[UserId]:
    """Whose photos appear in the viewer's stream.

    Followed users, minus anyone who banned the viewer, minus the viewer.
    """
    return set(followed) - set(banned_by) - {viewer}
