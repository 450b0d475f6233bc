"""Relationship Policy — follow, unfollow, ban, unban.

Invariants:
    - Preconditions checked in order: username shape, target exists, not self,
      target has not banned caller, relation state allows the transition
    - No mutation happens before every precondition passes
    - Additions answer CREATED, removals answer NO_CONTENT
    - The state check reads the relation being changed (follow reads follows, ban reads bans)

Design Decisions:
    - One parametrized procedure (_apply) for all four actions
      (ADR: they differ only in relation kind and direction)
    - Pure checks live in core/enforce_relationships; this class only fetches facts
      and applies mutations (ADR: functional core, imperative shell)
"""

import logging

from wasaphoto.core.domain_types import ActionOutcome, RelationKind, UserId
from wasaphoto.core.enforce_relationships import (
    check_not_self,
    check_not_banned,
    check_relation_transition,
)
from wasaphoto.core.errors import ResourceNotFoundError
from wasaphoto.core.repository_protocols import SocialStore
from wasaphoto.core.validate_username import check_username

logger = logging.getLogger(__name__)


class RelationshipPolicy:
    """Decision procedure for user-to-user relation changes."""

    def __init__(self, store: SocialStore):
        self.store = store

    async def follow(self, caller: UserId, username: str) -> ActionOutcome:
        return await self._apply(RelationKind.FOLLOW, caller, username, is_removal=False)

    async def unfollow(self, caller: UserId, username: str) -> ActionOutcome:
        return await self._apply(RelationKind.FOLLOW, caller, username, is_removal=True)

    async def ban(self, caller: UserId, username: str) -> ActionOutcome:
        return await self._apply(RelationKind.BAN, caller, username, is_removal=False)

    async def unban(self, caller: UserId, username: str) -> ActionOutcome:
        return await self._apply(RelationKind.BAN, caller, username, is_removal=True)

    async def resolve_target(self, username: str) -> UserId:
        """Validated username → identity, or ResourceNotFoundError."""
        check_username(username)
        target = await self.store.get_user_id(username)
        if target is None:
            raise ResourceNotFoundError("User", username)
        return target

    async def _apply(
        self, kind: RelationKind, caller: UserId, username: str, is_removal: bool,
    ) -> ActionOutcome:
        target = await self.resolve_target(username)
        check_not_self(caller, target)

        banned_by_target = await self.store.relation_exists(
            RelationKind.BAN, target, caller,
        )
        check_not_banned(banned_by_target, caller)

        present = await self.store.relation_exists(kind, caller, target)
        check_relation_transition(kind, present, is_removal)

        # ── IMPURE: mutate ──
        if is_removal:
            await self.store.remove_relation(kind, caller, target)
        else:
            await self.store.add_relation(kind, caller, target)

        logger.info(
            f"{'Removed' if is_removal else 'Added'} {kind.value} {caller} -> {target}",
            extra={"user_id": caller, "relation": kind.value},
        )
        return ActionOutcome.NO_CONTENT if is_removal else ActionOutcome.CREATED
