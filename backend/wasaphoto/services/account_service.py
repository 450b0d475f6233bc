"""Account Service — login (get-or-create) and username changes.

Invariants:
    - Login is public: the username is the only input, the identity is the output
    - A username is assigned to at most one user (Store uniqueness backs the check)
    - Renaming never changes the identity
"""

import logging

from wasaphoto.core.domain_types import UserId
from wasaphoto.core.errors import ConflictError, ErrorContext
from wasaphoto.core.repository_protocols import SocialStore
from wasaphoto.core.validate_username import check_username

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, store: SocialStore):
        self.store = store

    async def login(self, username: str) -> UserId:
        """Return the identity for username, registering it on first login."""
        check_username(username, field="name")
        user_id = await self.store.get_or_create_user(username)
        logger.info("User logged in", extra={"user_id": user_id})
        return user_id

    async def set_username(self, caller: UserId, username: str) -> None:
        check_username(username, field="name")
        if await self.store.username_exists(username):
            raise ConflictError(context=ErrorContext(user_id=caller))
        await self.store.rename_user(caller, username)
        logger.info("Username updated", extra={"user_id": caller})
