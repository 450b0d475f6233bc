"""Photo Interactions — upload, fetch, delete, like, comment.

Invariants:
    - A caller banned by a photo's owner can neither see nor touch that photo
      (fetch, like, unlike, comment, list comments)
    - Only the owner deletes a photo; only the comment's author deletes a comment
    - like/unlike require the path's claimed owner to be the photo's real owner
    - Like twice or unlike twice → RelationshipStateError (409)
    - Upload requires a non-empty payload no larger than the configured limit

Design Decisions:
    - Existence is checked before ownership on delete: an unknown photo is 404, not 403
    - delete_comment performs no existence check: an unknown comment has no owner,
      so it fails the ownership check (403)
    - Methods return plain values (ids, bytes, records); HTTP status classes are
      decided by the routes
"""

import logging

from wasaphoto.core.domain_types import (
    ActionOutcome, CommentId, CommentRecord, PhotoId, RelationKind, UserId,
)
from wasaphoto.core.enforce_relationships import (
    check_claimed_owner,
    check_like_transition,
    check_not_banned,
    check_ownership,
)
from wasaphoto.core.errors import (
    BadRequestError, ErrorContext, ResourceNotFoundError,
)
from wasaphoto.core.repository_protocols import SocialStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_PHOTO_BYTES = 10 * 1024 * 1024


class PhotoInteractions:
    """Photo-level actions, each gated by ownership and ban state."""

    def __init__(
        self, store: SocialStore, max_photo_bytes: int = DEFAULT_MAX_PHOTO_BYTES,
    ):
        self.store = store
        self.max_photo_bytes = max_photo_bytes

    # ─── Helpers ────────────────────────────────────────────────

    async def _require_owner(self, photo_id: PhotoId) -> UserId:
        owner = await self.store.get_photo_owner(photo_id)
        if owner is None:
            raise ResourceNotFoundError("Photo", str(photo_id))
        return owner

    async def _require_visible(self, caller: UserId, photo_id: PhotoId) -> UserId:
        """Photo exists and its owner has not banned the caller. Returns the owner."""
        owner = await self._require_owner(photo_id)
        banned = await self.store.relation_exists(RelationKind.BAN, owner, caller)
        check_not_banned(banned, caller)
        return owner

    # ─── Photos ─────────────────────────────────────────────────

    async def upload_photo(self, caller: UserId, content: bytes) -> PhotoId:
        if not content:
            raise BadRequestError("Invalid photo data", field="body")
        if len(content) > self.max_photo_bytes:
            raise BadRequestError(
                f"Photo exceeds {self.max_photo_bytes} bytes", field="body",
            )
        photo_id = await self.store.add_photo(caller, content)
        logger.info(
            f"Photo uploaded ({len(content)} bytes)",
            extra={"user_id": caller, "photo_id": photo_id},
        )
        return photo_id

    async def get_photo(self, caller: UserId, photo_id: PhotoId) -> bytes:
        await self._require_visible(caller, photo_id)
        content = await self.store.get_photo_content(photo_id)
        if content is None:
            # Deleted between the two reads
            raise ResourceNotFoundError("Photo", str(photo_id))
        return content

    async def delete_photo(self, caller: UserId, photo_id: PhotoId) -> ActionOutcome:
        owner = await self._require_owner(photo_id)
        check_ownership(owner, caller)
        await self.store.delete_photo(photo_id)
        logger.info("Photo deleted", extra={"user_id": caller, "photo_id": photo_id})
        return ActionOutcome.NO_CONTENT

    # ─── Likes ──────────────────────────────────────────────────

    async def like_photo(
        self, caller: UserId, photo_id: PhotoId, claimed_owner: UserId,
    ) -> ActionOutcome:
        return await self._change_like(caller, photo_id, claimed_owner, is_removal=False)

    async def unlike_photo(
        self, caller: UserId, photo_id: PhotoId, claimed_owner: UserId,
    ) -> ActionOutcome:
        return await self._change_like(caller, photo_id, claimed_owner, is_removal=True)

    async def _change_like(
        self,
        caller: UserId,
        photo_id: PhotoId,
        claimed_owner: UserId,
        is_removal: bool,
    ) -> ActionOutcome:
        owner = await self._require_owner(photo_id)
        check_claimed_owner(owner, claimed_owner, photo_id)
        banned = await self.store.relation_exists(RelationKind.BAN, owner, caller)
        check_not_banned(banned, caller)

        present = await self.store.like_exists(caller, photo_id)
        check_like_transition(present, is_removal)

        if is_removal:
            await self.store.remove_like(caller, photo_id)
            return ActionOutcome.NO_CONTENT
        await self.store.add_like(caller, photo_id)
        logger.info("Photo liked", extra={"user_id": caller, "photo_id": photo_id})
        return ActionOutcome.CREATED

    # ─── Comments ───────────────────────────────────────────────

    async def comment_photo(
        self, caller: UserId, photo_id: PhotoId, content: str,
    ) -> CommentId:
        await self._require_visible(caller, photo_id)
        if not content or not content.strip():
            raise BadRequestError(
                "Invalid comment data", field="comment",
                context=ErrorContext(user_id=caller, photo_id=photo_id),
            )
        comment_id = await self.store.add_comment(caller, photo_id, content)
        logger.info(
            "Comment created",
            extra={"user_id": caller, "photo_id": photo_id, "comment_id": comment_id},
        )
        return comment_id

    async def list_comments(
        self, caller: UserId, photo_id: PhotoId,
    ) -> list[CommentRecord]:
        await self._require_visible(caller, photo_id)
        return await self.store.list_comments(photo_id)

    async def delete_comment(
        self, caller: UserId, comment_id: CommentId,
    ) -> ActionOutcome:
        owner = await self.store.get_comment_owner(comment_id)
        check_ownership(owner, caller)
        await self.store.delete_comment(comment_id)
        return ActionOutcome.NO_CONTENT
