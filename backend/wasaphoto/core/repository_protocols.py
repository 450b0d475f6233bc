"""Boundary Protocols — the Store contract between core/services and persistence.

Invariants:
    - Services NEVER import the SQL implementation — they receive a SocialStore
    - All IO operations accessed through this Protocol
    - Lookups return None (or False/empty) for "absent"; faults raise DatabaseError
    - Uniqueness violations raise ConflictError (the backstop for check-then-act races)
    - add_relation rejects source == target regardless of caller checks

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory fake needs no base class
    - Async in Protocol: implementations do IO; the rules in core stay synchronous
    - Explicit injection per request instead of a global handle (ADR: substitutable Store)
"""

from collections.abc import Collection
from typing import Protocol

from wasaphoto.core.domain_types import (
    UserId, PhotoId, CommentId, RelationKind, PhotoRecord, CommentRecord,
)


class SocialStore(Protocol):
    """Contract for users, photos, likes, comments, follows and bans."""

    # Users
    async def user_exists(self, user_id: UserId) -> bool: ...
    async def get_user_id(self, username: str) -> UserId | None: ...
    async def get_or_create_user(self, username: str) -> UserId: ...
    async def username_exists(self, username: str) -> bool: ...
    async def rename_user(self, user_id: UserId, username: str) -> None: ...
    async def search_usernames(self, fragment: str) -> list[str]: ...

    # Follows and bans
    async def relation_exists(
        self, kind: RelationKind, source: UserId, target: UserId,
    ) -> bool: ...
    async def add_relation(
        self, kind: RelationKind, source: UserId, target: UserId,
    ) -> None: ...
    async def remove_relation(
        self, kind: RelationKind, source: UserId, target: UserId,
    ) -> None: ...
    async def list_followed_ids(self, user_id: UserId) -> set[UserId]: ...
    async def list_banner_ids(self, user_id: UserId) -> set[UserId]: ...
    async def count_followers(self, user_id: UserId) -> int: ...
    async def count_following(self, user_id: UserId) -> int: ...

    # Photos
    async def add_photo(self, owner: UserId, content: bytes) -> PhotoId: ...
    async def get_photo_owner(self, photo_id: PhotoId) -> UserId | None: ...
    async def get_photo_content(self, photo_id: PhotoId) -> bytes | None: ...
    async def delete_photo(self, photo_id: PhotoId) -> None: ...
    async def list_photos(
        self, owners: Collection[UserId], viewer: UserId,
    ) -> list[PhotoRecord]: ...

    # Likes
    async def like_exists(self, user_id: UserId, photo_id: PhotoId) -> bool: ...
    async def add_like(self, user_id: UserId, photo_id: PhotoId) -> None: ...
    async def remove_like(self, user_id: UserId, photo_id: PhotoId) -> None: ...

    # Comments
    async def add_comment(
        self, owner: UserId, photo_id: PhotoId, content: str,
    ) -> CommentId: ...
    async def get_comment_owner(self, comment_id: CommentId) -> UserId | None: ...
    async def delete_comment(self, comment_id: CommentId) -> None: ...
    async def list_comments(self, photo_id: PhotoId) -> list[CommentRecord]: ...
