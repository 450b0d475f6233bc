"""SQL Store — SocialStore implementation over an async SQLAlchemy session.

Invariants:
    - Every mutation commits on its own: one mutation, one transaction
    - IntegrityError → ConflictError (duplicate like/follow/ban races land here)
    - Any other SQLAlchemyError → DatabaseError after rollback
    - Reflexive follow/ban is rejected before touching the DB (CHECK constraint backs it up)
    - Photo listings never select image bytes

Design Decisions:
    - Counts and liked flag as correlated scalar subqueries: one round-trip per listing
      instead of three queries per photo
    - Relation tables looked up from one dict keyed by RelationKind: follow and ban
      share every code path (ADR: the two relations differ only in table)
    - Username search narrowed with LIKE then filtered in Python: LIKE is
      case-insensitive on SQLite, the search must be case-sensitive everywhere
    - Like and relation rows inserted with Core insert(): a duplicate pair surfaces
      as IntegrityError instead of an identity-map clash in a long-lived session
"""

import logging
from collections.abc import Collection

from sqlalchemy import select, insert, delete, update, func, exists
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wasaphoto.core.domain_types import (
    UserId, PhotoId, CommentId, RelationKind, PhotoRecord, CommentRecord,
)
from wasaphoto.core.errors import (
    ConflictError, DatabaseError, ErrorContext, ForbiddenError,
)
from wasaphoto.models import User, Photo, Like, Comment, Follow, Ban

logger = logging.getLogger(__name__)

# kind -> (model, source column, target column)
_RELATIONS = {
    RelationKind.FOLLOW: (Follow, Follow.follower_id, Follow.followed_id),
    RelationKind.BAN: (Ban, Ban.banner_id, Ban.banned_id),
}


class SqlSocialStore:
    """SocialStore backed by the relational schema in models/."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Plumbing ───────────────────────────────────────────────

    async def _execute(self, statement, operation: str):
        try:
            return await self.db.execute(statement)
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Integrity violation during {operation}: {e.orig}")
            raise ConflictError() from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Store {operation} failed: {e}")
            raise DatabaseError(str(e), operation) from e

    async def _commit(self, operation: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Integrity violation during {operation}: {e.orig}")
            raise ConflictError() from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Store {operation} failed: {e}")
            raise DatabaseError(str(e), operation) from e

    async def _count(self, statement, operation: str) -> int:
        result = await self._execute(statement, operation)
        return int(result.scalar_one())

    # ─── Users ──────────────────────────────────────────────────

    async def user_exists(self, user_id: UserId) -> bool:
        result = await self._execute(
            select(User.id).where(User.id == user_id), "user_exists",
        )
        return result.scalar_one_or_none() is not None

    async def get_user_id(self, username: str) -> UserId | None:
        result = await self._execute(
            select(User.id).where(User.username == username), "get_user_id",
        )
        user_id = result.scalar_one_or_none()
        return UserId(user_id) if user_id is not None else None

    async def get_or_create_user(self, username: str) -> UserId:
        existing = await self.get_user_id(username)
        if existing is not None:
            return existing

        user = User(username=username)
        self.db.add(user)
        try:
            await self._commit("create_user")
        except ConflictError:
            # Concurrent login registered the same name first
            existing = await self.get_user_id(username)
            if existing is None:
                raise
            return existing
        return UserId(user.id)

    async def username_exists(self, username: str) -> bool:
        return await self.get_user_id(username) is not None

    async def rename_user(self, user_id: UserId, username: str) -> None:
        await self._execute(
            update(User).where(User.id == user_id).values(username=username),
            "rename_user",
        )
        await self._commit("rename_user")

    async def search_usernames(self, fragment: str) -> list[str]:
        result = await self._execute(
            select(User.username)
            .where(User.username.contains(fragment, autoescape=True))
            .order_by(User.username),
            "search_usernames",
        )
        return [name for name in result.scalars().all() if fragment in name]

    # ─── Follows and bans ───────────────────────────────────────

    async def relation_exists(
        self, kind: RelationKind, source: UserId, target: UserId,
    ) -> bool:
        model, source_col, target_col = _RELATIONS[kind]
        count = await self._count(
            select(func.count()).select_from(model)
            .where(source_col == source, target_col == target),
            f"{kind.value}_exists",
        )
        return count > 0

    async def add_relation(
        self, kind: RelationKind, source: UserId, target: UserId,
    ) -> None:
        if source == target:
            raise ForbiddenError(
                f"A user cannot {kind.value} itself", ErrorContext(user_id=source),
            )
        model, source_col, target_col = _RELATIONS[kind]
        await self._execute(
            insert(model).values({source_col.key: source, target_col.key: target}),
            f"add_{kind.value}",
        )
        await self._commit(f"add_{kind.value}")

    async def remove_relation(
        self, kind: RelationKind, source: UserId, target: UserId,
    ) -> None:
        model, source_col, target_col = _RELATIONS[kind]
        await self._execute(
            delete(model).where(source_col == source, target_col == target),
            f"remove_{kind.value}",
        )
        await self._commit(f"remove_{kind.value}")

    async def list_followed_ids(self, user_id: UserId) -> set[UserId]:
        result = await self._execute(
            select(Follow.followed_id).where(Follow.follower_id == user_id),
            "list_followed_ids",
        )
        return {UserId(uid) for uid in result.scalars().all()}

    async def list_banner_ids(self, user_id: UserId) -> set[UserId]:
        result = await self._execute(
            select(Ban.banner_id).where(Ban.banned_id == user_id),
            "list_banner_ids",
        )
        return {UserId(uid) for uid in result.scalars().all()}

    async def count_followers(self, user_id: UserId) -> int:
        return await self._count(
            select(func.count()).select_from(Follow)
            .where(Follow.followed_id == user_id),
            "count_followers",
        )

    async def count_following(self, user_id: UserId) -> int:
        return await self._count(
            select(func.count()).select_from(Follow)
            .where(Follow.follower_id == user_id),
            "count_following",
        )

    # ─── Photos ─────────────────────────────────────────────────

    async def add_photo(self, owner: UserId, content: bytes) -> PhotoId:
        photo = Photo(owner_id=owner, content=content)
        self.db.add(photo)
        await self._commit("add_photo")
        return PhotoId(photo.id)

    async def get_photo_owner(self, photo_id: PhotoId) -> UserId | None:
        result = await self._execute(
            select(Photo.owner_id).where(Photo.id == photo_id), "get_photo_owner",
        )
        owner = result.scalar_one_or_none()
        return UserId(owner) if owner is not None else None

    async def get_photo_content(self, photo_id: PhotoId) -> bytes | None:
        result = await self._execute(
            select(Photo.content).where(Photo.id == photo_id), "get_photo_content",
        )
        return result.scalar_one_or_none()

    async def delete_photo(self, photo_id: PhotoId) -> None:
        await self._execute(
            delete(Like).where(Like.photo_id == photo_id), "delete_photo",
        )
        await self._execute(
            delete(Comment).where(Comment.photo_id == photo_id), "delete_photo",
        )
        await self._execute(
            delete(Photo).where(Photo.id == photo_id), "delete_photo",
        )
        await self._commit("delete_photo")

    async def list_photos(
        self, owners: Collection[UserId], viewer: UserId,
    ) -> list[PhotoRecord]:
        if not owners:
            return []

        like_count = (
            select(func.count()).select_from(Like)
            .where(Like.photo_id == Photo.id)
            .correlate(Photo).scalar_subquery()
        )
        comment_count = (
            select(func.count()).select_from(Comment)
            .where(Comment.photo_id == Photo.id)
            .correlate(Photo).scalar_subquery()
        )
        liked = (
            exists().where(Like.photo_id == Photo.id, Like.user_id == viewer)
            .correlate(Photo)
        )
        statement = (
            select(
                Photo.id,
                Photo.owner_id,
                User.username,
                Photo.created_at,
                like_count.label("like_count"),
                comment_count.label("comment_count"),
                liked.label("liked"),
            )
            .join(User, User.id == Photo.owner_id)
            .where(Photo.owner_id.in_(list(owners)))
            .order_by(Photo.created_at.desc(), Photo.id.desc())
        )
        result = await self._execute(statement, "list_photos")
        return [
            PhotoRecord(
                id=PhotoId(row.id),
                owner=UserId(row.owner_id),
                owner_username=row.username,
                created_at=row.created_at,
                like_count=int(row.like_count),
                comment_count=int(row.comment_count),
                liked_by_viewer=bool(row.liked),
            )
            for row in result.all()
        ]

    # ─── Likes ──────────────────────────────────────────────────

    async def like_exists(self, user_id: UserId, photo_id: PhotoId) -> bool:
        count = await self._count(
            select(func.count()).select_from(Like)
            .where(Like.user_id == user_id, Like.photo_id == photo_id),
            "like_exists",
        )
        return count > 0

    async def add_like(self, user_id: UserId, photo_id: PhotoId) -> None:
        await self._execute(
            insert(Like).values(user_id=user_id, photo_id=photo_id), "add_like",
        )
        await self._commit("add_like")

    async def remove_like(self, user_id: UserId, photo_id: PhotoId) -> None:
        await self._execute(
            delete(Like).where(Like.user_id == user_id, Like.photo_id == photo_id),
            "remove_like",
        )
        await self._commit("remove_like")

    # ─── Comments ───────────────────────────────────────────────

    async def add_comment(
        self, owner: UserId, photo_id: PhotoId, content: str,
    ) -> CommentId:
        comment = Comment(owner_id=owner, photo_id=photo_id, content=content)
        self.db.add(comment)
        await self._commit("add_comment")
        return CommentId(comment.id)

    async def get_comment_owner(self, comment_id: CommentId) -> UserId | None:
        result = await self._execute(
            select(Comment.owner_id).where(Comment.id == comment_id),
            "get_comment_owner",
        )
        owner = result.scalar_one_or_none()
        return UserId(owner) if owner is not None else None

    async def delete_comment(self, comment_id: CommentId) -> None:
        await self._execute(
            delete(Comment).where(Comment.id == comment_id), "delete_comment",
        )
        await self._commit("delete_comment")

    async def list_comments(self, photo_id: PhotoId) -> list[CommentRecord]:
        result = await self._execute(
            select(
                Comment.id, Comment.photo_id, User.username,
                Comment.content, Comment.created_at,
            )
            .join(User, User.id == Comment.owner_id)
            .where(Comment.photo_id == photo_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc()),
            "list_comments",
        )
        return [
            CommentRecord(
                id=CommentId(row.id),
                photo_id=PhotoId(row.photo_id),
                owner_username=row.username,
                content=row.content,
                created_at=row.created_at,
            )
            for row in result.all()
        ]
