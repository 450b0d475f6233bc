"""Service test fixtures — in-memory SocialStore fake and the SQL Store.

Invariants:
    - InMemorySocialStore honors the SocialStore contract: None/False for absent,
      ConflictError on duplicates, irreflexive relations
    - Photo and comment timestamps strictly increase in creation order
    - sql_store runs against the per-test SQLite database from the root conftest

Design Decisions:
    - Fake implemented here, exposed as a fixture: services are exercised without SQL
      (ADR: Store is an injected boundary)
"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from wasaphoto.core.domain_types import (
    CommentId, CommentRecord, PhotoId, PhotoRecord, RelationKind, UserId,
)
from wasaphoto.core.errors import ConflictError, ForbiddenError
from wasaphoto.infrastructure.sql_store import SqlSocialStore

_EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class InMemorySocialStore:
    """Dict-and-set SocialStore for service tests."""

    def __init__(self):
        self.users: dict[UserId, str] = {}
        self.relations: dict[RelationKind, set[tuple[UserId, UserId]]] = {
            kind: set() for kind in RelationKind
        }
        self.photos: dict[PhotoId, dict] = {}
        self.likes: set[tuple[UserId, PhotoId]] = set()
        self.comments: dict[CommentId, dict] = {}
        self._ids = count(1)
        self._ticks = count(1)

    def _now(self) -> datetime:
        return _EPOCH + timedelta(seconds=next(self._ticks))

    # Users
    async def user_exists(self, user_id):
        return user_id in self.users

    async def get_user_id(self, username):
        for uid, name in self.users.items():
            if name == username:
                return uid
        return None

    async def get_or_create_user(self, username):
        existing = await self.get_user_id(username)
        if existing is not None:
            return existing
        uid = UserId(next(self._ids))
        self.users[uid] = username
        return uid

    async def username_exists(self, username):
        return await self.get_user_id(username) is not None

    async def rename_user(self, user_id, username):
        if await self.username_exists(username):
            raise ConflictError()
        self.users[user_id] = username

    async def search_usernames(self, fragment):
        return sorted(name for name in self.users.values() if fragment in name)

    # Follows and bans
    async def relation_exists(self, kind, source, target):
        return (source, target) in self.relations[kind]

    async def add_relation(self, kind, source, target):
        if source == target:
            raise ForbiddenError()
        if (source, target) in self.relations[kind]:
            raise ConflictError()
        self.relations[kind].add((source, target))

    async def remove_relation(self, kind, source, target):
        self.relations[kind].discard((source, target))

    async def list_followed_ids(self, user_id):
        return {t for s, t in self.relations[RelationKind.FOLLOW] if s == user_id}

    async def list_banner_ids(self, user_id):
        return {s for s, t in self.relations[RelationKind.BAN] if t == user_id}

    async def count_followers(self, user_id):
        return sum(1 for _, t in self.relations[RelationKind.FOLLOW] if t == user_id)

    async def count_following(self, user_id):
        return sum(1 for s, _ in self.relations[RelationKind.FOLLOW] if s == user_id)

    # Photos
    async def add_photo(self, owner, content):
        pid = PhotoId(next(self._ids))
        self.photos[pid] = {"owner": owner, "content": content, "created_at": self._now()}
        return pid

    async def get_photo_owner(self, photo_id):
        photo = self.photos.get(photo_id)
        return photo["owner"] if photo else None

    async def get_photo_content(self, photo_id):
        photo = self.photos.get(photo_id)
        return photo["content"] if photo else None

    async def delete_photo(self, photo_id):
        self.photos.pop(photo_id, None)
        self.likes = {(u, p) for u, p in self.likes if p != photo_id}
        self.comments = {
            cid: c for cid, c in self.comments.items() if c["photo_id"] != photo_id
        }

    async def list_photos(self, owners, viewer):
        records = [
            PhotoRecord(
                id=pid,
                owner=p["owner"],
                owner_username=self.users[p["owner"]],
                created_at=p["created_at"],
                like_count=sum(1 for _, lp in self.likes if lp == pid),
                comment_count=sum(
                    1 for c in self.comments.values() if c["photo_id"] == pid
                ),
                liked_by_viewer=(viewer, pid) in self.likes,
            )
            for pid, p in self.photos.items()
            if p["owner"] in owners
        ]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    # Likes
    async def like_exists(self, user_id, photo_id):
        return (user_id, photo_id) in self.likes

    async def add_like(self, user_id, photo_id):
        if (user_id, photo_id) in self.likes:
            raise ConflictError()
        self.likes.add((user_id, photo_id))

    async def remove_like(self, user_id, photo_id):
        self.likes.discard((user_id, photo_id))

    # Comments
    async def add_comment(self, owner, photo_id, content):
        cid = CommentId(next(self._ids))
        self.comments[cid] = {
            "owner": owner, "photo_id": photo_id,
            "content": content, "created_at": self._now(),
        }
        return cid

    async def get_comment_owner(self, comment_id):
        comment = self.comments.get(comment_id)
        return comment["owner"] if comment else None

    async def delete_comment(self, comment_id):
        self.comments.pop(comment_id, None)

    async def list_comments(self, photo_id):
        records = [
            CommentRecord(
                id=cid,
                photo_id=c["photo_id"],
                owner_username=self.users[c["owner"]],
                content=c["content"],
                created_at=c["created_at"],
            )
            for cid, c in self.comments.items()
            if c["photo_id"] == photo_id
        ]
        return sorted(records, key=lambda r: r.created_at, reverse=True)


@pytest.fixture
def store():
    return InMemorySocialStore()


@pytest.fixture
async def users(store):
    """alice, bob, carol registered in the fake store (ids 1, 2, 3)."""
    return {
        name: await store.get_or_create_user(name)
        for name in ("alice", "bob", "carol")
    }


@pytest.fixture
async def sql_store(test_db):
    return SqlSocialStore(test_db)
