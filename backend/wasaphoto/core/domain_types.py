"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, PhotoId, CommentId wrap int — never use bare int in domain logic
    - UserId doubles as the bearer credential (no separate secret)
    - Records are frozen: services never mutate what the Store returned
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Records as frozen dataclasses rather than ORM rows: core never sees SQLAlchemy
      (ADR: Store is an injected boundary, in-memory fake in tests)
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PhotoId = NewType("PhotoId", int)
CommentId = NewType("CommentId", int)


# ─── Enums ───────────────────────────────────────────────────────

class RelationKind(str, Enum):
    """Directed user-to-user relations. Both are irreflexive and independent."""
    FOLLOW = "follow"
    BAN = "ban"


class ActionOutcome(str, Enum):
    """Success status class returned by mutating service operations."""
    CREATED = "created"
    NO_CONTENT = "no_content"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class PhotoRecord:
    """A photo as seen by one viewer: counts plus the viewer's liked flag."""
    id: PhotoId
    owner: UserId
    owner_username: str
    created_at: datetime
    like_count: int = 0
    comment_count: int = 0
    liked_by_viewer: bool = False


@dataclass(frozen=True)
class CommentRecord:
    id: CommentId
    photo_id: PhotoId
    owner_username: str
    content: str
    created_at: datetime


@dataclass(frozen=True)
class ProfileView:
    """Assembled profile of one user as seen by a requester."""
    user_id: UserId
    username: str
    photos: list[PhotoRecord] = field(default_factory=list)
    follower_count: int = 0
    following_count: int = 0
    is_owner: bool = False
    is_followed: bool = False
    is_banned: bool = False

    @property
    def photo_count(self) -> int:
        return len(self.photos)
