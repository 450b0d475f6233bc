"""Feed Composer — stream, profile and search views.

Invariants:
    - Stream = photos of followed users, minus owners who banned the viewer,
      minus the viewer's own photos, newest first
    - A follow left in place after a ban never resurfaces the banner's photos
    - Profile access fails with 403 when the target has banned the requester,
      before anything else about the profile is read
    - Profile photos are visible regardless of follow state
    - is_owner short-circuits is_followed/is_banned to False
    - Search is a case-sensitive substring match, unfiltered by relations

Design Decisions:
    - Visibility computed in core (stream_owner_ids) from two id sets, then one
      listing query: the filter is testable without SQL
    - is_banned reports whether the REQUESTER has banned the target: the reverse
      direction is already excluded by the access gate, so it would always be False
"""

import logging

from wasaphoto.core.domain_types import (
    PhotoRecord, ProfileView, RelationKind, UserId,
)
from wasaphoto.core.enforce_relationships import check_not_banned, stream_owner_ids
from wasaphoto.core.errors import ResourceNotFoundError
from wasaphoto.core.repository_protocols import SocialStore
from wasaphoto.core.validate_username import check_username

logger = logging.getLogger(__name__)


def _newest_first(photos: list[PhotoRecord]) -> list[PhotoRecord]:
    return sorted(photos, key=lambda p: (p.created_at, p.id), reverse=True)


class FeedComposer:
    """Read-side views combining Store listings with visibility rules."""

    def __init__(self, store: SocialStore):
        self.store = store

    async def stream(self, viewer: UserId) -> list[PhotoRecord]:
        followed = await self.store.list_followed_ids(viewer)
        banned_by = await self.store.list_banner_ids(viewer)
        owners = stream_owner_ids(viewer, followed, banned_by)
        photos = await self.store.list_photos(owners, viewer)
        return _newest_first(photos)

    async def profile(self, requester: UserId, username: str) -> ProfileView:
        check_username(username)
        target = await self.store.get_user_id(username)
        if target is None:
            raise ResourceNotFoundError("User", username)

        banned_by_target = await self.store.relation_exists(
            RelationKind.BAN, target, requester,
        )
        check_not_banned(banned_by_target, requester)

        photos = await self.store.list_photos([target], requester)
        is_owner = requester == target
        is_followed = False
        is_banned = False
        if not is_owner:
            is_followed = await self.store.relation_exists(
                RelationKind.FOLLOW, requester, target,
            )
            is_banned = await self.store.relation_exists(
                RelationKind.BAN, requester, target,
            )

        return ProfileView(
            user_id=target,
            username=username,
            photos=_newest_first(photos),
            follower_count=await self.store.count_followers(target),
            following_count=await self.store.count_following(target),
            is_owner=is_owner,
            is_followed=is_followed,
            is_banned=is_banned,
        )

    async def search(self, fragment: str) -> list[str]:
        check_username(fragment)
        return await self.store.search_usernames(fragment)
