"""Profile Routes — username update, profile page, user search.

Invariants:
    - All three are bound to the caller through the user_id path parameter
    - Path usernames are validated by the services (400 on mismatch)
"""

from fastapi import APIRouter, Depends

from wasaphoto.api.dependencies import (
    get_account_service, get_feed_composer, require_user,
)
from wasaphoto.core.domain_types import UserId
from wasaphoto.schemas.common import MessageResponse
from wasaphoto.schemas.user import UserProfileResponse, UsernameBody
from wasaphoto.services.account_service import AccountService
from wasaphoto.services.feed_composer import FeedComposer

router = APIRouter(prefix="/api/v1/user/{user_id}", tags=["profile"])


@router.put("/update-username", response_model=MessageResponse)
async def set_my_username(
    user_id: int,
    body: UsernameBody,
    caller: UserId = Depends(require_user("set_my_username")),
    accounts: AccountService = Depends(get_account_service),
):
    await accounts.set_username(caller, body.name)
    return MessageResponse(message="Username updated")


@router.get("/profile-page/{username}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: int,
    username: str,
    caller: UserId = Depends(require_user("get_user_profile")),
    feed: FeedComposer = Depends(get_feed_composer),
):
    view = await feed.profile(caller, username)
    return UserProfileResponse.from_view(view)


@router.get("/search/{username}", response_model=list[str])
async def search_user(
    user_id: int,
    username: str,
    caller: UserId = Depends(require_user("search_user")),
    feed: FeedComposer = Depends(get_feed_composer),
):
    """Usernames containing the fragment (case-sensitive)."""
    return await feed.search(username)
