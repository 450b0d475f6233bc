"""Social Action Routes — follow/unfollow and ban/unban by username.

Invariants:
    - Success status comes from the ActionOutcome the policy returns (api/outcomes.py)
    - Status on failure comes from RelationshipPolicy (404/403/409)
"""

from fastapi import APIRouter, Depends, status

from wasaphoto.api.dependencies import get_relationship_policy, require_user
from wasaphoto.api.outcomes import outcome_response
from wasaphoto.core.domain_types import UserId
from wasaphoto.schemas.common import MessageResponse
from wasaphoto.services.relationship_policy import RelationshipPolicy

router = APIRouter(prefix="/api/v1/user/{user_id}", tags=["social"])


@router.put(
    "/follow/{username}", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def follow_user(
    user_id: int,
    username: str,
    caller: UserId = Depends(require_user("follow_user")),
    policy: RelationshipPolicy = Depends(get_relationship_policy),
):
    return outcome_response(await policy.follow(caller, username))


@router.delete("/follow/{username}", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow_user(
    user_id: int,
    username: str,
    caller: UserId = Depends(require_user("unfollow_user")),
    policy: RelationshipPolicy = Depends(get_relationship_policy),
):
    return outcome_response(await policy.unfollow(caller, username))


@router.put(
    "/ban/{username}", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def ban_user(
    user_id: int,
    username: str,
    caller: UserId = Depends(require_user("ban_user")),
    policy: RelationshipPolicy = Depends(get_relationship_policy),
):
    return outcome_response(await policy.ban(caller, username))


@router.delete("/ban/{username}", status_code=status.HTTP_204_NO_CONTENT)
async def unban_user(
    user_id: int,
    username: str,
    caller: UserId = Depends(require_user("unban_user")),
    policy: RelationshipPolicy = Depends(get_relationship_policy),
):
    return outcome_response(await policy.unban(caller, username))
