"""Comment Routes — create, list, delete comments on a photo.

Invariants:
    - Caller is authenticated but NOT reconciled against user_id: any user who
      can see the photo may comment on it
    - Listing is newest-first
"""

from fastapi import APIRouter, Depends, status

from wasaphoto.api.dependencies import get_photo_interactions, require_user
from wasaphoto.api.outcomes import outcome_response
from wasaphoto.core.domain_types import CommentId, PhotoId, UserId
from wasaphoto.schemas.photo import (
    CommentBody, CommentCreatedResponse, CommentResponse,
)
from wasaphoto.services.photo_interactions import PhotoInteractions

router = APIRouter(
    prefix="/api/v1/user/{user_id}/photos/{photo_id}/comments", tags=["comments"],
)


@router.post(
    "/", response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_photo(
    user_id: int,
    photo_id: int,
    body: CommentBody,
    caller: UserId = Depends(require_user("comment_photo")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    comment_id = await interactions.comment_photo(
        caller, PhotoId(photo_id), body.comment,
    )
    return CommentCreatedResponse(comment_id=comment_id)


@router.get("/", response_model=list[CommentResponse])
async def get_photo_comments(
    user_id: int,
    photo_id: int,
    caller: UserId = Depends(require_user("get_photo_comments")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    comments = await interactions.list_comments(caller, PhotoId(photo_id))
    return [CommentResponse.from_record(c) for c in comments]


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    user_id: int,
    photo_id: int,
    comment_id: int,
    caller: UserId = Depends(require_user("delete_comment")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    return outcome_response(
        await interactions.delete_comment(caller, CommentId(comment_id)),
    )
