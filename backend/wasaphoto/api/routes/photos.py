"""Photo Routes — stream, upload, fetch, delete, like, unlike.

Invariants:
    - Upload body is the raw image bytes (any content type)
    - Fetch returns raw bytes with the configured media type
    - Like/unlike paths carry two identities: user_id is the photo owner,
      authenticated_user_id is the liker and must match the credential
"""

from fastapi import APIRouter, Depends, Request, Response, status

from wasaphoto.api.dependencies import (
    get_feed_composer, get_photo_interactions, require_user,
)
from wasaphoto.api.outcomes import outcome_response
from wasaphoto.config import get_settings
from wasaphoto.core.domain_types import PhotoId, UserId
from wasaphoto.schemas.common import CREATED_MESSAGE, MessageResponse
from wasaphoto.schemas.photo import PhotoCreatedResponse, PhotoSummary
from wasaphoto.services.feed_composer import FeedComposer
from wasaphoto.services.photo_interactions import PhotoInteractions

router = APIRouter(prefix="/api/v1/user/{user_id}/photos", tags=["photos"])


@router.get("/", response_model=list[PhotoSummary])
async def get_my_stream(
    user_id: int,
    caller: UserId = Depends(require_user("get_my_stream")),
    feed: FeedComposer = Depends(get_feed_composer),
):
    photos = await feed.stream(caller)
    return [PhotoSummary.from_record(p) for p in photos]


@router.post(
    "/", response_model=PhotoCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_photo(
    user_id: int,
    request: Request,
    caller: UserId = Depends(require_user("upload_photo")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    content = await request.body()
    photo_id = await interactions.upload_photo(caller, content)
    return PhotoCreatedResponse(message=CREATED_MESSAGE.message, photo_id=photo_id)


@router.get("/{photo_id}/", response_class=Response)
async def get_photo(
    user_id: int,
    photo_id: int,
    caller: UserId = Depends(require_user("get_photo")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    content = await interactions.get_photo(caller, PhotoId(photo_id))
    return Response(content=content, media_type=get_settings().photo_media_type)


@router.delete("/{photo_id}/", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(
    user_id: int,
    photo_id: int,
    caller: UserId = Depends(require_user("delete_photo")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    return outcome_response(
        await interactions.delete_photo(caller, PhotoId(photo_id)),
    )


@router.put(
    "/{photo_id}/likes/{authenticated_user_id}", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_photo(
    user_id: int,
    photo_id: int,
    authenticated_user_id: int,
    caller: UserId = Depends(require_user("like_photo")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    return outcome_response(
        await interactions.like_photo(caller, PhotoId(photo_id), UserId(user_id)),
    )


@router.delete(
    "/{photo_id}/likes/{authenticated_user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def unlike_photo(
    user_id: int,
    photo_id: int,
    authenticated_user_id: int,
    caller: UserId = Depends(require_user("unlike_photo")),
    interactions: PhotoInteractions = Depends(get_photo_interactions),
):
    return outcome_response(
        await interactions.unlike_photo(caller, PhotoId(photo_id), UserId(user_id)),
    )
