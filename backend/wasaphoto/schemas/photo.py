"""Photo Schemas — photo entries, comment input and comment listings.

Invariants:
    - CommentBody.comment: 1-2000 chars (whitespace-only rejected by the service)
    - PhotoSummary never carries image bytes
"""

from datetime import datetime

from pydantic import BaseModel, Field

from wasaphoto.core.domain_types import CommentRecord, PhotoRecord
from wasaphoto.schemas.common import CamelModel


class PhotoSummary(CamelModel):
    """One photo in a stream or profile, annotated for the viewer."""
    id: int
    owner: int
    owner_username: str
    created_at: datetime
    number_of_likes: int
    number_of_comments: int
    is_liked: bool

    @classmethod
    def from_record(cls, record: PhotoRecord) -> "PhotoSummary":
        return cls(
            id=record.id,
            owner=record.owner,
            owner_username=record.owner_username,
            created_at=record.created_at,
            number_of_likes=record.like_count,
            number_of_comments=record.comment_count,
            is_liked=record.liked_by_viewer,
        )


class PhotoCreatedResponse(BaseModel):
    message: str
    photo_id: int


class CommentBody(BaseModel):
    comment: str = Field(min_length=1, max_length=2000)


class CommentCreatedResponse(BaseModel):
    comment_id: int


class CommentResponse(CamelModel):
    id: int
    content: str
    created_at: datetime
    owner: str
    photo: int

    @classmethod
    def from_record(cls, record: CommentRecord) -> "CommentResponse":
        return cls(
            id=record.id,
            content=record.content,
            created_at=record.created_at,
            owner=record.owner_username,
            photo=record.photo_id,
        )
