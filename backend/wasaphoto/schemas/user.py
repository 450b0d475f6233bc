"""User Schemas — login/rename bodies and the profile view.

Invariants:
    - UsernameBody.name matches the username rule (3-16 of [a-zA-Z0-9_-])
    - is_followed/is_banned are False whenever is_owner is True
"""

from pydantic import BaseModel, Field

from wasaphoto.core.domain_types import ProfileView
from wasaphoto.core.validate_username import USERNAME_PATTERN
from wasaphoto.schemas.common import CamelModel
from wasaphoto.schemas.photo import PhotoSummary


class UsernameBody(BaseModel):
    """Body of session creation and username update."""
    name: str = Field(pattern=USERNAME_PATTERN)


class IdentifierResponse(BaseModel):
    identifier: int


class UserProfileResponse(CamelModel):
    identifier: int
    username: str
    photos: list[PhotoSummary]
    number_of_photos: int
    number_of_followers: int
    number_of_following: int
    is_followed: bool
    is_owner: bool
    is_banned: bool

    @classmethod
    def from_view(cls, view: ProfileView) -> "UserProfileResponse":
        return cls(
            identifier=view.user_id,
            username=view.username,
            photos=[PhotoSummary.from_record(p) for p in view.photos],
            number_of_photos=view.photo_count,
            number_of_followers=view.follower_count,
            number_of_following=view.following_count,
            is_followed=view.is_followed,
            is_owner=view.is_owner,
            is_banned=view.is_banned,
        )
