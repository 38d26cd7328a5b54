from datetime import datetime
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from app.config import settings


# ===== Shared request/response shapes =====


class PrimaryKey(BaseModel):
    id: str = Field(..., description="String-encoded UUID of the resource")


class GetListRequest(BaseModel):
    """
    Pagination and filter parameters of every list endpoint.

    ``page`` and ``limit`` are clamped instead of rejected: a page below 1 is
    treated as the first page, a non-positive limit falls back to the default
    page size and an oversized limit is capped. Filters left empty do not
    restrict the result.
    """

    page: int = Field(default=1, description="1-based page number")
    limit: int = Field(
        default=settings.default_page_limit, description="Maximum items per page"
    )
    search: str = Field(default="", description="Case-insensitive substring")
    user_id: str | None = Field(default=None, description="Owner/user filter")
    tweet_id: str | None = None
    follower_user_id: str | None = None
    original_tweet_id: str | None = None

    @field_validator("page", mode="after")
    @classmethod
    def clamp_page(cls, v: int) -> int:
        return v if v >= 1 else 1

    @field_validator("limit", mode="after")
    @classmethod
    def clamp_limit(cls, v: int) -> int:
        if v <= 0:
            return settings.default_page_limit
        return min(v, settings.max_page_limit)

    @field_validator("search", mode="before")
    @classmethod
    def normalize_search(cls, v: Any) -> str:
        return v or ""

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Response(BaseModel):
    """Envelope wrapping every HTTP response, success or failure."""

    description: str = ""
    statusCode: int
    data: Any = None


# ===== User =====


class CreateUser(BaseModel):
    username: str = Field(
        ..., min_length=3, max_length=50, description="Username for the new account"
    )
    password: str = Field(
        ..., min_length=6, max_length=100, description="Password for the new account"
    )
    name: str = Field(default="", max_length=100)
    bio: str = Field(default="")
    profile_picture: str = Field(default="", max_length=1024)


class UpdateUser(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    bio: str | None = None
    profile_picture: str | None = Field(default=None, max_length=1024)


class UpdateUserPassword(BaseModel):
    old_password: str = Field(..., description="Current password")
    new_password: str = Field(
        ..., min_length=6, max_length=100, description="Replacement password"
    )


class User(BaseModel):
    id: str = Field(..., validation_alias=AliasChoices("id", "user_id"))
    username: str
    name: str = ""
    bio: str = ""
    profile_picture: str = ""
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UsersResponse(BaseModel):
    users: list[User] = Field(default_factory=list)
    count: int = 0


class UserLogin(BaseModel):
    username: str = Field(..., description="Username for login")
    password: str = Field(..., description="Password for login")


class Token(BaseModel):
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


# ===== Tweet =====


class CreateTweet(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=36)
    content: str = Field(..., min_length=1)
    image_url: str | None = Field(default=None, max_length=1024)
    video_url: str | None = Field(default=None, max_length=1024)


class UpdateTweet(BaseModel):
    content: str | None = Field(default=None, min_length=1)
    image_url: str | None = Field(default=None, max_length=1024)
    video_url: str | None = Field(default=None, max_length=1024)


class Tweet(BaseModel):
    id: str = Field(..., validation_alias=AliasChoices("id", "tweet_id"))
    user_id: str
    content: str
    image_url: str | None = None
    video_url: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TweetsResponse(BaseModel):
    tweets: list[Tweet] = Field(default_factory=list)
    count: int = 0


# ===== Like =====


class CreateLike(BaseModel):
    tweet_id: str = Field(..., min_length=1, max_length=36)
    user_id: str = Field(..., min_length=1, max_length=36)


class Like(BaseModel):
    like_id: str
    tweet_id: str
    user_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LikesResponse(BaseModel):
    likes: list[Like] = Field(default_factory=list)
    count: int = 0


# ===== Follower =====


class CreateFollower(BaseModel):
    user_id: str = Field(
        ..., min_length=1, max_length=36, description="User being followed"
    )
    follower_user_id: str = Field(
        ..., min_length=1, max_length=36, description="User who follows"
    )


class Follower(BaseModel):
    follower_id: str
    user_id: str
    follower_user_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FollowersResponse(BaseModel):
    followers: list[Follower] = Field(default_factory=list)
    count: int = 0


# ===== Retweet =====


class CreateRetweet(BaseModel):
    original_tweet_id: str = Field(..., min_length=1, max_length=36)
    user_id: str = Field(..., min_length=1, max_length=36)


class Retweet(BaseModel):
    retweet_id: str
    original_tweet_id: str
    user_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RetweetsResponse(BaseModel):
    retweets: list[Retweet] = Field(default_factory=list)
    count: int = 0
