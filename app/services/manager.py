"""
Service manager: the single object handlers reach the business layer through.

Built once at start-up from a storage facade exposing ``user``, ``tweets``,
``likes``, ``followers`` and ``retweets`` repositories.
"""

from app.services.auth import AuthService
from app.services.follower import FollowerService
from app.services.like import LikeService
from app.services.retweet import RetweetService
from app.services.tweet import TweetService
from app.services.user import UserService


class ServiceManager:
    def __init__(self, storage):
        self.storage = storage
        self.user = UserService(storage.user)
        self.tweets = TweetService(storage.tweets)
        self.likes = LikeService(storage.likes)
        self.followers = FollowerService(storage.followers)
        self.retweets = RetweetService(storage.retweets)
        self.auth = AuthService(storage.user)

    async def close(self) -> None:
        await self.storage.close()
