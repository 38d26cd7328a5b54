"""
Business services of the Twitter API.

One service per resource (users, tweets, likes, followers, retweets) plus
authentication, all reachable through ``ServiceManager``.
"""

from app.services.auth import AuthService
from app.services.base import BaseService
from app.services.follower import FollowerService
from app.services.like import LikeService
from app.services.manager import ServiceManager
from app.services.retweet import RetweetService
from app.services.tweet import TweetService
from app.services.user import UserService

__all__ = [
    "AuthService",
    "BaseService",
    "FollowerService",
    "LikeService",
    "RetweetService",
    "ServiceManager",
    "TweetService",
    "UserService",
]
