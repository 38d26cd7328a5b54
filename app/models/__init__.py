"""
Database models for the micro-blogging backend.

One table per resource; relationships between resources are plain id columns
resolved by query.
"""

from app.models.follower import Follower
from app.models.like import Like
from app.models.retweet import Retweet
from app.models.tweet import Tweet
from app.models.user import User

__all__ = [
    "User",
    "Tweet",
    "Like",
    "Follower",
    "Retweet",
]
