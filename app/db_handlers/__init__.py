from app.db_handlers.base import BaseDBHandler, check_local_db
from app.db_handlers.follower import FollowerDBHandler
from app.db_handlers.like import LikeDBHandler
from app.db_handlers.retweet import RetweetDBHandler
from app.db_handlers.storage import Storage
from app.db_handlers.tweet import TweetDBHandler
from app.db_handlers.user import UserDBHandler

__all__ = [
    "BaseDBHandler",
    "check_local_db",
    "Storage",
    "UserDBHandler",
    "TweetDBHandler",
    "LikeDBHandler",
    "FollowerDBHandler",
    "RetweetDBHandler",
]
