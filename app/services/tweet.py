from app.schemas import Tweet, TweetsResponse
from app.services.base import BaseService


class TweetService(BaseService):
    resource = "tweet"
    schema = Tweet
    list_schema = TweetsResponse
    list_field = "tweets"
