from app.schemas import Retweet, RetweetsResponse
from app.services.base import BaseService


class RetweetService(BaseService):
    resource = "retweet"
    schema = Retweet
    list_schema = RetweetsResponse
    list_field = "retweets"
