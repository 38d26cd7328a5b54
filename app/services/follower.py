from app.schemas import Follower, FollowersResponse
from app.services.base import BaseService


class FollowerService(BaseService):
    resource = "follower"
    schema = Follower
    list_schema = FollowersResponse
    list_field = "followers"
