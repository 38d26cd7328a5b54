from app.schemas import Like, LikesResponse
from app.services.base import BaseService


class LikeService(BaseService):
    resource = "like"
    schema = Like
    list_schema = LikesResponse
    list_field = "likes"
