from fastapi import APIRouter, Depends, Query, status

from app.api.common import call_service, handle_response
from app.config import settings
from app.dependencies import get_services, path_key
from app.schemas import CreateLike, GetListRequest, PrimaryKey
from app.services import ServiceManager

router = APIRouter(tags=["like"])


@router.post("/like", status_code=status.HTTP_201_CREATED)
async def like_tweet(
    like_data: CreateLike, services: ServiceManager = Depends(get_services)
):
    """A user likes a tweet; each user can like a tweet once."""
    like = await call_service(
        services.likes.create(like_data), "error while liking tweet"
    )
    return handle_response(status.HTTP_201_CREATED, like)


@router.get("/like/{id}")
async def get_like(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    like = await call_service(
        services.likes.get(key.id), "error while getting like by id"
    )
    return handle_response(status.HTTP_200_OK, like)


@router.get("/likes")
async def get_likes(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(settings.default_page_limit, description="Page size"),
    tweet_id: str | None = Query(None, description="Only likes of this tweet"),
    user_id: str | None = Query(None, description="Only likes by this user"),
    services: ServiceManager = Depends(get_services),
):
    request = GetListRequest(
        page=page, limit=limit, tweet_id=tweet_id, user_id=user_id
    )
    likes = await call_service(
        services.likes.get_list(request), "error while getting likes"
    )
    return handle_response(status.HTTP_200_OK, likes)


@router.get("/likes/{tweet_id}")
async def get_tweet_likes(
    tweet_id: str,
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(settings.default_page_limit, description="Page size"),
    services: ServiceManager = Depends(get_services),
):
    """Likes received by one tweet."""
    request = GetListRequest(page=page, limit=limit, tweet_id=tweet_id)
    likes = await call_service(
        services.likes.get_list(request), "error while getting likes"
    )
    return handle_response(status.HTTP_200_OK, likes)


@router.delete("/like/{id}")
async def unlike_tweet(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    await call_service(services.likes.delete(key.id), "error while unliking tweet")
    return handle_response(status.HTTP_200_OK, "successfully unliked")
