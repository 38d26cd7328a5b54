from fastapi import APIRouter, Depends, Query, status

from app.api.common import call_service, handle_response
from app.config import settings
from app.dependencies import get_services, path_key
from app.schemas import CreateTweet, GetListRequest, PrimaryKey, UpdateTweet
from app.services import ServiceManager

router = APIRouter(tags=["tweet"])


@router.post("/tweet", status_code=status.HTTP_201_CREATED)
async def create_tweet(
    tweet_data: CreateTweet, services: ServiceManager = Depends(get_services)
):
    tweet = await call_service(
        services.tweets.create(tweet_data), "error while creating tweet"
    )
    return handle_response(status.HTTP_201_CREATED, tweet)


@router.get("/tweet/{id}")
async def get_tweet(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    tweet = await call_service(
        services.tweets.get(key.id), "error while getting tweet by id"
    )
    return handle_response(status.HTTP_200_OK, tweet)


@router.get("/tweets")
async def get_tweets(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(settings.default_page_limit, description="Page size"),
    search: str = Query("", description="Matches tweet content"),
    user_id: str | None = Query(None, description="Only tweets of this user"),
    services: ServiceManager = Depends(get_services),
):
    request = GetListRequest(page=page, limit=limit, search=search, user_id=user_id)
    tweets = await call_service(
        services.tweets.get_list(request), "error while getting list of tweets"
    )
    return handle_response(status.HTTP_200_OK, tweets)


@router.put("/tweet/{id}")
async def update_tweet(
    tweet_data: UpdateTweet,
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    tweet = await call_service(
        services.tweets.update(key.id, tweet_data), "error while updating tweet"
    )
    return handle_response(status.HTTP_200_OK, tweet)


@router.delete("/tweet/{id}")
async def delete_tweet(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    await call_service(services.tweets.delete(key.id), "error while deleting tweet")
    return handle_response(status.HTTP_200_OK, "tweet successfully deleted")
