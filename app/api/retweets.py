from fastapi import APIRouter, Depends, Query, status

from app.api.common import call_service, handle_response
from app.config import settings
from app.dependencies import get_services, path_key
from app.schemas import CreateRetweet, GetListRequest, PrimaryKey
from app.services import ServiceManager

router = APIRouter(tags=["retweet"])


@router.post("/retweet", status_code=status.HTTP_201_CREATED)
async def create_retweet(
    retweet_data: CreateRetweet, services: ServiceManager = Depends(get_services)
):
    """Retweet an existing tweet; responds with the new retweet id."""
    retweet = await call_service(
        services.retweets.create(retweet_data), "error while creating retweet"
    )
    return handle_response(status.HTTP_201_CREATED, retweet.retweet_id)


@router.get("/retweet/{id}")
async def get_retweet(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    retweet = await call_service(
        services.retweets.get(key.id), "error while getting retweet by id"
    )
    return handle_response(status.HTTP_200_OK, retweet)


@router.get("/retweets")
async def get_retweets(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(settings.default_page_limit, description="Page size"),
    user_id: str | None = Query(None, description="Only retweets by this user"),
    original_tweet_id: str | None = Query(
        None, description="Only retweets of this tweet"
    ),
    services: ServiceManager = Depends(get_services),
):
    request = GetListRequest(
        page=page, limit=limit, user_id=user_id, original_tweet_id=original_tweet_id
    )
    retweets = await call_service(
        services.retweets.get_list(request), "error while getting retweets"
    )
    return handle_response(status.HTTP_200_OK, retweets)


@router.delete("/retweet/{id}")
async def delete_retweet(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    await call_service(
        services.retweets.delete(key.id), "error while deleting retweet"
    )
    return handle_response(status.HTTP_200_OK, "retweet successfully deleted")
