from fastapi import APIRouter, Depends, Query, status

from app.api.common import call_service, handle_response
from app.config import settings
from app.dependencies import get_services, path_key
from app.schemas import CreateFollower, GetListRequest, PrimaryKey
from app.services import ServiceManager

router = APIRouter(tags=["follower"])


@router.post("/follower", status_code=status.HTTP_201_CREATED)
async def create_follower(
    follower_data: CreateFollower, services: ServiceManager = Depends(get_services)
):
    """``follower_user_id`` starts following ``user_id``."""
    follower = await call_service(
        services.followers.create(follower_data),
        "error while creating follower relationship",
    )
    return handle_response(status.HTTP_201_CREATED, follower)


@router.get("/follower/{id}")
async def get_follower(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    follower = await call_service(
        services.followers.get(key.id), "error while getting follower by id"
    )
    return handle_response(status.HTTP_200_OK, follower)


@router.get("/followers")
async def get_followers(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(settings.default_page_limit, description="Page size"),
    user_id: str | None = Query(None, description="Followers of this user"),
    follower_user_id: str | None = Query(
        None, description="Users followed by this user"
    ),
    services: ServiceManager = Depends(get_services),
):
    request = GetListRequest(
        page=page, limit=limit, user_id=user_id, follower_user_id=follower_user_id
    )
    followers = await call_service(
        services.followers.get_list(request), "error while getting list of followers"
    )
    return handle_response(status.HTTP_200_OK, followers)


@router.delete("/follower/{id}")
async def delete_follower(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    await call_service(
        services.followers.delete(key.id),
        "error while deleting follower relationship",
    )
    return handle_response(
        status.HTTP_200_OK, "follower relationship successfully deleted"
    )
