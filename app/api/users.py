"""
User routes: registration, profile reads and updates, password change and
(soft) deletion.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.common import call_service, handle_response
from app.config import settings
from app.dependencies import get_services, path_key
from app.schemas import (
    CreateUser,
    GetListRequest,
    PrimaryKey,
    UpdateUser,
    UpdateUserPassword,
)
from app.services import ServiceManager

router = APIRouter(tags=["user"])


@router.post("/user", status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: CreateUser, services: ServiceManager = Depends(get_services)
):
    """Create a new user; the password is stored as a bcrypt hash."""
    user = await call_service(
        services.user.create(user_data), "error while creating user"
    )
    return handle_response(status.HTTP_201_CREATED, user)


@router.get("/user/{id}")
async def get_user(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    user = await call_service(
        services.user.get(key.id), "error while getting user by id"
    )
    return handle_response(status.HTTP_200_OK, user)


@router.get("/users")
async def get_users(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(settings.default_page_limit, description="Page size"),
    search: str = Query("", description="Matches username or name"),
    services: ServiceManager = Depends(get_services),
):
    request = GetListRequest(page=page, limit=limit, search=search)
    users = await call_service(
        services.user.get_list(request), "error while getting list of users"
    )
    return handle_response(status.HTTP_200_OK, users)


@router.put("/user/{id}")
async def update_user(
    user_data: UpdateUser,
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    """Update profile fields; omitted fields keep their stored values."""
    user = await call_service(
        services.user.update(key.id, user_data), "error while updating user"
    )
    return handle_response(status.HTTP_200_OK, user)


@router.delete("/user/{id}")
async def delete_user(
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    await call_service(services.user.delete(key.id), "error while deleting user")
    return handle_response(status.HTTP_200_OK, "user successfully deleted")


@router.patch("/user/{id}")
async def update_user_password(
    password_data: UpdateUserPassword,
    key: PrimaryKey = Depends(path_key),
    services: ServiceManager = Depends(get_services),
):
    """Change the password after verifying the current one."""
    await call_service(
        services.user.update_password(key.id, password_data),
        "error while updating user password",
    )
    return handle_response(status.HTTP_200_OK, "password successfully updated")
