# Authentication route: exchange username and password for a JWT

from fastapi import APIRouter, Depends, status

from app.api.common import call_service, handle_response
from app.dependencies import get_services
from app.schemas import UserLogin
from app.services import ServiceManager

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login_user(
    user_data: UserLogin, services: ServiceManager = Depends(get_services)
):
    """Authenticate a user and return a bearer token for API access."""
    token = await call_service(
        services.auth.login(user_data), "error while logging in"
    )
    return handle_response(status.HTTP_200_OK, token)
