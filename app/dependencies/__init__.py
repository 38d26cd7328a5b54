from uuid import UUID

from fastapi import Request

from app.schemas import PrimaryKey
from app.services import ServiceManager


def get_services(request: Request) -> ServiceManager:
    """The service manager built at start-up."""
    return request.app.state.services


def path_key(id: UUID) -> PrimaryKey:
    """Resource key from the ``{id}`` path segment; non-UUID ids are a 400."""
    return PrimaryKey(id=str(id))


__all__ = ["get_services", "path_key"]
