"""
Service-level routes that do not belong to a resource.
"""

from fastapi import APIRouter, status

from app.api.common import handle_response

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """API health check endpoint."""
    return handle_response(status.HTTP_200_OK, {"status": "ok"})
