"""
Helpers shared by every router: the response envelope and the per-request
time budget around service calls.
"""

import asyncio
from collections.abc import Awaitable
from typing import Any, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import AppError, RequestTimeout
from app.schemas import Response
from app.utils.logger import setup_logger

logger = setup_logger("api")

T = TypeVar("T")


def handle_response(
    status_code: int, data: Any = None, description: str = ""
) -> JSONResponse:
    """Wrap ``data`` in the ``{description, statusCode, data}`` envelope."""
    body = Response(
        description=description, statusCode=status_code, data=jsonable_encoder(data)
    )
    if status_code >= 400:
        logger.error(f"{status_code} {description}: {data}")
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def call_service(awaitable: Awaitable[T], failure: str) -> T:
    """
    Await a service call within the configured request timeout.

    Application errors leave with ``failure`` as their description; an
    expired budget cancels the call and raises ``RequestTimeout``.
    """
    try:
        return await asyncio.wait_for(
            awaitable, timeout=settings.request_timeout_seconds
        )
    except TimeoutError as e:
        timeout = RequestTimeout()
        timeout.description = failure
        raise timeout from e
    except AppError as e:
        e.description = failure
        raise
