#!/usr/bin/env python3

"""
Main application entry point for the Twitter API backend.

Architecture: FastAPI application over handlers, services and repositories
backed by PostgreSQL.
Key Features: Lifecycle management, database health checks, error mapping to
the response envelope, CORS configuration.
"""

import asyncio
import sys

# Add this block to switch asyncio event loop policy on Windows
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

import errno
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.auth import router as auth_router
from app.api.common import handle_response
from app.api.followers import router as followers_router
from app.api.http import router as http_router
from app.api.likes import router as likes_router
from app.api.retweets import router as retweets_router
from app.api.tweets import router as tweets_router
from app.api.users import router as users_router
from app.config import settings
from app.db import (
    build_session_factory,
    check_db_connection,
    create_app_engine,
    init_db,
)
from app.db_handlers import Storage
from app.exceptions import AppError
from app.services import ServiceManager
from app.utils.logger import setup_logger

logger = setup_logger("main")


async def build_services() -> ServiceManager:
    """Connect to the database, create the tables and wire the service layer."""
    engine = create_app_engine()

    logger.info("Initializing database...")
    await init_db(engine)
    logger.info("Database initialization complete.")

    logger.info("Checking database connectivity...")
    await check_db_connection(engine)
    logger.info("Database connectivity confirmed.")

    storage = Storage(build_session_factory(engine), engine=engine)
    return ServiceManager(storage)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}")
    return "; ".join(messages)


def create_app(services: ServiceManager | None = None) -> FastAPI:
    """
    Build the application.

    When ``services`` is given it is used as is and no database is touched at
    start-up; otherwise the lifespan connects to the configured database.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup...")
        if services is not None:
            app.state.services = services
        else:
            try:
                app.state.services = await build_services()
            except Exception as e:
                logger.critical(f"Startup error: {e}")
                raise SystemExit(f"Startup failed: {e}") from e

        logger.info("Twitter API startup successful.")
        yield

        logger.info("Twitter API shutdown...")
        if services is None:
            await app.state.services.close()
        logger.info("Shutdown complete.")

    app = FastAPI(title="Twitter API", lifespan=lifespan)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        description = exc.description or f"error while handling {request.url.path}"
        return handle_response(exc.status_code, exc.message, description)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        return handle_response(
            status.HTTP_400_BAD_REQUEST,
            _format_validation_errors(exc),
            "error while reading request from client",
        )

    @app.exception_handler(OSError)
    async def oserror_exception_handler(request: Request, exc: OSError):
        logger.error(f"OSError caught: {exc}, errno: {exc.errno}")
        if exc.errno in [errno.ETIMEDOUT, errno.ECONNREFUSED]:
            logger.error(
                f"Returning 503 due to DB connection issue: {settings.db_unavailable_hint}"
            )
            return handle_response(
                status.HTTP_503_SERVICE_UNAVAILABLE,
                settings.db_unavailable_hint,
                "database unavailable",
            )
        return handle_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"An unexpected OS error occurred: {exc}",
            "internal server error",
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return handle_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), "internal server error"
        )

    app.include_router(http_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(tweets_router)
    app.include_router(likes_router)
    app.include_router(followers_router)
    app.include_router(retweets_router)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    return app


app = create_app()


def main():
    port = int(settings.server_port)
    host = settings.server_host

    logger.info(f"Starting Twitter API server on {host}:{port}")

    try:
        uvicorn.run(
            "main:app" if settings.server_workers > 1 else app,
            host=host,
            port=port,
            workers=settings.server_workers,
        )
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
