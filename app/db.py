import argparse
import asyncio

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app import models  # noqa: F401
from app.config import settings
from app.models.base import Base
from app.utils.logger import setup_logger

logger = setup_logger("db")


def create_app_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the async engine of the application database."""
    database_url = database_url or settings.database_url
    if not database_url:
        raise ValueError(
            "TWITTER_DATABASE_URL environment variable not set for Application DB"
        )
    if not database_url.startswith("postgresql+asyncpg://"):
        raise ValueError(f"Unsupported database URL prefix: {database_url}")

    return create_async_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=300,
        echo=False,
        connect_args={"timeout": 30},
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create the schema and every registered table if they do not exist."""
    if not Base.metadata.tables:
        logger.warning("Base.metadata.tables is EMPTY! No tables will be created.")
    else:
        logger.debug(f"Tables registered: {list(Base.metadata.tables.keys())}")

    async with engine.begin() as conn:
        await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {settings.schema_name}"))
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database schema '{settings.schema_name}' initialized.")


async def reset_db(engine: AsyncEngine) -> None:
    logger.warning(
        f"Resetting schema '{settings.schema_name}'. THIS IS A DESTRUCTIVE OPERATION."
    )
    async with engine.begin() as conn:
        await conn.execute(
            text(f"DROP SCHEMA IF EXISTS {settings.schema_name} CASCADE")
        )
    logger.info(f"Schema '{settings.schema_name}' dropped.")
    await init_db(engine)


async def list_tables_in_schema(engine: AsyncEngine, schema_name: str) -> list[str]:
    async with engine.connect() as conn:
        result = await conn.execute(
            text(
                "SELECT table_name FROM information_schema.tables WHERE table_schema = :schema_name ORDER BY table_name"
            ),
            {"schema_name": schema_name},
        )
        table_names = [row[0] for row in result.fetchall()]

    logger.info(f"Tables in schema '{schema_name}': {table_names}")
    return table_names


async def check_db_connection(engine: AsyncEngine) -> bool:
    """Performs a simple query to check actual DB connectivity."""
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            if result.scalar_one() != 1:
                raise RuntimeError("Test query returned an unexpected result.")
    except Exception as e:
        logger.error(f"Failed to execute test query: {e}", exc_info=True)
        raise RuntimeError("Database connectivity check failed.") from e

    logger.info("Successfully connected to the application database.")
    return True


async def _run(action: str, schema_name: str) -> None:
    engine = create_app_engine()
    try:
        if action == "init":
            await init_db(engine)
        elif action == "reset":
            await reset_db(engine)
        elif action == "list-tables":
            await list_tables_in_schema(engine, schema_name)
        elif action == "check":
            await check_db_connection(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description=f"Application Database ({settings.schema_name}) Utility"
    )
    parser.add_argument(
        "action",
        choices=["init", "reset", "list-tables", "check"],
        help=f"'init' to create tables in schema '{settings.schema_name}', "
        f"'reset' to drop and recreate it, "
        f"'list-tables' to show its tables, "
        f"'check' to test connectivity.",
    )
    parser.add_argument(
        "--schema",
        type=str,
        default=settings.schema_name,
        help="Schema name for list-tables.",
    )
    args = parser.parse_args()

    if args.action == "reset":
        confirm = input(
            f"WARNING: This will delete all data in schema '{settings.schema_name}'. Are you sure? (yes/no): "
        )
        if confirm.lower() != "yes":
            logger.info("Database reset cancelled by user.")
            raise SystemExit(0)

    asyncio.run(_run(args.action, args.schema))
    logger.info("Database utility script finished.")
