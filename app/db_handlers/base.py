from __future__ import annotations

from functools import wraps
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select

from app.exceptions import (
    ConstraintViolation,
    NoRowsAffected,
    NotFound,
    PersistenceError,
)
from app.models.base import Base, new_id
from app.schemas import GetListRequest
from app.utils.logger import setup_logger

logger = setup_logger("db_handlers")


ModelType = TypeVar("ModelType", bound=Base)


def check_local_db(func):
    """
    Database session decorator with transaction management.

    When the caller already passes ``db`` the call joins that session and the
    outermost caller owns the transaction. Otherwise a session is opened from
    the handler's session factory, committed on success and rolled back on
    failure. Driver errors leave this decorator translated into the
    application error taxonomy.
    """

    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            if kwargs.get("db") is not None:
                return await func(self, *args, **kwargs)

            async with self.session_factory() as db:
                kwargs["db"] = db
                try:
                    result = await func(self, *args, **kwargs)
                    await db.commit()
                    return result
                except Exception:
                    await db.rollback()
                    raise
        except IntegrityError as e:
            logger.warning(
                f"IntegrityError in {self.model.__name__}.{func.__name__}: {e.orig}"
            )
            raise ConstraintViolation(str(e.orig)) from e
        except SQLAlchemyError as e:
            logger.error(
                f"Database error in {self.model.__name__}.{func.__name__}: {e}",
                exc_info=True,
            )
            raise PersistenceError(str(e)) from e

    return wrapper


class BaseDBHandler(Generic[ModelType]):
    """
    Generic repository owning exactly one table.

    Subclasses declare which text columns ``search`` matches against and
    which id columns can be used as exact-match list filters; the names of
    the filter columns double as attribute names on ``GetListRequest``.
    """

    search_columns: tuple[str, ...] = ()
    filter_columns: tuple[str, ...] = ()

    def __init__(self, model: type[ModelType], session_factory: async_sessionmaker):
        self.model = model
        self.table = model.__table__
        self.pk = list(self.table.primary_key.columns)[0]
        self.session_factory = session_factory
        self.label = model.__name__.lower()

    # ── Query construction ────────────────────────────────

    def base_conditions(self) -> list:
        """Predicates every read and write of this table must honour."""
        return []

    def list_conditions(self, request: GetListRequest) -> list:
        conditions = self.base_conditions()

        if request.search and self.search_columns:
            conditions.append(
                or_(
                    *(
                        self.table.c[name].icontains(request.search, autoescape=True)
                        for name in self.search_columns
                    )
                )
            )

        for name in self.filter_columns:
            value = getattr(request, name, None)
            if value:
                conditions.append(self.table.c[name] == value)

        return conditions

    def build_list_statements(self, request: GetListRequest) -> tuple[Select, Select]:
        """Return the COUNT and the page statements, sharing one predicate list."""
        conditions = self.list_conditions(request)

        count_stmt = select(func.count()).select_from(self.table).where(*conditions)
        rows_stmt = (
            select(self.model)
            .where(*conditions)
            .order_by(self.table.c.created_at.desc(), self.pk.desc())
            .offset(request.offset)
            .limit(request.limit)
        )
        return count_stmt, rows_stmt

    # ── CRUD ──────────────────────────────────────────────

    @check_local_db
    async def create(self, obj_dict: dict[str, Any], *, db: AsyncSession = None) -> str:
        """Insert one row with a freshly generated id and return that id."""
        values = dict(obj_dict)
        values[self.pk.name] = new_id()

        result = await db.execute(insert(self.table).values(**values))
        if result.rowcount == 0:
            logger.error(f"No rows affected while inserting {self.label}")
            raise NoRowsAffected(f"no rows affected while inserting {self.label}")

        logger.info(f"Created {self.label} {values[self.pk.name]}")
        return values[self.pk.name]

    @check_local_db
    async def get(self, id: str, *, db: AsyncSession = None) -> ModelType:
        """Get a single record by its primary key or raise NotFound."""
        stmt = select(self.model).where(self.pk == id, *self.base_conditions())
        result = await db.execute(stmt)
        obj = result.scalars().first()
        if obj is None:
            raise NotFound(f"{self.label} {id} not found")
        return obj

    @check_local_db
    async def exists(self, *, db: AsyncSession = None, **attrs) -> bool:
        stmt = (
            select(self.pk)
            .where(*(self.table.c[name] == value for name, value in attrs.items()))
            .limit(1)
        )
        result = await db.execute(stmt)
        return result.first() is not None

    @check_local_db
    async def get_list(
        self, request: GetListRequest, *, db: AsyncSession = None
    ) -> tuple[list[ModelType], int]:
        """Return one page of records and the total number of matching rows."""
        count_stmt, rows_stmt = self.build_list_statements(request)

        count = (await db.execute(count_stmt)).scalar_one()
        rows = (await db.execute(rows_stmt)).scalars().all()
        return list(rows), count

    @check_local_db
    async def update(
        self, id: str, update_data: dict[str, Any], *, db: AsyncSession = None
    ) -> str:
        """
        Write the non-None values of ``update_data`` to an existing row.

        ``updated_at`` is refreshed even when nothing else changes.
        """
        values = {
            field: value
            for field, value in update_data.items()
            if value is not None and field in self.table.c
        }
        if "updated_at" in self.table.c:
            values["updated_at"] = func.now()
        if not values:
            raise NoRowsAffected(f"nothing to update on {self.label} {id}")

        stmt = (
            update(self.table)
            .where(self.pk == id, *self.base_conditions())
            .values(**values)
        )
        result = await db.execute(stmt)
        if result.rowcount == 0:
            logger.error(f"No rows affected while updating {self.label} {id}")
            raise NoRowsAffected(f"no rows affected while updating {self.label} {id}")
        return id

    @check_local_db
    async def remove(self, id: str, *, db: AsyncSession = None) -> None:
        """Delete a record by its primary key."""
        result = await db.execute(delete(self.table).where(self.pk == id))
        if result.rowcount == 0:
            logger.error(f"No rows affected while deleting {self.label} {id}")
            raise NoRowsAffected(f"no rows affected while deleting {self.label} {id}")
        logger.info(f"Deleted {self.label} {id}")
