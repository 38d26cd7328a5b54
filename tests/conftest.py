"""
This file contains shared fixtures and configuration for the test suite.

Pytest will automatically discover and use the fixtures defined in this file.

The service and HTTP layers run against ``InMemoryStorage``, a stand-in for
``app.db_handlers.Storage`` that keeps rows in dictionaries but honours the
same repository contract: generated ids, equal creation/update timestamps,
newest-first ordering, pagination, soft-deleted users and the uniqueness and
self-follow rules.
"""

import itertools
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.exceptions import ConstraintViolation, NoRowsAffected, NotFound
from app.schemas import GetListRequest
from app.services import ServiceManager

_ticks = itertools.count()
_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


def _now() -> datetime:
    # strictly increasing so newest-first ordering is deterministic
    return _EPOCH + timedelta(milliseconds=next(_ticks))


class InMemoryRepository:
    label = "record"
    pk = "id"
    columns: tuple[str, ...] = ()
    search_columns: tuple[str, ...] = ()
    filter_columns: tuple[str, ...] = ()
    has_updated_at = True

    def __init__(self):
        self.rows: dict[str, SimpleNamespace] = {}

    def _visible(self, row: SimpleNamespace) -> bool:
        return True

    def _check_constraints(self, obj_dict: dict) -> None:
        pass

    def _active(self, id: str) -> SimpleNamespace | None:
        row = self.rows.get(id)
        if row is None or not self._visible(row):
            return None
        return row

    async def create(self, obj_dict: dict) -> str:
        self._check_constraints(obj_dict)
        id = str(uuid4())
        now = _now()
        values = {column: obj_dict.get(column) for column in self.columns}
        values[self.pk] = id
        values["created_at"] = now
        if self.has_updated_at:
            values["updated_at"] = now
        self.rows[id] = SimpleNamespace(**values)
        return id

    async def get(self, id: str) -> SimpleNamespace:
        row = self._active(id)
        if row is None:
            raise NotFound(f"{self.label} {id} not found")
        return row

    async def exists(self, **attrs) -> bool:
        return any(
            all(getattr(row, name) == value for name, value in attrs.items())
            for row in self.rows.values()
        )

    async def get_list(self, request: GetListRequest):
        rows = [row for row in self.rows.values() if self._visible(row)]

        if request.search and self.search_columns:
            term = request.search.lower()
            rows = [
                row
                for row in rows
                if any(
                    term in (getattr(row, column) or "").lower()
                    for column in self.search_columns
                )
            ]
        for name in self.filter_columns:
            value = getattr(request, name)
            if value:
                rows = [row for row in rows if getattr(row, name) == value]

        rows.sort(key=lambda row: (row.created_at, getattr(row, self.pk)), reverse=True)
        page = rows[request.offset : request.offset + request.limit]
        return page, len(rows)

    async def update(self, id: str, update_data: dict) -> str:
        row = self._active(id)
        if row is None:
            raise NoRowsAffected(f"no rows affected while updating {self.label} {id}")
        for field, value in update_data.items():
            if value is not None and field in self.columns:
                setattr(row, field, value)
        row.updated_at = _now()
        return id

    async def remove(self, id: str) -> None:
        if self._active(id) is None:
            raise NoRowsAffected(f"no rows affected while deleting {self.label} {id}")
        del self.rows[id]


class InMemoryUserRepository(InMemoryRepository):
    label = "user"
    pk = "user_id"
    columns = (
        "username",
        "password_hash",
        "name",
        "bio",
        "profile_picture",
        "deleted_at",
    )
    search_columns = ("username", "name")

    def _visible(self, row):
        return row.deleted_at is None

    def _check_constraints(self, obj_dict):
        for row in self.rows.values():
            if row.username == obj_dict["username"]:
                raise ConstraintViolation(
                    f"username '{obj_dict['username']}' already exists"
                )

    async def remove(self, id):
        row = self._active(id)
        if row is None:
            raise NoRowsAffected(f"no rows affected while deleting user {id}")
        row.deleted_at = row.updated_at = _now()

    async def get_user_by_username(self, username):
        for row in self.rows.values():
            if row.username == username and self._visible(row):
                return row
        return None

    async def get_password_hash(self, id):
        row = self._active(id)
        if row is None:
            raise NotFound(f"user {id} not found")
        return row.password_hash

    async def update_password(self, id, password_hash):
        row = self._active(id)
        if row is None:
            raise NoRowsAffected(f"no rows affected while updating user {id} password")
        row.password_hash = password_hash
        row.updated_at = _now()


class InMemoryTweetRepository(InMemoryRepository):
    label = "tweet"
    pk = "tweet_id"
    columns = ("user_id", "content", "image_url", "video_url")
    search_columns = ("content",)
    filter_columns = ("user_id",)


class InMemoryLikeRepository(InMemoryRepository):
    label = "like"
    pk = "like_id"
    columns = ("tweet_id", "user_id")
    filter_columns = ("tweet_id", "user_id")
    has_updated_at = False

    def _check_constraints(self, obj_dict):
        for row in self.rows.values():
            if (row.tweet_id, row.user_id) == (obj_dict["tweet_id"], obj_dict["user_id"]):
                raise ConstraintViolation("user has already liked this tweet")


class InMemoryFollowerRepository(InMemoryRepository):
    label = "follower"
    pk = "follower_id"
    columns = ("user_id", "follower_user_id")
    filter_columns = ("user_id", "follower_user_id")
    has_updated_at = False

    def _check_constraints(self, obj_dict):
        if obj_dict["user_id"] == obj_dict["follower_user_id"]:
            raise ConstraintViolation("users cannot follow themselves")
        for row in self.rows.values():
            if (row.user_id, row.follower_user_id) == (
                obj_dict["user_id"],
                obj_dict["follower_user_id"],
            ):
                raise ConstraintViolation("user already follows this user")


class InMemoryRetweetRepository(InMemoryRepository):
    label = "retweet"
    pk = "retweet_id"
    columns = ("original_tweet_id", "user_id")
    filter_columns = ("user_id", "original_tweet_id")
    has_updated_at = False


class InMemoryStorage:
    def __init__(self):
        self.user = InMemoryUserRepository()
        self.tweets = InMemoryTweetRepository()
        self.likes = InMemoryLikeRepository()
        self.followers = InMemoryFollowerRepository()
        self.retweets = InMemoryRetweetRepository()
        self.closed = False

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def services(storage: InMemoryStorage) -> ServiceManager:
    return ServiceManager(storage)


@pytest.fixture
def app(services: ServiceManager) -> FastAPI:
    """
    Create a new application instance wired to the in-memory services.
    """
    # Import the factory function here to ensure it's fresh for each test.
    from main import create_app

    return create_app(services=services)


@pytest.fixture
def client(app: FastAPI):
    """
    Fixture to get a test client for making API requests.
    The TestClient handles the application's lifespan events (startup/shutdown).
    """
    with TestClient(app) as c:
        yield c
