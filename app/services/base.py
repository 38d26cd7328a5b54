"""
Generic resource service.

Sits between the HTTP handlers and one repository. It logs every call,
converts stored rows into response schemas and re-reads a row after each
write so callers always see the database-assigned values (ids, timestamps,
defaults). Repository errors are logged and propagated unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from app.schemas import GetListRequest
from app.utils.logger import setup_logger

logger = setup_logger("services")


class BaseService:
    resource: str = "resource"
    schema: type[BaseModel]
    list_schema: type[BaseModel]
    list_field: str
    # request fields never written to the log
    log_exclude: set[str] = set()

    def __init__(self, repository):
        self.repository = repository

    def _loggable(self, data: BaseModel) -> dict[str, Any]:
        return data.model_dump(exclude=self.log_exclude)

    def _to_record(self, data: BaseModel) -> dict[str, Any]:
        return data.model_dump()

    async def create(self, data: BaseModel) -> BaseModel:
        logger.info(f"Creating {self.resource}: {self._loggable(data)}")
        try:
            id = await self.repository.create(self._to_record(data))
            obj = await self.repository.get(id)
        except Exception as e:
            logger.error(f"Failed to create {self.resource}: {e}")
            raise
        return self.schema.model_validate(obj)

    async def get(self, id: str) -> BaseModel:
        logger.info(f"Getting {self.resource} {id}")
        try:
            obj = await self.repository.get(id)
        except Exception as e:
            logger.error(f"Failed to get {self.resource} {id}: {e}")
            raise
        return self.schema.model_validate(obj)

    async def get_list(self, request: GetListRequest) -> BaseModel:
        logger.info(
            f"Listing {self.resource}: {request.model_dump(exclude_none=True)}"
        )
        try:
            items, count = await self.repository.get_list(request)
        except Exception as e:
            logger.error(f"Failed to list {self.resource}: {e}")
            raise
        return self.list_schema(
            **{
                self.list_field: [self.schema.model_validate(i) for i in items],
                "count": count,
            }
        )

    async def update(self, id: str, data: BaseModel) -> BaseModel:
        logger.info(f"Updating {self.resource} {id}: {self._loggable(data)}")
        try:
            await self.repository.update(id, data.model_dump())
            obj = await self.repository.get(id)
        except Exception as e:
            logger.error(f"Failed to update {self.resource} {id}: {e}")
            raise
        return self.schema.model_validate(obj)

    async def delete(self, id: str) -> None:
        logger.info(f"Deleting {self.resource} {id}")
        try:
            await self.repository.remove(id)
        except Exception as e:
            logger.error(f"Failed to delete {self.resource} {id}: {e}")
            raise
