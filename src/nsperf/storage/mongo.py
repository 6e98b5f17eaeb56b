"""MongoDB document store backed by pymongo's asyncio client."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from ..logging import get_logger
from .base import Document, DocumentStore, Filter, Sort

logger = get_logger(__name__)

DEFAULT_DATABASE = "ns-preformance-db"


class MongoStore(DocumentStore):
    """Document store talking to a single MongoDB database.

    The client is created once and shared by every request; pymongo's
    client is safe for concurrent use from one event loop.
    """

    def __init__(self, client: AsyncMongoClient[Any], database: str | None = None):
        self.client = client
        if database:
            self.db = client[database]
        else:
            self.db = client.get_default_database(default=DEFAULT_DATABASE)

    @classmethod
    def from_url(
        cls,
        url: str,
        database: str | None = None,
        server_selection_timeout_ms: int = 2000,
    ) -> MongoStore:
        # AsyncMongoClient connects lazily; operations give up after the
        # server selection timeout instead of pymongo's 30 second default.
        client: AsyncMongoClient[Any] = AsyncMongoClient(
            url, serverSelectionTimeoutMS=server_selection_timeout_ms
        )
        store = cls(client, database)
        logger.info(
            "MongoDB client created",
            database=store.db.name,
            server_selection_timeout_ms=server_selection_timeout_ms,
        )
        return store

    async def find_one(
        self, collection: str, filter: Filter, sort: Sort | None = None
    ) -> Document | None:
        return await self.db[collection].find_one(filter, sort=sort)

    async def find(self, collection: str, filter: Filter) -> list[Document]:
        cursor = self.db[collection].find(filter)
        return await cursor.to_list(None)

    async def insert_one(self, collection: str, document: Document) -> ObjectId:
        result = await self.db[collection].insert_one(document)
        return result.inserted_id

    async def delete_many(self, collection: str, filter: Filter) -> int:
        result = await self.db[collection].delete_many(filter)
        return result.deleted_count

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed", error=str(e))
            return False

    async def close(self) -> None:
        await self.client.close()
        logger.info("MongoDB client closed")
