"""
MongoDB backend — PyMongo asyncio client over the `passwords` collection.

find / insert_one / delete_one map one-to-one onto the collection. ObjectIds
are rendered as hex strings on the way out and matched in both forms on delete, so a
record returned by find_all can be used verbatim as a delete filter.
"""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient

from backend_passop.config.env import (
    DEFAULT_MONGO_COLLECTION,
    DEFAULT_MONGO_DB_NAME,
    STORE_MONGO,
)
from backend_passop.core.exceptions import StoreNotConnectedError
from backend_passop.database.database import StoreBackend
from backend_passop.database.models import (
    ID_FIELD,
    DeleteResult,
    InsertResult,
    PasswordRecord,
    render_id,
)
from backend_passop.passop_logging import get_logger

logger = get_logger(__name__)


def _encode_id(document: dict[str, Any]) -> PasswordRecord:
    if ID_FIELD in document:
        document[ID_FIELD] = render_id(document[ID_FIELD])
    return document


def _decode_id(record_filter: PasswordRecord) -> dict[str, Any]:
    query = dict(record_filter)
    raw = query.get(ID_FIELD)
    if isinstance(raw, str) and ObjectId.is_valid(raw):
        # a client may have stored its own 24-hex string as _id
        query[ID_FIELD] = {"$in": [raw, ObjectId(raw)]}
    return query


class MongoBackend(StoreBackend):
    """
    One collection in one MongoDB database.

    Pass `client` to inject an already-built AsyncMongoClient (tests); the backend
    takes ownership and closes it in close().
    """

    name = STORE_MONGO

    def __init__(
        self,
        url: str,
        *,
        db_name: str = DEFAULT_MONGO_DB_NAME,
        collection_name: str = DEFAULT_MONGO_COLLECTION,
        client: Any | None = None,
    ) -> None:
        self._url = url
        self._db_name = db_name
        self._collection_name = collection_name
        self._client = client
        self._collection: Any | None = None

    @property
    def collection(self) -> Any:
        if self._collection is None:
            raise StoreNotConnectedError("Mongo store is not connected")
        return self._collection

    async def connect(self) -> None:
        if self._collection is not None:
            return
        if self._client is None:
            self._client = AsyncMongoClient(self._url)
        # Fails fast when the server is unreachable instead of on the first request
        await self._client.admin.command("ping")
        self._collection = self._client[self._db_name][self._collection_name]
        logger.info(
            "mongo_store_connected",
            host=self._url.split("@")[-1],
            db=self._db_name,
            collection=self._collection_name,
        )

    async def close(self) -> None:
        client, self._client, self._collection = self._client, None, None
        if client is not None:
            await client.close()
            logger.info("mongo_store_closed")

    async def find_all(self) -> list[PasswordRecord]:
        documents = await self.collection.find({}).to_list(length=None)
        return [_encode_id(doc) for doc in documents]

    async def insert_one(self, record: PasswordRecord) -> InsertResult:
        # insert_one sets _id on the dict it is given
        result = await self.collection.insert_one(dict(record))
        return InsertResult(inserted_id=render_id(result.inserted_id), acknowledged=result.acknowledged)

    async def delete_one(self, record_filter: PasswordRecord) -> DeleteResult:
        result = await self.collection.delete_one(_decode_id(record_filter))
        return DeleteResult(deleted_count=result.deleted_count, acknowledged=result.acknowledged)
