"""
Storage abstraction for the password collection.

MongoDB is the production store (see mongo.py); SQLBackend keeps the same
document semantics on SQLite or PostgreSQL through SQLAlchemy so the service
runs without a Mongo server. All access goes through PasswordStore; backends
are swappable via STORE_BACKEND.
"""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from bson import ObjectId
from sqlalchemy import Column, Integer, String, Text, create_engine, delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from backend_passop.config import Settings, get_settings
from backend_passop.config.env import STORE_BACKENDS, STORE_MONGO, STORE_SQL
from backend_passop.core.exceptions import ConfigError, StoreNotConnectedError
from backend_passop.database.models import (
    ID_FIELD,
    DeleteResult,
    InsertResult,
    PasswordRecord,
    matches,
)
from backend_passop.passop_logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


# -----------------------------------------------------------------------------
# Abstract backend
# -----------------------------------------------------------------------------


class StoreBackend(ABC):
    """Async interface over one collection of schemaless documents."""

    name: str = "abstract"

    @abstractmethod
    async def connect(self) -> None:
        """Open the store handle and make sure the collection exists."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the store handle. Safe to call twice."""
        ...

    @abstractmethod
    async def find_all(self) -> list[PasswordRecord]:
        """Return every document, unfiltered, in insertion order, with `_id` as a hex string."""
        ...

    @abstractmethod
    async def insert_one(self, record: PasswordRecord) -> InsertResult:
        """Insert the record verbatim. The caller's dict is not modified."""
        ...

    @abstractmethod
    async def delete_one(self, record_filter: PasswordRecord) -> DeleteResult:
        """Delete the first document matching every field of record_filter."""
        ...


# -----------------------------------------------------------------------------
# SQL backend (SQLAlchemy): one JSON document per row
# -----------------------------------------------------------------------------


class PasswordDocument(Base):
    """
    Stored password record: unique id key plus the JSON body.

    oid is the hex of a store-generated ObjectId, or the JSON encoding of a
    client-supplied _id, which then also stays in body_json with its JSON type.
    """

    __tablename__ = "passwords"

    id = Column(Integer, primary_key=True, autoincrement=True)
    oid = Column(String(255), unique=True, nullable=False, index=True)
    body_json = Column(Text, nullable=False)

    def to_record(self) -> PasswordRecord:
        body = json.loads(self.body_json)
        if ID_FIELD in body:
            return body
        record: PasswordRecord = {ID_FIELD: self.oid}
        record.update(body)
        return record


class SQLBackend(StoreBackend):
    """
    SQLAlchemy implementation. Sync engine; every call runs in a worker thread
    so request handling still suspends on store I/O.
    """

    name = STORE_SQL

    def __init__(self, url: str) -> None:
        self._url = url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    def _open(self) -> None:
        connect_args = {}
        if self._url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        engine = create_engine(self._url, connect_args=connect_args, pool_pre_ping=True)
        Base.metadata.create_all(bind=engine)
        self._engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    async def connect(self) -> None:
        if self._engine is not None:
            return
        await asyncio.to_thread(self._open)
        logger.info("sql_store_connected", url=self._url.split("?")[0].split("//")[-1])

    async def close(self) -> None:
        engine, self._engine, self._session_factory = self._engine, None, None
        if engine is not None:
            await asyncio.to_thread(engine.dispose)
            logger.info("sql_store_closed")

    @contextmanager
    def _session_scope(self) -> Iterator[Session]:
        """Single session. Commits on success, rolls back on error."""
        if self._session_factory is None:
            raise StoreNotConnectedError("SQL store is not connected")
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _find_all(self) -> list[PasswordRecord]:
        with self._session_scope() as session:
            rows = session.scalars(select(PasswordDocument).order_by(PasswordDocument.id)).all()
            return [row.to_record() for row in rows]

    def _insert_one(self, record: PasswordRecord) -> InsertResult:
        body = dict(record)
        if ID_FIELD in body:
            inserted_id = body[ID_FIELD]
            oid = json.dumps(inserted_id, sort_keys=True, ensure_ascii=False)
        else:
            inserted_id = oid = str(ObjectId())
        with self._session_scope() as session:
            session.add(PasswordDocument(oid=oid, body_json=json.dumps(body, ensure_ascii=False)))
        return InsertResult(inserted_id=inserted_id)

    def _delete_one(self, record_filter: PasswordRecord) -> DeleteResult:
        with self._session_scope() as session:
            rows = session.scalars(select(PasswordDocument).order_by(PasswordDocument.id)).all()
            for row in rows:
                if not matches(row.to_record(), record_filter):
                    continue
                result = session.execute(
                    delete(PasswordDocument).where(PasswordDocument.id == row.id)
                )
                # 0 when a concurrent delete removed this row first; try the next match
                if result.rowcount:
                    return DeleteResult(deleted_count=1)
        return DeleteResult(deleted_count=0)

    async def find_all(self) -> list[PasswordRecord]:
        return await asyncio.to_thread(self._find_all)

    async def insert_one(self, record: PasswordRecord) -> InsertResult:
        return await asyncio.to_thread(self._insert_one, record)

    async def delete_one(self, record_filter: PasswordRecord) -> DeleteResult:
        return await asyncio.to_thread(self._delete_one, record_filter)


# -----------------------------------------------------------------------------
# Store facade: single entrypoint for the API server
# -----------------------------------------------------------------------------


class PasswordStore:
    """
    The password collection: list, create, delete.

    Store failures propagate unchanged; there is no retry and no validation.
    """

    def __init__(self, backend: StoreBackend) -> None:
        self._backend = backend

    @property
    def backend(self) -> StoreBackend:
        return self._backend

    async def connect(self) -> None:
        await self._backend.connect()
        logger.info("password_store_connected", backend=self._backend.name)

    async def close(self) -> None:
        await self._backend.close()

    async def list_passwords(self) -> list[PasswordRecord]:
        """Every record, unfiltered, in store-native order."""
        records = await self._backend.find_all()
        logger.debug("passwords_listed", count=len(records))
        return records

    async def create_password(self, record: PasswordRecord) -> InsertResult:
        """Insert the record verbatim; no duplicate detection."""
        result = await self._backend.insert_one(record)
        logger.info("password_created", inserted_id=result.inserted_id, fields=sorted(record))
        return result

    async def delete_password(self, record: PasswordRecord) -> DeleteResult:
        """Delete one record equal to `record` on every given field. No match is not an error."""
        result = await self._backend.delete_one(record)
        logger.info("password_deleted", deleted_count=result.deleted_count)
        return result


def get_store(settings: Settings | None = None) -> PasswordStore:
    """
    Build the configured PasswordStore (not yet connected).

    STORE_BACKEND=mongo uses MongoBackend; STORE_BACKEND=sql uses SQLBackend on DATABASE_URL
    or the SQLite file at DATABASE_PATH.
    """
    settings = settings or get_settings()
    if settings.store_backend == STORE_MONGO:
        from backend_passop.database.mongo import MongoBackend

        backend: StoreBackend = MongoBackend(
            settings.mongo_url,
            db_name=settings.mongo_db_name,
            collection_name=settings.mongo_collection,
        )
    elif settings.store_backend == STORE_SQL:
        backend = SQLBackend(settings.database_url)
    else:
        raise ConfigError(
            f"Unknown STORE_BACKEND {settings.store_backend!r}; expected one of {', '.join(STORE_BACKENDS)}"
        )
    return PasswordStore(backend)
