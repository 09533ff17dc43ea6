"""
Storage layer — the password collection.

MongoDB in production via MongoBackend; SQLBackend (SQLAlchemy) keeps the same
document semantics on SQLite/PostgreSQL. Use get_store() to build the configured one.
"""

from backend_passop.database.database import (
    PasswordDocument,
    PasswordStore,
    SQLBackend,
    StoreBackend,
    get_store,
)
from backend_passop.database.models import (
    DeleteResult,
    InsertResult,
    PasswordRecord,
    matches,
)

__all__ = [
    "PasswordDocument",
    "PasswordStore",
    "SQLBackend",
    "StoreBackend",
    "get_store",
    "DeleteResult",
    "InsertResult",
    "PasswordRecord",
    "matches",
]
