"""
Environment variable loading for PassOP.

- STORE_BACKEND: mongo | sql (default: mongo)
- MONGO_URL, MONGO_DB_NAME, MONGO_COLLECTION: document store location
- DATABASE_URL / DATABASE_PATH: SQL fallback store (SQLite file by default)
- API_HOST, API_PORT: where uvicorn listens
- CORS_ORIGINS: comma-separated origins allowed to call the API (default: *)
- LOG_LEVEL, LOG_FORMAT: structlog level and renderer (json | console)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is backend_passop/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

STORE_MONGO = "mongo"
STORE_SQL = "sql"
STORE_BACKENDS = (STORE_MONGO, STORE_SQL)

DEFAULT_MONGO_URL = "mongodb://0.0.0.0:27017"
DEFAULT_MONGO_DB_NAME = "passop"
DEFAULT_MONGO_COLLECTION = "passwords"
DEFAULT_SQLITE_PATH = "passop.db"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"


def load_passop_env() -> None:
    """Load .env from project root. Existing environment variables win; safe to call multiple times."""
    load_dotenv(_ENV_PATH, override=False)


def _env(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def get_store_backend() -> str:
    """
    Return STORE_BACKEND from env, lower-cased.
    Default: mongo. Unknown values are returned as-is; the store factory rejects them.
    """
    load_passop_env()
    return _env("STORE_BACKEND", STORE_MONGO).lower()


def get_mongo_url() -> str:
    load_passop_env()
    return _env("MONGO_URL", DEFAULT_MONGO_URL)


def get_mongo_db_name() -> str:
    load_passop_env()
    return _env("MONGO_DB_NAME", DEFAULT_MONGO_DB_NAME)


def get_mongo_collection() -> str:
    load_passop_env()
    return _env("MONGO_COLLECTION", DEFAULT_MONGO_COLLECTION)


def get_database_url() -> str:
    """
    Resolve the SQL store URL.
    Order: DATABASE_URL > sqlite:///DATABASE_PATH > sqlite:///passop.db.
    """
    load_passop_env()
    url = (os.getenv("DATABASE_URL") or "").strip()
    if url:
        return url
    return f"sqlite:///{_env('DATABASE_PATH', DEFAULT_SQLITE_PATH)}"


def get_api_host() -> str:
    load_passop_env()
    return _env("API_HOST", DEFAULT_API_HOST)


def get_api_port() -> int:
    load_passop_env()
    return int(_env("API_PORT", str(DEFAULT_API_PORT)))


def get_cors_origins() -> list[str]:
    """Return CORS_ORIGINS split on commas. Default: ["*"] (any origin, like the Express cors() default)."""
    load_passop_env()
    raw = _env("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_log_level() -> str:
    """Return LOG_LEVEL upper-cased. Default: INFO."""
    load_passop_env()
    return _env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_log_format() -> str:
    """Return LOG_FORMAT: json (default) or console."""
    load_passop_env()
    return _env("LOG_FORMAT", DEFAULT_LOG_FORMAT).lower()
