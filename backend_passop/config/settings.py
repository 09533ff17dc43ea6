"""
Application settings.

Collects the env accessors into one typed, immutable object so the API server,
store factory and entrypoint read the same values.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from backend_passop.config.env import (
    get_api_host,
    get_api_port,
    get_cors_origins,
    get_database_url,
    get_log_format,
    get_log_level,
    get_mongo_collection,
    get_mongo_db_name,
    get_mongo_url,
    get_store_backend,
)


@dataclass(frozen=True)
class Settings:
    """Resolved service configuration."""

    store_backend: str
    mongo_url: str
    mongo_db_name: str
    mongo_collection: str
    database_url: str
    api_host: str
    api_port: int
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    """
    Return the current application settings, read from the environment.

    Not cached: tests change env vars between cases with monkeypatch.
    """
    return Settings(
        store_backend=get_store_backend(),
        mongo_url=get_mongo_url(),
        mongo_db_name=get_mongo_db_name(),
        mongo_collection=get_mongo_collection(),
        database_url=get_database_url(),
        api_host=get_api_host(),
        api_port=get_api_port(),
        cors_origins=get_cors_origins(),
        log_level=get_log_level(),
        log_format=get_log_format(),
    )
