"""
Main entrypoint: PassOP API server.

Env: API_HOST, API_PORT, STORE_BACKEND, MONGO_URL, MONGO_DB_NAME, MONGO_COLLECTION,
DATABASE_URL / DATABASE_PATH, CORS_ORIGINS, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn backend_passop.api_server.app:app --host 0.0.0.0 --port 3000
"""

from backend_passop.config import get_settings
from backend_passop.passop_logging import configure_structlog, get_logger


def main() -> None:
    """Configure logging from settings, then run the FastAPI server in the main thread."""
    settings = get_settings()
    # Before the app import so module loggers pick up the level and renderer
    configure_structlog(level=settings.log_level, fmt=settings.log_format)
    logger = get_logger("main")

    from backend_passop.api_server.app import app
    import uvicorn

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        store_backend=settings.store_backend,
        url=f"http://localhost:{settings.api_port}",
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
