"""
FastAPI server — password collection over HTTP.

Opens one store handle for the process in the lifespan, closes it on shutdown.
CORS is open by default so the PassOP frontend can call from another port.
Config via env (STORE_BACKEND, MONGO_URL, DATABASE_PATH, CORS_ORIGINS).
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_passop import __version__
from backend_passop.api_server.passwords import router as passwords_router
from backend_passop.config import get_settings
from backend_passop.database import get_store
from backend_passop.passop_logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the password store before serving; close it on shutdown."""
    store = get_store()
    await store.connect()
    app.state.store = store
    logger.info("api_store_ready", backend=store.backend.name)
    try:
        yield
    finally:
        await store.close()
        logger.info("api_store_closed")


app = FastAPI(
    title="Backend PassOP API",
    description="List, save and delete password records (no auth, stored as-is).",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(passwords_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}
