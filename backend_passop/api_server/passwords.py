"""
FastAPI router: GET /, POST /, DELETE / over the password collection.

Each request is one store call. Bodies are stored and matched verbatim; store
failures are logged and re-raised so the server answers 500.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from pydantic import BaseModel, Field

from backend_passop.database import PasswordRecord, PasswordStore
from backend_passop.passop_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["passwords"])


class MutationResponse(BaseModel):
    """POST / and DELETE / response."""

    success: bool = Field(True, description="Always true when the store call completed")
    result: dict[str, Any] = Field(..., description="Store acknowledgement (insertedId or deletedCount)")


def get_password_store(request: Request) -> PasswordStore:
    """Dependency: the process-wide store opened in the app lifespan."""
    return request.app.state.store


@router.get("/")
async def list_passwords(store: PasswordStore = Depends(get_password_store)) -> list[dict[str, Any]]:
    """Return every password record, unfiltered, in store order."""
    try:
        return await store.list_passwords()
    except Exception as e:
        logger.exception("list_passwords_failed", error=str(e))
        raise


@router.post("/", response_model=MutationResponse)
async def create_password(
    record: PasswordRecord = Body(..., description="Password record, stored as-is"),
    store: PasswordStore = Depends(get_password_store),
) -> MutationResponse:
    """Save a password record. No validation, no duplicate detection."""
    try:
        result = await store.create_password(record)
    except Exception as e:
        logger.exception("create_password_failed", error=str(e))
        raise
    return MutationResponse(success=True, result=result.to_dict())


@router.delete("/", response_model=MutationResponse)
async def delete_password(
    record: PasswordRecord = Body(..., description="Record to delete; every field must match"),
    store: PasswordStore = Depends(get_password_store),
) -> MutationResponse:
    """
    Delete one record whose fields equal the body's fields.
    Succeeds with deletedCount 0 when nothing matches.
    """
    try:
        result = await store.delete_password(record)
    except Exception as e:
        logger.exception("delete_password_failed", error=str(e))
        raise
    return MutationResponse(success=True, result=result.to_dict())
