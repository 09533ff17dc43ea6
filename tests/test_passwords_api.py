"""
Pytest tests for the PassOP HTTP API (GET /, POST /, DELETE /).

Runs against a temporary SQLite store via conftest fixtures.
"""

from __future__ import annotations

import pytest

GITHUB = {"site": "https://github.com", "username": "octo", "password": "hunter2", "id": "3f1c"}
MAIL = {"site": "https://mail.example.com", "username": "me", "password": "s3cret", "id": "9a0b"}


def _delete(client, body):
    # httpx's client.delete() takes no body
    return client.request("DELETE", "/", json=body)


def _without_id(record):
    return {k: v for k, v in record.items() if k != "_id"}


def test_list_empty(client):
    """GET / on an empty collection returns an empty JSON array."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == []


def test_create_then_list(client):
    """POST / stores the record verbatim; GET / includes it with the store-assigned _id."""
    response = client.post("/", json=GITHUB)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["result"]["acknowledged"] is True
    inserted_id = data["result"]["insertedId"]
    assert len(inserted_id) == 24

    records = client.get("/").json()
    assert len(records) == 1
    assert records[0]["_id"] == inserted_id
    assert _without_id(records[0]) == GITHUB


def test_list_keeps_insertion_order(client):
    """Records come back in the order they were saved."""
    client.post("/", json=GITHUB)
    client.post("/", json=MAIL)
    records = client.get("/").json()
    assert [r["site"] for r in records] == [GITHUB["site"], MAIL["site"]]


def test_create_accepts_any_fields(client):
    """No schema: arbitrary and nested fields are stored as-is."""
    odd = {"note": "wifi", "tags": ["home", "2.4ghz"], "meta": {"floor": 2}, "pässwörd": "ünïcödé"}
    assert client.post("/", json=odd).json()["success"] is True
    assert _without_id(client.get("/").json()[0]) == odd


def test_create_allows_duplicates(client):
    """Saving the same record twice keeps two entries with distinct ids."""
    first = client.post("/", json=GITHUB).json()["result"]["insertedId"]
    second = client.post("/", json=GITHUB).json()["result"]["insertedId"]
    assert first != second
    assert len(client.get("/").json()) == 2


def test_delete_just_inserted(client):
    """DELETE / with the same field values removes exactly that record."""
    client.post("/", json=GITHUB)
    client.post("/", json=MAIL)

    response = _delete(client, GITHUB)
    assert response.status_code == 200
    assert response.json() == {"success": True, "result": {"acknowledged": True, "deletedCount": 1}}

    remaining = client.get("/").json()
    assert [_without_id(r) for r in remaining] == [MAIL]


def test_delete_listed_record_with_id(client):
    """A record returned by GET / (including _id) can be sent back verbatim to DELETE /."""
    client.post("/", json=GITHUB)
    listed = client.get("/").json()[0]
    assert _delete(client, listed).json()["result"]["deletedCount"] == 1
    assert client.get("/").json() == []


def test_delete_removes_one_of_identical_records(client):
    """Two records sharing every field: one delete removes exactly one of them."""
    client.post("/", json=GITHUB)
    client.post("/", json=GITHUB)
    assert _delete(client, GITHUB).json()["result"]["deletedCount"] == 1
    remaining = client.get("/").json()
    assert len(remaining) == 1
    assert _without_id(remaining[0]) == GITHUB


def test_delete_nonexistent_is_noop(client):
    """Deleting a record that is not stored still succeeds, with deletedCount 0."""
    client.post("/", json=GITHUB)
    response = _delete(client, {**GITHUB, "password": "wrong"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "result": {"acknowledged": True, "deletedCount": 0}}
    assert len(client.get("/").json()) == 1


def test_delete_on_empty_collection(client):
    response = _delete(client, MAIL)
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["result"]["deletedCount"] == 0


def test_non_object_body_rejected(client):
    """A JSON body that is not an object never reaches the store."""
    response = client.post("/", json=["not", "a", "record"])
    assert response.status_code == 422
    assert client.get("/").json() == []


def test_store_failure_propagates(client, monkeypatch):
    """Store errors are not turned into a structured response; they surface from the app."""
    store = client.app.state.store

    async def broken(record):
        raise RuntimeError("store unreachable")

    monkeypatch.setattr(store, "create_password", broken)
    with pytest.raises(RuntimeError, match="store unreachable"):
        client.post("/", json=GITHUB)


def test_cors_allows_frontend_origin(client):
    """CORS is open by default so the frontend dev server can call the API."""
    response = client.options(
        "/",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "DELETE",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_cors_origins_come_from_settings(monkeypatch):
    """CORS_ORIGINS narrows the allowed origins when the app is built."""
    import importlib

    from fastapi.middleware.cors import CORSMiddleware

    import backend_passop.api_server.server as server

    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173")
    try:
        reloaded = importlib.reload(server)
        cors = [m for m in reloaded.app.user_middleware if m.cls is CORSMiddleware]
        assert len(cors) == 1
        assert cors[0].kwargs["allow_origins"] == ["http://localhost:5173"]
    finally:
        monkeypatch.delenv("CORS_ORIGINS")
        importlib.reload(server)
