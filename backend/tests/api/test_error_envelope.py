"""Error rendering over HTTP - catch-all 404, parse errors, crashes, dev traces.

Invariants:
    - Unmatched method+path -> 404 {success, error: "Route not found", path}
    - Malformed bodies -> 400 error envelope
    - Unhandled exceptions -> 500 envelope, exception message never exposed
    - stack only appears with ENVIRONMENT=development
"""

import logging

from httpx import ASGITransport, AsyncClient

from app.infrastructure.memory_store import build_seeded_store, get_store
from app.main import create_app


async def test_unknown_path_echoes_original_url(client):
    res = await client.get("/api/orders?limit=5")
    assert res.status_code == 404
    assert res.json() == {
        "success": False, "error": "Route not found", "path": "/api/orders?limit=5",
    }


async def test_unknown_path_is_echoed_undecoded(client):
    res = await client.get("/api/a%20b?x=1")
    assert res.status_code == 404
    assert res.json()["path"] == "/api/a%20b?x=1"


async def test_unsupported_method_is_route_not_found(client):
    res = await client.patch("/api/users/1", json={"name": "x"})
    assert res.status_code == 404
    assert res.json()["path"] == "/api/users/1"


async def test_malformed_json_is_400(client):
    res = await client.post(
        "/api/users",
        content=b'{"name": "A",',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["status"] == 400
    assert body["error"].startswith("Invalid request body")


async def test_non_object_body_is_400(client):
    res = await client.post("/api/products", json=["Laptop", 10])
    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid request body")


async def test_no_stack_outside_development(client):
    res = await client.get("/api/products/99")
    assert "stack" not in res.json()


async def test_stack_included_in_development(development_mode, client):
    res = await client.delete("/api/users/99")
    body = res.json()
    assert res.status_code == 404
    assert body["error"] == "User not found"
    assert "handle_users" in body["stack"]


async def _crashing_client():
    app = create_app()
    app.dependency_overrides[get_store] = build_seeded_store

    @app.get("/boom")
    async def boom():
        raise RuntimeError("db password leaked")

    class Teapot(Exception):
        status_code = 418

    @app.get("/teapot")
    async def teapot():
        raise Teapot()

    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


async def test_unhandled_exception_is_500_without_details(caplog):
    caplog.set_level(logging.INFO, logger="app.access")
    async with await _crashing_client() as c:
        res = await c.get("/boom", headers={"Origin": "http://shop.example"})
    assert res.status_code == 500
    assert res.json() == {
        "success": False, "error": "Internal server error", "status": 500,
    }
    assert "leaked" not in res.text
    assert res.headers["x-content-type-options"] == "nosniff"
    assert res.headers["access-control-allow-origin"] == "*"
    lines = [r for r in caplog.records if r.name == "app.access"]
    assert [(r.path, r.status_code) for r in lines] == [("/boom", 500)]


async def test_exception_status_code_is_respected():
    async with await _crashing_client() as c:
        res = await c.get("/teapot")
    assert res.status_code == 418
    assert res.json()["status"] == 418


async def test_crash_trace_in_development(development_mode):
    async with await _crashing_client() as c:
        res = await c.get("/boom")
    assert "RuntimeError: db password leaked" in res.json()["stack"]
