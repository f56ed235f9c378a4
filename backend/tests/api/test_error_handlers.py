"""Error handlers — unexpected failures become a fixed 500, logged at ERROR.

Design Decisions:
    - raise_app_exceptions=False: Starlette re-raises after the catch-all handler
      has sent its response; the client should only see the response
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.api.routes.users import get_user_controller
from user_api.main import app


class _ExplodingController:
    async def get_user(self, raw_id, accept):
        raise RuntimeError("database password is hunter2")


@pytest.fixture
async def exploding_client():
    app.dependency_overrides[get_user_controller] = lambda: _ExplodingController()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


async def test_unexpected_error_is_generic_500(exploding_client, caplog):
    with caplog.at_level(logging.INFO):
        res = await exploding_client.get("/api/v1/users/1")
    assert res.status_code == 500
    assert res.json() == {"status": "error", "message": "An unexpected error occurred"}
    assert "hunter2" not in res.text
    assert any(r.levelno == logging.ERROR for r in caplog.records)


async def test_classified_error_logged_at_info(client, caplog):
    with caplog.at_level(logging.INFO, logger="user_api.api.error_handlers"):
        res = await client.get("/api/v1/users/999")
    assert res.status_code == 404
    records = [r for r in caplog.records if r.name == "user_api.api.error_handlers"]
    assert records and all(r.levelno == logging.INFO for r in records)


async def test_unknown_route_uses_error_envelope(client):
    res = await client.get("/api/v1/nowhere")
    assert res.status_code == 404
    assert res.json()["status"] == "fail"
