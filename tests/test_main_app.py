import json
from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from app.core.config import settings
from app import main
from app.infrastructure.cqrs import HandlerKey, HandlerNotFoundError
from app.domains.users import GetUsersQuery


class DummyURL:
    def __init__(self, path: str):
        self.path = path

    def __str__(self) -> str:
        return self.path


def make_request(path: str = "/path"):
    return SimpleNamespace(
        method="GET",
        url=DummyURL(path),
        client=SimpleNamespace(host="127.0.0.1"),
    )


@pytest.mark.asyncio
async def test_health_check_returns_status():
    result = await main.health_check()
    assert result["status"] == "healthy"
    assert result["version"] == settings.VERSION
    assert result["environment"] == settings.APP_ENV


@pytest.mark.asyncio
async def test_root_returns_message():
    result = await main.root()
    assert "Demo CQRS API" in result["message"]
    expected_docs = "/api/docs" if settings.DEBUG else None
    assert result["docs"] == expected_docs


@pytest.mark.asyncio
async def test_http_exception_handler_returns_json():
    response = await main.http_exception_handler(
        request=SimpleNamespace(),
        exc=HTTPException(status_code=418, detail="teapot"),
    )
    payload = json.loads(response.body.decode("utf-8"))
    assert response.status_code == 418
    assert payload["detail"] == "teapot"


@pytest.mark.asyncio
async def test_cqrs_exception_handler_exposes_code():
    exc = HandlerNotFoundError(HandlerKey.for_request(GetUsersQuery()))
    response = await main.cqrs_exception_handler(make_request("/api/v1/users"), exc)
    payload = json.loads(response.body.decode("utf-8"))
    assert response.status_code == 500
    assert payload["code"] == "HANDLER_NOT_FOUND"
    assert "GetUsersQuery" in payload["detail"]


@pytest.mark.asyncio
async def test_global_exception_handler_returns_json():
    response = await main.global_exception_handler(make_request(), Exception("boom"))
    payload = json.loads(response.body.decode("utf-8"))
    assert response.status_code == 500
    assert payload["detail"] == "An internal error occurred"
    if settings.DEBUG:
        assert payload["error"] == "boom"
        assert payload["type"] == "Exception"
