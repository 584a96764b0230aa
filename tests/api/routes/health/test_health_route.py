"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

import api.routes.health.router as health_module
from api.routes.health.router import health_check, readiness_check
from config.settings import BaseSettings


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _use_backend(monkeypatch: pytest.MonkeyPatch, backend: str) -> None:
    settings = BaseSettings(conversation_store_backend=backend)  # type: ignore[arg-type]
    monkeypatch.setattr(health_module, "get_base_settings", lambda: settings)


@pytest.mark.asyncio
async def test_health_reports_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_backend(monkeypatch, "memory")

    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "whatsapp-actions"


@pytest.mark.asyncio
async def test_readiness_skips_redis_with_memory_backend(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _use_backend(monkeypatch, "memory")

    response = await readiness_check(_build_request_with_state(SimpleNamespace(redis_client=None)))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["checks"]["redis"]["status"] == "skipped"


@pytest.mark.asyncio
async def test_readiness_fails_without_required_redis(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _use_backend(monkeypatch, "redis")

    response = await readiness_check(_build_request_with_state(SimpleNamespace(redis_client=None)))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["redis"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_ok_when_redis_pings(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_backend(monkeypatch, "redis")
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(return_value=True)

    response = await readiness_check(
        _build_request_with_state(SimpleNamespace(redis_client=redis_client))
    )

    assert response.status_code == 200
    redis_client.ping.assert_awaited_once()
