"""Testes do entrypoint FastAPI."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("CONVERSATION_STORE_BACKEND", "memory")
    from app.app import create_app

    return TestClient(create_app())


def test_health_and_action_listing(client: TestClient) -> None:
    with client:
        health = client.get("/health")
        actions = client.get("/actions")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert actions.json()["actions"] == [
        "startConversation",
        "sendTemplateMessage",
        "startFlow",
        "startTypingIndicator",
        "stopTypingIndicator",
    ]
