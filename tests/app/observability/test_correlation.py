"""Testes do contexto de invocação de action."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import action_scope, get_action_name, get_correlation_id


def test_action_scope_sets_and_resets_context() -> None:
    with action_scope("startFlow", "corr-1") as correlation_id:
        assert correlation_id == "corr-1"
        assert get_correlation_id() == "corr-1"
        assert get_action_name() == "startFlow"

    assert get_correlation_id() == ""
    assert get_action_name() == ""


def test_action_scope_generates_id() -> None:
    with action_scope("startConversation") as correlation_id:
        assert correlation_id
        assert get_correlation_id() == correlation_id


@pytest.mark.asyncio
async def test_concurrent_scopes_are_isolated() -> None:
    async def _run(action: str) -> tuple[str, str]:
        with action_scope(action, f"corr-{action}"):
            await asyncio.sleep(0)
            return get_action_name(), get_correlation_id()

    results = await asyncio.gather(_run("a"), _run("b"))

    assert results == [("a", "corr-a"), ("b", "corr-b")]
