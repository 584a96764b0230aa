"""Testes do ActionRegistry (entrada camelCase, contexto de log)."""

from __future__ import annotations

import logging

import pytest
from fakes.fake_action_collaborators import (
    FailingConversationStore,
    FailingIntegrationState,
    FakeIntegrationState,
    FakeMessagingClient,
    build_dependencies,
)

from app.infra.stores import MemoryConversationStore
from app.observability import get_action_name, get_correlation_id
from app.use_cases.whatsapp import ActionRegistry, UnknownActionError
from utils.errors import ActionError, ConfigurationError, ValidationError


def test_action_names() -> None:
    assert ActionRegistry.action_names() == [
        "startConversation",
        "sendTemplateMessage",
        "startFlow",
        "startTypingIndicator",
        "stopTypingIndicator",
    ]


@pytest.mark.asyncio
async def test_scenario_start_conversation() -> None:
    client = FakeMessagingClient()
    deps, _ = build_dependencies(client=client)

    result = await ActionRegistry(deps).invoke(
        "startConversation",
        {
            "userPhone": "15550001111",
            "templateName": "order_update",
            "templateLanguage": "en",
            "templateVariablesJson": '["123"]',
        },
    )

    assert set(result) == {"conversationId"}
    assert len(client.sent) == 1
    template = client.sent[0][2]["template"]
    assert template["name"] == "order_update"
    assert template["components"][0]["parameters"] == [{"type": "text", "text": "123"}]


@pytest.mark.asyncio
async def test_scenario_start_flow_payload() -> None:
    client = FakeMessagingClient()
    deps, _ = build_dependencies(client=client)

    await ActionRegistry(deps).invoke(
        "startFlow",
        {
            "userPhone": "15550002222",
            "bodyText": "Continue?",
            "flow": {
                "flowId": "f1",
                "flowCta": "Start",
                "flowAction": "navigate",
                "screen": "WELCOME",
            },
        },
    )

    parameters = client.sent[0][2]["interactive"]["action"]["parameters"]
    assert parameters["flow_action_payload"] == {"screen": "WELCOME"}


@pytest.mark.asyncio
async def test_missing_default_sender_never_dispatches() -> None:
    client = FakeMessagingClient()
    deps, _ = build_dependencies(
        client=client, state=FakeIntegrationState(default_sender_id=None)
    )

    with pytest.raises(ConfigurationError):
        await ActionRegistry(deps).invoke(
            "startConversation",
            {"userPhone": "15550001111", "templateName": "order_update"},
        )

    assert client.sent == []


@pytest.mark.asyncio
async def test_schema_violation_becomes_validation_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    deps, _ = build_dependencies()

    with caplog.at_level(logging.ERROR), pytest.raises(ValidationError) as exc_info:
        await ActionRegistry(deps).invoke(
            "startFlow",
            {
                "userPhone": "15550002222",
                "bodyText": "Continue?",
                "flow": {"flowId": "f1", "flowCta": "x" * 21, "screen": "WELCOME"},
            },
        )

    assert "flowCta" in str(exc_info.value)
    assert caplog.records[-1].getMessage() == str(exc_info.value)


@pytest.mark.asyncio
async def test_unknown_action() -> None:
    deps, _ = build_dependencies()

    with pytest.raises(UnknownActionError):
        await ActionRegistry(deps).invoke("deleteEverything", {})


@pytest.mark.asyncio
async def test_invocation_runs_in_action_scope() -> None:
    seen: dict[str, str] = {}

    class ScopeProbeState(FakeIntegrationState):
        async def read_default_sender_id(self) -> str | None:
            seen["action"] = get_action_name()
            seen["correlation_id"] = get_correlation_id()
            return await super().read_default_sender_id()

    deps, _ = build_dependencies(state=ScopeProbeState())

    await ActionRegistry(deps).invoke(
        "startConversation",
        {"userPhone": "15550001111", "templateName": "order_update"},
        correlation_id="corr-42",
    )

    assert seen == {"action": "startConversation", "correlation_id": "corr-42"}
    assert get_action_name() == ""


@pytest.mark.asyncio
async def test_unreadable_integration_state_is_an_action_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    client = FakeMessagingClient()
    deps, _ = build_dependencies(client=client, state=FailingIntegrationState("redis down"))

    with caplog.at_level(logging.ERROR), pytest.raises(ActionError) as exc_info:
        await ActionRegistry(deps).invoke(
            "startConversation",
            {"userPhone": "15550001111", "templateName": "order_update"},
        )

    assert isinstance(exc_info.value, ConfigurationError)
    assert caplog.records[-1].getMessage() == str(exc_info.value)
    assert client.sent == []


@pytest.mark.asyncio
async def test_unavailable_store_is_an_action_error() -> None:
    client = FakeMessagingClient()
    deps, _ = build_dependencies(client=client, store=FailingConversationStore())

    with pytest.raises(ConfigurationError):
        await ActionRegistry(deps).invoke(
            "startFlow",
            {
                "userPhone": "15550002222",
                "bodyText": "Continue?",
                "flow": {"flowId": "f1", "flowCta": "Start", "screen": "WELCOME"},
            },
        )

    assert client.sent == []


@pytest.mark.asyncio
async def test_recorded_inbound_message_drives_typing_indicator() -> None:
    client = FakeMessagingClient()
    store = MemoryConversationStore()
    deps, _ = build_dependencies(client=client, store=store)
    registry = ActionRegistry(deps)
    conversation = await store.get_or_create_conversation("bot-1", "15550001111", tags={})

    recorded = await registry.record_inbound_message(
        conversation.id, {"externalId": "wamid.IN"}, correlation_id="corr-9"
    )
    await registry.invoke(
        "startTypingIndicator",
        {"conversationId": conversation.id, "messageId": recorded["messageId"]},
    )

    assert client.read_receipts == [("bot-1", "wamid.IN", True)]


@pytest.mark.asyncio
async def test_record_inbound_message_requires_external_id() -> None:
    deps, _ = build_dependencies()

    with pytest.raises(ValidationError, match="recordInboundMessage"):
        await ActionRegistry(deps).record_inbound_message("conv-1", {})
