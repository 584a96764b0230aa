"""Testes das actions de template (startConversation e sendTemplateMessage)."""

from __future__ import annotations

import pytest
from fakes.fake_action_collaborators import (
    FakeIntegrationState,
    FakeMessagingClient,
    RecordingConversationStore,
    build_dependencies,
)

from app.protocols.models import SendTemplateMessageInput, StartConversationInput
from app.use_cases.whatsapp import SendTemplateMessageUseCase, StartConversationUseCase
from config.settings import WhatsAppSettings
from utils.errors import ConfigurationError, DispatchError, ValidationError


def _request(**overrides: object) -> StartConversationInput:
    fields: dict[str, object] = {
        "user_phone": "15550001111",
        "template_name": "order_update",
        "template_language": "en",
        "template_variables_json": '["123"]',
    }
    fields.update(overrides)
    return StartConversationInput(**fields)


class TestStartConversation:
    @pytest.mark.asyncio
    async def test_sends_template_with_default_sender(self) -> None:
        client = FakeMessagingClient()
        store = RecordingConversationStore()
        deps, factory = build_dependencies(client=client, store=store)

        result = await StartConversationUseCase(deps).execute(_request())

        assert factory.tokens == ["token-abc"]
        assert len(client.sent) == 1
        sender_id, recipient_id, payload = client.sent[0]
        assert (sender_id, recipient_id) == ("bot-1", "15550001111")
        assert payload["template"]["components"][0]["parameters"] == [
            {"type": "text", "text": "123"}
        ]
        conversation = await store.get_or_create_conversation("bot-1", "15550001111", {})
        assert result.conversation_id == conversation.id

    @pytest.mark.asyncio
    async def test_explicit_sender_used(self) -> None:
        client = FakeMessagingClient()
        deps, _ = build_dependencies(client=client)

        await StartConversationUseCase(deps).execute(_request(sender_id="bot-9"))

        assert client.sent[0][0] == "bot-9"

    @pytest.mark.asyncio
    async def test_language_falls_back_to_settings(self) -> None:
        client = FakeMessagingClient()
        settings = WhatsAppSettings(access_token="token-abc", default_template_language="pt_BR")
        deps, _ = build_dependencies(client=client, settings=settings)

        await StartConversationUseCase(deps).execute(_request(template_language=None))

        assert client.sent[0][2]["template"]["language"] == {"code": "pt_BR"}

    @pytest.mark.asyncio
    async def test_no_sender_means_no_dispatch(self) -> None:
        client = FakeMessagingClient()
        deps, _ = build_dependencies(
            client=client, state=FakeIntegrationState(default_sender_id=None)
        )

        with pytest.raises(ConfigurationError):
            await StartConversationUseCase(deps).execute(_request())

        assert client.sent == []

    @pytest.mark.asyncio
    async def test_invalid_variables_fail_before_any_resolution(self) -> None:
        events: list[str] = []
        deps, _ = build_dependencies(
            state=FakeIntegrationState(events=events),
            store=RecordingConversationStore(events=events),
            client=FakeMessagingClient(events=events),
        )

        with pytest.raises(ValidationError):
            await StartConversationUseCase(deps).execute(
                _request(template_variables_json="not json")
            )

        assert events == []

    @pytest.mark.asyncio
    async def test_invalid_variables_reported_before_missing_sender(self) -> None:
        deps, _ = build_dependencies(state=FakeIntegrationState(default_sender_id=None))

        with pytest.raises(ValidationError):
            await StartConversationUseCase(deps).execute(
                _request(template_variables_json="not json")
            )

    @pytest.mark.asyncio
    async def test_upstream_error_raises_dispatch_error(self) -> None:
        client = FakeMessagingClient(
            responses=[{"error": {"code": 132001, "message": "template inexistente"}}]
        )
        deps, _ = build_dependencies(client=client)

        with pytest.raises(DispatchError, match='"order_update" no idioma "en"'):
            await StartConversationUseCase(deps).execute(_request())


class TestSendTemplateMessage:
    @pytest.mark.asyncio
    async def test_uses_conversation_sender_and_recipient(self) -> None:
        client = FakeMessagingClient()
        store = RecordingConversationStore()
        conversation = await store.get_or_create_conversation("bot-7", "15550003333", {})
        deps, _ = build_dependencies(client=client, store=store)

        result = await SendTemplateMessageUseCase(deps).execute(
            SendTemplateMessageInput(conversation_id=conversation.id, template_name="followup")
        )

        assert result.conversation_id == conversation.id
        sender_id, recipient_id, payload = client.sent[0]
        assert (sender_id, recipient_id) == ("bot-7", "15550003333")
        assert "components" not in payload["template"]

    @pytest.mark.asyncio
    async def test_unknown_conversation(self) -> None:
        client = FakeMessagingClient()
        deps, _ = build_dependencies(client=client)

        with pytest.raises(ValidationError):
            await SendTemplateMessageUseCase(deps).execute(
                SendTemplateMessageInput(conversation_id="missing", template_name="followup")
            )

        assert client.sent == []
