"""Testes das actions de indicador de digitação."""

from __future__ import annotations

import pytest
from fakes.fake_action_collaborators import (
    FakeMessagingClient,
    RecordingConversationStore,
    build_dependencies,
)

from app.protocols.models import TypingIndicatorInput
from app.use_cases.whatsapp import StartTypingIndicatorUseCase, StopTypingIndicatorUseCase
from config.settings import WhatsAppSettings
from utils.errors import DispatchError, ValidationError

WITH_EMOJI = WhatsAppSettings(
    access_token="token-abc",
    typing_indicator_emoji=True,
    typing_indicator_emoji_value="⏳",
)


async def _conversation_with_message(
    store: RecordingConversationStore,
) -> TypingIndicatorInput:
    conversation = await store.get_or_create_conversation("bot-1", "15550004444", {})
    message = await store.record_inbound_message(conversation.id, "wamid.IN")
    return TypingIndicatorInput(conversation_id=conversation.id, message_id=message.id)


class TestStartTypingIndicator:
    @pytest.mark.asyncio
    async def test_marks_read_with_typing_indicator(self) -> None:
        store = RecordingConversationStore()
        client = FakeMessagingClient()
        request = await _conversation_with_message(store)
        deps, _ = build_dependencies(store=store, client=client)

        result = await StartTypingIndicatorUseCase(deps).execute(request)

        assert result.model_dump(by_alias=True) == {}
        assert client.read_receipts == [("bot-1", "wamid.IN", True)]
        assert client.sent == []

    @pytest.mark.asyncio
    async def test_reacts_with_emoji_when_enabled(self) -> None:
        store = RecordingConversationStore()
        client = FakeMessagingClient()
        request = await _conversation_with_message(store)
        deps, _ = build_dependencies(store=store, client=client, settings=WITH_EMOJI)

        await StartTypingIndicatorUseCase(deps).execute(request)

        assert client.events == ["mark_as_read", "send_message"]
        _, recipient_id, payload = client.sent[0]
        assert recipient_id == "15550004444"
        assert payload == {
            "type": "reaction",
            "reaction": {"message_id": "wamid.IN", "emoji": "⏳"},
        }

    @pytest.mark.asyncio
    async def test_read_failure_stops_before_reaction(self) -> None:
        store = RecordingConversationStore()
        client = FakeMessagingClient(responses=[{"error": {"code": 100, "message": "bad"}}])
        request = await _conversation_with_message(store)
        deps, _ = build_dependencies(store=store, client=client, settings=WITH_EMOJI)

        with pytest.raises(DispatchError):
            await StartTypingIndicatorUseCase(deps).execute(request)

        assert client.sent == []

    @pytest.mark.asyncio
    async def test_unknown_message(self) -> None:
        store = RecordingConversationStore()
        request = await _conversation_with_message(store)
        deps, _ = build_dependencies(store=store)

        with pytest.raises(ValidationError):
            await StartTypingIndicatorUseCase(deps).execute(
                TypingIndicatorInput(conversation_id=request.conversation_id, message_id="nope")
            )


class TestStopTypingIndicator:
    @pytest.mark.asyncio
    async def test_noop_without_emoji(self) -> None:
        store = RecordingConversationStore()
        client = FakeMessagingClient()
        request = await _conversation_with_message(store)
        deps, factory = build_dependencies(store=store, client=client)

        await StopTypingIndicatorUseCase(deps).execute(request)

        assert client.events == []
        assert factory.tokens == []

    @pytest.mark.asyncio
    async def test_removes_reaction_with_emoji(self) -> None:
        store = RecordingConversationStore()
        client = FakeMessagingClient()
        request = await _conversation_with_message(store)
        deps, _ = build_dependencies(store=store, client=client, settings=WITH_EMOJI)

        await StopTypingIndicatorUseCase(deps).execute(request)

        assert client.sent[0][2]["reaction"] == {"message_id": "wamid.IN", "emoji": ""}
