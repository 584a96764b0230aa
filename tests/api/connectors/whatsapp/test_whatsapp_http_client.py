"""Testes do WhatsAppHttpClient com httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.whatsapp import WhatsAppHttpClient, parse_meta_error
from api.connectors.whatsapp.meta_errors import is_permanent_error
from config.settings import WhatsAppSettings

SETTINGS = WhatsAppSettings(access_token="token-abc", api_version="v24.0")


def _client(handler) -> WhatsAppHttpClient:
    return WhatsAppHttpClient(
        "token-abc",
        SETTINGS,
        transport=httpx.MockTransport(handler),
    )


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_posts_envelope_with_bearer_token(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"messages": [{"id": "wamid.1"}]})

        response = await _client(handler).send_message(
            "bot-1",
            "5511999990000",
            {"type": "reaction", "reaction": {"message_id": "wamid.0", "emoji": "👀"}},
        )

        assert response == {"messages": [{"id": "wamid.1"}]}
        assert len(requests) == 1
        request = requests[0]
        assert str(request.url) == "https://graph.facebook.com/v24.0/bot-1/messages"
        assert request.headers["Authorization"] == "Bearer token-abc"
        body = json.loads(request.content)
        assert body["messaging_product"] == "whatsapp"
        assert body["recipient_type"] == "individual"
        assert body["to"] == "5511999990000"
        assert body["type"] == "reaction"

    @pytest.mark.asyncio
    async def test_meta_error_is_returned_not_raised(self) -> None:
        error_body = {
            "error": {
                "message": "(#132001) Template name does not exist in the translation",
                "type": "OAuthException",
                "code": 132001,
            }
        }

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json=error_body)

        response = await _client(handler).send_message("bot-1", "5511", {"type": "template"})

        assert response == error_body

    @pytest.mark.asyncio
    async def test_timeout_becomes_error_response(self) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            raise httpx.ReadTimeout("timeout", request=request)

        response = await _client(handler).send_message("bot-1", "5511", {"type": "template"})

        assert calls == 1
        assert response["error"]["type"] == "TransportError"
        assert response["error"]["message"] == "http_timeout"

    @pytest.mark.asyncio
    async def test_connection_error_becomes_error_response(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        response = await _client(handler).send_message("bot-1", "5511", {"type": "template"})

        assert response["error"]["message"] == "http_connection_error"

    @pytest.mark.asyncio
    async def test_non_json_body_becomes_error_response(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        response = await _client(handler).send_message("bot-1", "5511", {"type": "template"})

        assert response["error"]["message"] == "invalid_json_response"
        assert response["error"]["http_status"] == 502

    @pytest.mark.asyncio
    async def test_http_error_status_without_meta_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"detail": "boom"})

        response = await _client(handler).send_message("bot-1", "5511", {"type": "template"})

        assert response["error"]["message"] == "http_error_status"


class TestMarkAsRead:
    @pytest.mark.asyncio
    async def test_typing_indicator_body(self) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"success": True})

        response = await _client(handler).mark_as_read(
            "bot-1", "wamid.IN", typing_indicator=True
        )

        assert response == {"success": True}
        assert bodies == [
            {
                "messaging_product": "whatsapp",
                "status": "read",
                "message_id": "wamid.IN",
                "typing_indicator": {"type": "text"},
            }
        ]

    @pytest.mark.asyncio
    async def test_plain_read_receipt(self) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"success": True})

        await _client(handler).mark_as_read("bot-1", "wamid.IN")

        assert "typing_indicator" not in bodies[0]


def test_empty_token_rejected() -> None:
    with pytest.raises(ValueError):
        WhatsAppHttpClient("  ", SETTINGS)


class TestMetaErrors:
    def test_parse_meta_error(self) -> None:
        meta_error = parse_meta_error(
            {"error": {"type": "OAuthException", "code": 190, "message": "expired"}}
        )

        assert meta_error is not None
        assert meta_error.error_code == 190
        assert meta_error.is_permanent is True

    def test_no_error_field(self) -> None:
        assert parse_meta_error({"messages": []}) is None

    @pytest.mark.parametrize(
        ("code", "error_type", "expected"),
        [
            (132001, "", True),
            (100, "", True),
            (429, "", False),
            (131000, "", False),
            (0, "TransportError", False),
        ],
    )
    def test_permanent_classification(self, code: int, error_type: str, expected: bool) -> None:
        assert is_permanent_error(code, error_type) is expected
