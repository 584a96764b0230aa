"""Estado da integração persistido em Redis pelo fluxo de setup.

Na configuração via OAuth/sandbox o remetente padrão e o token são
gravados pelo setup (fora deste núcleo); aqui só há leitura.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.protocols.integration_state import IntegrationStateError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

    from app.protocols.integration_state import IntegrationStateProtocol

logger = logging.getLogger(__name__)

STATE_PREFIX = "integration:"
DEFAULT_SENDER_KEY = f"{STATE_PREFIX}default_phone_number_id"
CREDENTIAL_KEY = f"{STATE_PREFIX}access_token"


def _decode(value: bytes | str | None) -> str | None:
    if value is None:
        return None
    return value.decode("utf-8") if isinstance(value, bytes) else value


class RedisIntegrationState:
    """Lê estado do Redis, caindo para um estado secundário quando ausente.

    Args:
        async_redis_client: Cliente Redis assíncrono
        fallback: Estado consultado quando a chave não existe no Redis
    """

    def __init__(
        self,
        async_redis_client: AsyncRedis[bytes],
        fallback: IntegrationStateProtocol | None = None,
    ) -> None:
        self._redis = async_redis_client
        self._fallback = fallback

    async def read_default_sender_id(self) -> str | None:
        value = await self._read(DEFAULT_SENDER_KEY)
        if value is None and self._fallback is not None:
            return await self._fallback.read_default_sender_id()
        return value

    async def read_credential(self) -> str | None:
        value = await self._read(CREDENTIAL_KEY)
        if value is None and self._fallback is not None:
            return await self._fallback.read_credential()
        return value

    async def _read(self, key: str) -> str | None:
        try:
            value = await self._redis.get(key)
        except RedisError as exc:
            logger.warning("integration_state_read_failed", extra={"key": key})
            raise IntegrationStateError("Falha ao ler estado da integração no Redis") from exc
        return _decode(value) or None
