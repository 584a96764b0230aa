"""Settings base do serviço de actions WhatsApp.

Configurações comuns a todos os componentes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]
ConversationStoreBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        log_level: Nível de log raiz
        redis_url: URL de conexão Redis
        conversation_store_backend: Backend do store de conversas
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "whatsapp-actions"
    log_level: str = "INFO"

    # Redis
    redis_url: str = ""

    # Stores
    conversation_store_backend: ConversationStoreBackend = "memory"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.conversation_store_backend not in ("memory", "redis"):
            errors.append(
                f"CONVERSATION_STORE_BACKEND inválido: {self.conversation_store_backend}"
            )

        if self.conversation_store_backend == "redis" and not self.redis_url:
            errors.append("REDIS_URL obrigatório com CONVERSATION_STORE_BACKEND=redis")

        if self.conversation_store_backend == "memory" and not self.is_development:
            errors.append("CONVERSATION_STORE_BACKEND=memory proibido em staging/production")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _default_backend_for_env(environment: Environment) -> str:
    return "memory" if environment == "development" else "redis"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    environment = _parse_environment(os.getenv("ENVIRONMENT", "development"))
    return BaseSettings(
        environment=environment,
        service_name=os.getenv("SERVICE_NAME", "whatsapp-actions"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        redis_url=os.getenv("REDIS_URL", ""),
        conversation_store_backend=os.getenv(  # type: ignore[arg-type]
            "CONVERSATION_STORE_BACKEND", _default_backend_for_env(environment)
        ).lower(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
