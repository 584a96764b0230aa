"""Exceções de domínio das actions de mensageria.

Cada action termina em exatamente um resultado ou exatamente um erro
desta hierarquia. Nenhum deles é retentado internamente.
"""

from __future__ import annotations

from typing import Any


class ActionError(RuntimeError):
    """Base para falhas terminais de uma invocação de action."""

    code: str = "ACTION_ERROR"


class ConfigurationError(ActionError):
    """Identidade de envio ou credencial ausente (requer operador)."""

    code = "CONFIGURATION_ERROR"


class ValidationError(ActionError):
    """Input do chamador viola uma regra estrutural do payload."""

    code = "VALIDATION_ERROR"


class PolicyError(ActionError):
    """Action não permitida no modo de configuração atual."""

    code = "POLICY_ERROR"


class DispatchError(ActionError):
    """A rede de mensageria rejeitou ou falhou o envio.

    Args:
        message: Mensagem com contexto de diagnóstico
        upstream_error: Conteúdo bruto do erro retornado pela rede
    """

    code = "DISPATCH_ERROR"

    def __init__(self, message: str, upstream_error: Any = None) -> None:
        super().__init__(message)
        self.upstream_error = upstream_error
