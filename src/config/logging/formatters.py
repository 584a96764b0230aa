"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios:
- correlation_id
- service
- action
- timestamp (asctime)
- level
- logger (name)
- message

Sem PII: telefones nunca entram nos campos extras.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável para facilitar leitura em console
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    "action",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "ERROR",
            "logger": "app.use_cases.whatsapp.start_flow",
            "message": "Informe flowId ou flowName",
            "correlation_id": "abc-123",
            "service": "whatsapp_actions",
            "action": "startFlow",
            "error_code": "VALIDATION_ERROR"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
