"""Builder para mensagens de template."""

from __future__ import annotations

import json
import logging
from typing import Any

from config.settings.whatsapp import DEFAULT_TEMPLATE_LANGUAGE
from utils.errors import ValidationError, raise_logged

logger = logging.getLogger(__name__)


def parse_template_variables(raw: str | None) -> list[Any]:
    """Converte o JSON de variáveis do template em lista ordenada.

    Args:
        raw: String com array JSON, ou None/vazio quando sem variáveis

    Returns:
        Valores na ordem informada (lista vazia sem variáveis)

    Raises:
        ValidationError: Se a string não for JSON válido ou não for array
    """
    if not raw:
        return []

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise_logged(
            logger,
            ValidationError(
                f"Valor informado em templateVariablesJson não é JSON válido "
                f"(erro: {exc.msg}). Recebido: {raw}"
            ),
        )

    if not isinstance(parsed, list):
        raise_logged(
            logger,
            ValidationError(
                f"templateVariablesJson deve ser um array JSON. Recebido: {raw}"
            ),
        )

    return parsed


def build_template_message(
    template_name: str,
    variables: list[Any],
    language: str | None = None,
) -> dict[str, Any]:
    """Constrói corpo de mensagem de template.

    Args:
        template_name: Nome do template aprovado na Meta
        variables: Valores do body, na ordem dos placeholders
        language: Código de idioma (padrão: "en")

    Returns:
        Corpo `template` conforme API Meta
    """
    if not template_name:
        raise_logged(logger, ValidationError("templateName é obrigatório"))

    template_obj: dict[str, Any] = {
        "name": template_name,
        "language": {"code": language or DEFAULT_TEMPLATE_LANGUAGE},
    }

    if variables:
        template_obj["components"] = [
            {
                "type": "body",
                "parameters": [
                    {"type": "text", "text": v if isinstance(v, str) else json.dumps(v)}
                    for v in variables
                ],
            }
        ]

    return {"type": "template", "template": template_obj}
