"""
admin_fields — Canonical Error Structures (v1)

Este módulo define o payload serializável de erro do admin_fields e o
catálogo estável de códigos usados por handlers (list/add/edit/view)
para reportar falhas de resolução de campos.

Erros devem ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import AdminException, InstanceNotFound, InvalidArgument, MissingModel


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AdminErrorPayload:
    """
    Payload canônico de erro do admin_fields.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor da configuração
    - fatal: indica se a requisição não pode prosseguir
      (MissingModel, por exemplo, não é fatal: a tela mostra zero campos)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    fatal: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

FIELD_INVALID_ARGUMENT = "FIELD_INVALID_ARGUMENT"
FIELD_OVERRIDE_MALFORMED = "FIELD_OVERRIDE_MALFORMED"
MODEL_NOT_FOUND = "MODEL_NOT_FOUND"
INSTANCE_NOT_FOUND = "INSTANCE_NOT_FOUND"
UNKNOWN_ERROR = "UNKNOWN_ERROR"

_EXCEPTION_TYPES = (
    (InvalidArgument, FIELD_INVALID_ARGUMENT, True),
    (MissingModel, MODEL_NOT_FOUND, False),
    (InstanceNotFound, INSTANCE_NOT_FOUND, True),
)


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def field_override_malformed(
    *,
    key: str,
    layer: str,
    value_type: str,
    hint: str = "Use true/false, uma string (título) ou um objeto para configurar o campo.",
) -> AdminErrorPayload:
    return AdminErrorPayload(
        type=FIELD_OVERRIDE_MALFORMED,
        message="Override de campo com notação inválida foi ignorado",
        details={"key": key, "layer": layer, "value_type": value_type},
        hint=hint,
        fatal=False,
    )


def payload_from_exception(exc: AdminException) -> AdminErrorPayload:
    """Mapeia uma exceção tipada para o payload canônico correspondente."""
    for exc_type, code, fatal in _EXCEPTION_TYPES:
        if isinstance(exc, exc_type):
            return AdminErrorPayload(
                type=code,
                message=exc.message,
                details=dict(exc.details),
                hint=exc.hint,
                fatal=fatal,
            )
    return AdminErrorPayload(
        type=UNKNOWN_ERROR,
        message=exc.message,
        details=dict(exc.details),
        hint=exc.hint,
    )
