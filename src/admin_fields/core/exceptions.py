"""
admin_fields — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas pelo normalizador,
pelo resolver de campos e pelas funções de lookup da requisição.

Objetivo:
- Permitir que chamadores distingam bug de chamada (InvalidArgument)
  de estado de exibição válido (MissingModel)
- Facilitar o mapeamento determinístico para AdminErrorPayload

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Override de campo malformado NÃO é exceção: degrada para campo oculto.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class AdminException(Exception):
    """Base class para exceções internas do admin_fields.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Contrato de chamada
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidArgument(AdminException):
    """Normalizador chamado sem `raw` ou sem `key` (bug do chamador)."""


# ---------------------------------------------------------------------------
# Lookup da requisição
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class MissingModel(AdminException):
    """Model da instância não encontrado ou sem atributos."""


@dataclass(eq=False)
class InstanceNotFound(AdminException):
    """Instância requisitada não existe na configuração do painel."""
