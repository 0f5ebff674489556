
"""
Camada de configuração do admin_fields.

Este pacote carrega e resolve o arquivo de configuração do painel
administrativo, a partir do qual o resolver de campos obtém os overrides
globais (`instances.<nome>.fields`) e por action
(`instances.<nome>.<action>.fields`).

Princípios fundamentais:
    - Configuração é declarativa e não contém lógica de domínio
    - Overrides locais são sempre explícitos e têm prioridade
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não normaliza notações de campo
    - Não interage com models ou requisições
"""

from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidInstancesSectionError,
    UnsupportedConfigFormatError,
)
from .loader import DEFAULT_IDENTIFIER_FIELD, load_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidInstancesSectionError",
    "UnsupportedConfigFormatError",
    "DEFAULT_IDENTIFIER_FIELD",
    "load_config",
    "deep_merge",
]
