# src/admin_fields/core/config/merge.py
"""
Deep-merge canônico de arquivos de configuração do painel.

Este módulo implementa a política usada para combinar o arquivo base de
configuração (defaults) com o arquivo local de overrides.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total
    - escalar → sobrescrita direta
    - conflito de tipos → `ConfigTypeConflictError`
    - filhos diretos de um mapa `fields` → sobrescrita total, sem checagem
      de tipo (um campo pode passar de `{title: ...}` para `false`)

Princípios fundamentais:
    - O merge é puramente funcional: nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída

Limites explícitos:
    - Não carrega arquivos
    - Não normaliza notações de campo (responsabilidade de `fields.normalizer`)
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError

FIELDS_SECTION_KEY = "fields"


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza o deep-merge determinístico entre configuração base e override.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides locais.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se a raiz não for dict ou se uma mesma chave
            tiver tipos incompatíveis fora de um mapa `fields`.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    return _merge(base, override, path=())


def _merge(base: Dict[str, Any], override: Dict[str, Any], path: Tuple[str, ...]) -> Dict[str, Any]:
    result: Dict[str, Any] = deepcopy(base)
    inside_fields = bool(path) and path[-1] == FIELDS_SECTION_KEY

    for key, override_value in override.items():
        if key not in result or inside_fields:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = _merge(base_value, override_value, path + (str(key),))
            continue

        if isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        if type(base_value) is not type(override_value):
            dotted = ".".join(path + (str(key),))
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{dotted}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
