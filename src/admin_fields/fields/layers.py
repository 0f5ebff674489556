# src/admin_fields/fields/layers.py
"""
Fold de camadas de configuração de campo.

As camadas são aplicadas da esquerda para a direita (menor → maior
precedência): default `{key, title}`, override global da instância,
override da action.

Política de merge:
    - propriedade definida na camada posterior vence
    - valor None (ou ausente) nunca sobrescreve
    - mapping + mapping → merge recursivo com a mesma política
    - qualquer outro valor (inclusive listas) → sobrescrita total

Diferente de `core.config.deep_merge`, não existe conflito de tipo aqui:
autores de configuração podem trocar `editor: true` por `editor: {...}`.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping, Union

from .types import FieldConfig

Layer = Union[FieldConfig, Mapping[str, Any]]


def _as_mapping(layer: Layer) -> Mapping[str, Any]:
    if isinstance(layer, FieldConfig):
        return layer.to_dict()
    return layer


def _merge_into(target: Dict[str, Any], layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        if value is None:
            continue
        current = target.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged = dict(current)
            _merge_into(merged, value)
            target[key] = merged
            continue
        target[key] = deepcopy(value)


def fold_field_layers(*layers: Layer) -> Dict[str, Any]:
    """
    Combina camadas de configuração em um novo dicionário.

    Nenhuma camada recebida é mutada.
    """
    merged: Dict[str, Any] = {}
    for layer in layers:
        _merge_into(merged, _as_mapping(layer))
    return merged
