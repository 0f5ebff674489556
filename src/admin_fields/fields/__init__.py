"""
Resolução de campos do painel administrativo.

Este pacote transforma os atributos de um model e os overrides de
configuração (globais da instância e por action) em um mapa de campos
visíveis, cada um com sua configuração final.

Componentes:
    - normalizer → notações booleana/string/objeto → FieldConfig
    - layers     → fold das camadas de configuração
    - resolver   → visibilidade, precedência e defaults por atributo
    - helper     → `get_fields`, ponto de entrada para handlers
"""

from .helper import get_fields
from .layers import fold_field_layers
from .normalizer import normalize_field_config, parse_override
from .resolver import decide_visibility, is_identifier, pick_model_attributes, resolve_fields
from .types import (
    ActionType,
    FieldConfig,
    ModelAttribute,
    ResolvedFieldEntry,
    Visibility,
)

__all__ = [
    "get_fields",
    "fold_field_layers",
    "normalize_field_config",
    "parse_override",
    "decide_visibility",
    "is_identifier",
    "pick_model_attributes",
    "resolve_fields",
    "ActionType",
    "FieldConfig",
    "ModelAttribute",
    "ResolvedFieldEntry",
    "Visibility",
]
