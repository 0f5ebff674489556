# src/admin_fields/fields/resolver.py
"""
Resolver de campos do painel administrativo.

Para cada atributo declarado no model, o resolver combina três fontes em
ordem crescente de precedência:

    1. o atributo do model (tipo e obrigatoriedade)
    2. os overrides globais da instância (`instances.<nome>.fields`)
    3. os overrides da action (`instances.<nome>.<action>.fields`)

Resultado: um dicionário `key -> ResolvedFieldEntry`, na ordem de declaração
dos atributos, contendo apenas campos visíveis.

Regras de precedência:
    - A visibilidade é decidida antes do merge de conteúdo
      (`decide_visibility`): `false` na action oculta; qualquer outro valor
      definido na action reexibe o campo, mesmo que o global o tenha ocultado
    - O conteúdo é combinado por `fold_field_layers` (action vence global)
    - `required` é OR entre override e model
    - `type` do override vence; sem ele, vale o do model
    - Na action `add`, o campo identificador nunca aparece

Invariantes:
    - Mappings recebidos do chamador nunca são mutados
    - O único efeito colateral possível é registrar eventos no RequestContext
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Union

from admin_fields.core.errors import field_override_malformed
from admin_fields.core.request_context import RequestContext

from .layers import fold_field_layers
from .normalizer import normalize_field_config
from .types import ActionType, FieldConfig, ModelAttribute, ResolvedFieldEntry, Visibility

SCOPE = "fields"


def decide_visibility(global_override: Any, action_override: Any) -> Visibility:
    """
    Decide se um campo é exibido a partir dos overrides global e da action.

    `None` é tratado como ausência de override. Apenas o literal `False`
    oculta; notações malformadas não ocultam o campo.
    """
    if action_override is not None:
        return Visibility.HIDDEN if action_override is False else Visibility.VISIBLE
    if global_override is False:
        return Visibility.HIDDEN
    return Visibility.VISIBLE


def pick_model_attributes(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Seleciona os atributos que participam da resolução.

    Mantém apenas declarações string ou mapping sem marcadores relacionais
    (`collection`, `model`); métodos e demais valores são descartados.
    """
    picked: Dict[str, Any] = {}
    for key, declaration in attributes.items():
        if isinstance(declaration, ModelAttribute):
            if not declaration.is_relational:
                picked[key] = declaration
            continue
        if isinstance(declaration, str):
            picked[key] = declaration
            continue
        if isinstance(declaration, Mapping):
            if declaration.get("collection") or declaration.get("model"):
                continue
            picked[key] = declaration
    return picked


def is_identifier(entry: ResolvedFieldEntry, identifier_field: str) -> bool:
    """Indica se a entrada resolvida é o campo identificador do model."""
    return entry.config.key == identifier_field


def _layer(
    raw: Any,
    key: str,
    layer_name: str,
    ctx: Optional[RequestContext],
) -> Optional[FieldConfig]:
    if raw is None or raw is False:
        return None
    normalized = normalize_field_config(raw, key)
    if normalized is Visibility.HIDDEN:
        if ctx is not None:
            payload = field_override_malformed(
                key=key, layer=layer_name, value_type=type(raw).__name__
            )
            ctx.add_warning(scope=f"{SCOPE}.{key}", message=payload.message)
            ctx.log(scope=SCOPE, level="WARNING", message=payload.message, error=payload.to_dict())
        return None
    return normalized


def resolve_fields(
    model_attributes: Mapping[str, Any],
    global_fields: Optional[Mapping[str, Any]],
    action_fields: Optional[Mapping[str, Any]],
    action_name: Union[ActionType, str],
    identifier_field: str,
    *,
    ctx: Optional[RequestContext] = None,
) -> Dict[str, ResolvedFieldEntry]:
    """
    Resolve a configuração final de cada campo visível do model.

    Args:
        model_attributes: Atributos do model (nome → declaração). Declaração
            string é atalho para `{"type": ...}`.
        global_fields: Overrides globais da instância (None ou não-mapa = vazio).
        action_fields: Overrides da action (mesma regra); vencem os globais.
        action_name: Action corrente (list, add, edit, view, remove).
        identifier_field: Nome do atributo identificador do model.
        ctx: Contexto opcional onde eventos e warnings são registrados.

    Returns:
        Dict[str, ResolvedFieldEntry]: Campos visíveis, na ordem de declaração.
    """
    # shapes que não são mapa equivalem a "sem overrides" na camada
    global_fields = global_fields if isinstance(global_fields, Mapping) else {}
    action_fields = action_fields if isinstance(action_fields, Mapping) else {}
    action = action_name.value if isinstance(action_name, ActionType) else str(action_name)

    result: Dict[str, ResolvedFieldEntry] = {}

    for key, declaration in model_attributes.items():
        model_field = ModelAttribute.from_declaration(key, declaration)

        if action == ActionType.ADD.value and key == identifier_field:
            continue

        global_override = global_fields.get(key)
        action_override = action_fields.get(key)

        if decide_visibility(global_override, action_override) is Visibility.HIDDEN:
            if ctx is not None:
                ctx.log(scope=SCOPE, level="DEBUG", message="Campo oculto por configuração", key=key)
            continue

        merged = fold_field_layers(
            FieldConfig(key=key, title=key),
            _layer(global_override, key, "global", ctx) or {},
            _layer(action_override, key, action, ctx) or {},
        )

        config = normalize_field_config(merged, key)
        config = replace(
            config,
            required=bool(config.required or model_field.required),
            type=config.type or model_field.type,
        )

        result[key] = ResolvedFieldEntry(config=config, model=model_field)

    return result
