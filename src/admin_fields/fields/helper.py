# src/admin_fields/fields/helper.py
"""
Ponto de entrada usado pelos handlers do painel (list, add, edit, view).

`get_fields` reúne, a partir do RequestContext, tudo o que o resolver
precisa: overrides globais da instância, overrides da action, atributos
do model e o nome do campo identificador.

Exemplo de resultado:

    {
        "email": ResolvedFieldEntry(
            config=FieldConfig(key="email", title="User Email", type="string", required=True),
            model=ModelAttribute(key="email", type="string", required=True),
        ),
        ...
    }
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from admin_fields.core.errors import payload_from_exception
from admin_fields.core.exceptions import MissingModel
from admin_fields.core.lookup import (
    find_action_config,
    find_instance_config,
    find_model,
    identifier_field_for,
    model_attributes_of,
)
from admin_fields.core.request_context import RequestContext

from .resolver import SCOPE, pick_model_attributes, resolve_fields
from .types import ActionType, ResolvedFieldEntry


def get_fields(
    ctx: RequestContext,
    model: Optional[Any] = None,
    action_type: Optional[Union[ActionType, str]] = None,
) -> Dict[str, ResolvedFieldEntry]:
    """
    Resolve os campos visíveis da instância requisitada.

    Args:
        ctx (RequestContext): Contexto da requisição.
        model: Model a usar; se omitido, é localizado via `find_model`.
        action_type: Action a resolver; default `ctx.action`, depois "list".

    Returns:
        Dict[str, ResolvedFieldEntry]: Campos visíveis na ordem de declaração,
        ou `{}` quando não há model, o model não tem atributos ou a action
        está desabilitada (`<action>: false` na instância).

    Raises:
        InstanceNotFound: Se a instância não estiver configurada.
        InvalidArgument: Propagada do normalizador (bug de chamada).
    """
    instance_config = find_instance_config(ctx)
    action = action_type or ctx.action or ActionType.LIST
    action = action.value if isinstance(action, ActionType) else str(action)

    try:
        if model is None:
            model = find_model(ctx)
        attributes = model_attributes_of(model)
    except MissingModel as exc:
        payload = payload_from_exception(exc)
        ctx.add_warning(scope=SCOPE, message=payload.message)
        ctx.log(scope=SCOPE, level="WARNING", message=payload.message, error=payload.to_dict())
        return {}

    action_config = find_action_config(ctx, action)
    if not action_config["enabled"]:
        ctx.log(scope=SCOPE, level="INFO", message="Action desabilitada na instância", action=action)
        return {}

    global_fields = instance_config.get("fields")
    if global_fields is None:
        global_fields = {}
    elif not isinstance(global_fields, Mapping):
        message = "Seção `fields` da instância ignorada: esperado um mapa"
        ctx.add_warning(scope=SCOPE, message=message)
        ctx.log(
            scope=SCOPE,
            level="WARNING",
            message=message,
            value_type=type(global_fields).__name__,
        )
        global_fields = {}

    result = resolve_fields(
        pick_model_attributes(attributes),
        global_fields,
        action_config["fields"],
        action,
        identifier_field_for(ctx),
        ctx=ctx,
    )

    ctx.log(
        scope=SCOPE,
        level="INFO",
        message="Campos resolvidos",
        action=action,
        fields=list(result),
    )
    return result
