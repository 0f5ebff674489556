# src/admin_fields/core/lookup.py
"""
Lookup de configuração e model a partir do RequestContext.

Estas funções são os colaboradores que fornecem dados já carregados ao
resolver de campos:

    - find_instance_config → bloco da instância em `config["instances"]`
    - find_model           → model registrado para a instância
    - find_action_config   → bloco da action, sempre com um mapa `fields`
    - identifier_field_for → nome do campo identificador

Limites explícitos:
    - Não carrega arquivos (ver `core.config.loader`)
    - Não resolve campos
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .config import DEFAULT_IDENTIFIER_FIELD
from .exceptions import InstanceNotFound, MissingModel
from .request_context import RequestContext

IDENTIFIER_FIELD_KEY = "identifierField"


def find_instance_config(ctx: RequestContext) -> Dict[str, Any]:
    instances = ctx.config.get("instances") or {}
    instance = instances.get(ctx.instance_name)
    if not isinstance(instance, Mapping):
        raise InstanceNotFound(
            message=f"Instância não configurada: {ctx.instance_name}",
            details={"instance": ctx.instance_name, "available": sorted(instances)},
            hint="Declare a instância em `instances` no arquivo de configuração.",
        )
    return dict(instance)


def find_model(ctx: RequestContext) -> Any:
    """
    Localiza o model da instância no registro do contexto.

    A chave `model` da instância é comparada sem diferenciar maiúsculas
    (`User` encontra o model registrado como `user`). Sem a chave `model`,
    o nome da própria instância é usado.

    Raises:
        MissingModel: Se nenhum model registrado corresponder.
    """
    instance = find_instance_config(ctx)
    model_name = instance.get("model") or ctx.instance_name

    wanted = str(model_name).lower()
    for name, model in ctx.models.items():
        if str(name).lower() == wanted:
            return model

    raise MissingModel(
        message=f"Model não encontrado: {model_name}",
        details={"instance": ctx.instance_name, "model": model_name},
        hint="Registre o model no RequestContext ou corrija a chave `model` da instância.",
    )


def model_attributes_of(model: Any) -> Mapping[str, Any]:
    """
    Retorna os atributos de um model (mapping com `attributes` ou objeto
    com atributo `attributes`).

    Raises:
        MissingModel: Se o model não declarar atributos.
    """
    if isinstance(model, Mapping):
        attributes = model.get("attributes")
    else:
        attributes = getattr(model, "attributes", None)

    if not isinstance(attributes, Mapping) or not attributes:
        raise MissingModel(
            message="Model sem atributos declarados",
            details={"model_type": type(model).__name__},
        )
    return attributes


def find_action_config(ctx: RequestContext, action: str) -> Dict[str, Any]:
    """
    Retorna o bloco de configuração da action, sempre com `fields` mapping.

    Notações aceitas no bloco da instância:
        - ausente ou `true` → action habilitada, sem overrides
        - `false`           → action desabilitada, sem overrides
        - objeto            → copiado; `fields` ausente vira `{}`
    """
    instance = find_instance_config(ctx)
    raw = instance.get(action)

    if raw is False:
        return {"enabled": False, "fields": {}}

    if not isinstance(raw, Mapping):
        return {"enabled": True, "fields": {}}

    action_config = dict(raw)
    action_config.setdefault("enabled", True)
    if not isinstance(action_config.get("fields"), Mapping):
        action_config["fields"] = {}
    return action_config


def identifier_field_for(ctx: RequestContext) -> str:
    instance = find_instance_config(ctx)
    return (
        instance.get(IDENTIFIER_FIELD_KEY)
        or ctx.config.get(IDENTIFIER_FIELD_KEY)
        or DEFAULT_IDENTIFIER_FIELD
    )
