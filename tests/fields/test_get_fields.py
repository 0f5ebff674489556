# tests/fields/test_get_fields.py
"""
Testes do ponto de entrada `get_fields`.

Os testes asseguram que:
- a action default é a do contexto, depois "list"
- overrides globais e da action vêm da configuração da instância
- atributos relacionais e métodos do model são ignorados
- model ausente resolve para `{}` com warning, sem exceção
- instância ausente e bug de chamada propagam
"""

import pytest

from admin_fields.core.exceptions import InstanceNotFound
from admin_fields.fields.helper import get_fields
from admin_fields.fields.types import ActionType


def test_default_action_is_list(make_ctx):
    """
    Verifica a resolução na action `list`.

    Invariantes:
        - `bio` oculto pela action, `createdAt` oculto pelo global
        - `email` recebe título global e `required` do model
        - Relações (`pets`, `company`) e métodos (`toJSON`) não aparecem
    """
    ctx = make_ctx()
    out = get_fields(ctx)

    assert list(out) == ["id", "name", "email"]
    assert out["email"].config.title == "User Email"
    assert out["email"].config.type == "email"
    assert out["email"].config.required is True


def test_action_from_context(make_ctx):
    ctx = make_ctx(action="edit")
    out = get_fields(ctx)

    assert list(out) == ["id", "name", "email", "bio", "createdAt"]
    assert out["createdAt"].config.title == "Created at"
    assert out["bio"].config.get("editor") is True


def test_explicit_action_type_wins_over_context(make_ctx):
    ctx = make_ctx(action="edit")
    out = get_fields(ctx, action_type=ActionType.ADD)

    assert "id" not in out
    assert "createdAt" not in out


def test_explicit_model(make_ctx):
    ctx = make_ctx(models={})
    out = get_fields(ctx, model={"attributes": {"title": "string", "author": {"model": "user"}}})
    assert list(out) == ["title"]


def test_missing_model_returns_empty_with_warning(make_ctx):
    """
    Verifica que model ausente é um estado de exibição válido.

    Decisões arquiteturais:
        - MissingModel é tratado localmente, não propaga
        - Um warning e um evento com o payload canônico são registrados
    """
    ctx = make_ctx(instance_name="ghosts")
    out = get_fields(ctx)

    assert out == {}
    assert ctx.warnings["fields"]
    assert ctx.events[-1]["error"]["type"] == "MODEL_NOT_FOUND"
    assert ctx.events[-1]["error"]["fatal"] is False


def test_model_without_attributes_returns_empty(make_ctx):
    ctx = make_ctx()
    assert get_fields(ctx, model={"attributes": {}}) == {}


def test_missing_instance_raises(make_ctx):
    ctx = make_ctx(instance_name="invoices")
    with pytest.raises(InstanceNotFound):
        get_fields(ctx)


def test_disabled_action_returns_empty(make_ctx):
    """
    Verifica que `<action>: false` na instância desabilita a tela inteira.
    """
    ctx = make_ctx(action="remove")
    out = get_fields(ctx)

    assert out == {}
    assert ctx.events[-1]["level"] == "INFO"
    assert ctx.events[-1]["message"] == "Action desabilitada na instância"
    assert ctx.events[-1]["action"] == "remove"


def test_non_mapping_fields_sections_are_ignored(make_ctx):
    """
    Verifica a degradação quando `fields` não é um mapa.

    Invariantes:
        - Lista em `fields` (global ou da action) não derruba a resolução
        - Todos os atributos simples aparecem com defaults do model
        - Warning registrado para a seção global ignorada
    """
    config = {
        "identifierField": "id",
        "instances": {
            "users": {"model": "User", "fields": ["name"], "list": {"fields": ["bio"]}},
        },
    }
    ctx = make_ctx(config=config)
    out = get_fields(ctx)

    assert list(out) == ["id", "name", "email", "bio", "createdAt"]
    assert out["name"].config.title == "name"
    assert ctx.warnings["fields"]
    warning_events = [e for e in ctx.events if e["level"] == "WARNING"]
    assert warning_events[0]["value_type"] == "list"


def test_resolution_is_logged(make_ctx):
    ctx = make_ctx()
    get_fields(ctx, action_type="view")

    info = [e for e in ctx.events if e["level"] == "INFO"]
    assert info[-1]["action"] == "view"
    assert info[-1]["fields"] == ["id", "name", "email", "bio"]
