# tests/conftest.py
"""
Fixtures compartilhados para testes do admin_fields.

Este módulo define fixtures reutilizáveis que fornecem:
- arquivos de configuração do painel em YAML (como string)
- configuração já resolvida como dicionário
- um model de usuário com atributos escalares e relacionais
- RequestContext determinístico

Decisões arquiteturais:
    - Fixtures são simples, explícitas e sem I/O
    - Imports do pacote são feitos de forma lazy para melhorar a
      clareza de erros durante falhas de import

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Config loader fixtures
# =====================================================

@pytest.fixture
def admin_config_defaults_yaml() -> str:
    """
    YAML base (defaults) do painel, semelhante a um `config/adminpanel.yaml`.

    Contém uma instância `users` com overrides globais e por action.

    Returns:
        str: Conteúdo YAML do arquivo base.
    """
    return """\
identifierField: id
instances:
  users:
    title: Users
    model: User
    fields:
      email: User Email
      createdAt: false
      bio:
        title: User bio
        editor: true
    list:
      fields:
        bio: false
    edit:
      fields:
        createdAt: Created at
"""


@pytest.fixture
def admin_config_local_yaml() -> str:
    """
    YAML local de overrides.

    Troca a notação do campo `email` (string → objeto) e do campo `bio`
    (objeto → false), o que só é aceito dentro de mapas `fields`.
    """
    return """\
instances:
  users:
    fields:
      email:
        title: E-mail
        required: true
      bio: false
"""


# =====================================================
# Resolver fixtures
# =====================================================

@pytest.fixture
def admin_config() -> dict:
    """
    Configuração do painel já resolvida.

    Returns:
        dict: Configuração com a instância `users`.
    """
    return {
        "identifierField": "id",
        "instances": {
            "users": {
                "title": "Users",
                "model": "User",
                "fields": {
                    "email": "User Email",
                    "createdAt": False,
                    "bio": {"title": "User bio", "editor": True},
                },
                "list": {"fields": {"bio": False}},
                "edit": {"fields": {"createdAt": "Created at"}},
                "remove": False,
            },
            "ghosts": {"model": "Ghost"},
        },
    }


@pytest.fixture
def user_model() -> dict:
    """
    Model `User` com atributos escalares, um atributo obrigatório,
    um método e dois atributos relacionais.
    """
    return {
        "attributes": {
            "id": {"type": "string"},
            "name": "string",
            "email": {"type": "email", "required": True},
            "bio": {"type": "text"},
            "createdAt": {"type": "datetime"},
            "pets": {"collection": "pet"},
            "company": {"model": "company"},
            "toJSON": lambda: {},
        }
    }


@pytest.fixture
def make_ctx(admin_config, user_model):
    """
    Fixture factory de RequestContext.

    Returns:
        Callable[..., RequestContext]: fábrica que aceita `instance_name`,
        `action` e `models` opcionais.
    """
    from admin_fields.core.request_context import RequestContext

    def _make(instance_name="users", action=None, models=None, config=None):
        return RequestContext(
            request_id="req-test-001",
            config=config if config is not None else admin_config,
            instance_name=instance_name,
            action=action,
            models=models if models is not None else {"user": user_model},
            meta={"source": "pytest"},
        )

    return _make
