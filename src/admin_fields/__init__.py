# src/admin_fields/__init__.py
"""
admin_fields — resolução declarativa de campos para painéis administrativos.

Dado um model e a configuração do painel, o pacote calcula quais campos
cada action (list, add, edit, view, remove) exibe e com qual configuração
(título, tipo, obrigatoriedade, propriedades extras como `editor`).

Arquitetura em alto nível:
    - core.config          → carregamento e merge do arquivo de configuração
    - core.request_context → contexto explícito da requisição
    - fields.normalizer    → notações booleana, string e objeto
    - fields.resolver      → precedência model < global < action

Limites explícitos:
    - Não persiste dados
    - Não valida valores submetidos
    - Não renderiza telas
"""
from .core.request_context import RequestContext
from .fields import get_fields, normalize_field_config

__all__ = ["RequestContext", "get_fields", "normalize_field_config"]
