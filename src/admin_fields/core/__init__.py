# src/admin_fields/core/__init__.py
"""
Core do admin_fields.

Este pacote reúne a infraestrutura independente da resolução de campos:

    - config          → carregamento e deep-merge do arquivo do painel
    - request_context → estado explícito de uma requisição + eventos
    - lookup          → instância, model, action e campo identificador
    - exceptions      → exceções tipadas
    - errors          → payload canônico de erro

Limites explícitos:
    - Não depende de frameworks web
    - Não persiste dados
"""
