# src/admin_fields/core/config/errors.py
"""
Exceções canônicas da camada de configuração do admin_fields.

Este módulo define a hierarquia de exceções levantadas durante o
carregamento e a resolução do arquivo de configuração do painel
administrativo (`identifierField`, `instances`, `fields` por instância
e por action).

As exceções aqui definidas representam **configuração estruturalmente
inválida**. Elas não cobrem overrides de campo malformados, que são
degradados silenciosamente para "campo oculto" pelo normalizador.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de resolução de campos

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do resolver de campos nem do RequestContext
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do painel administrativo.

    Permite captura genérica de qualquer falha de load/merge sem
    confundi-la com erros de contrato do normalizador (`InvalidArgument`).
    """


class ConfigNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo base de configuração não existe.

    Decisões arquiteturais:
        - O arquivo base (defaults) é obrigatório
        - O arquivo local de overrides é opcional e nunca gera este erro
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do arquivo não é um mapa chave-valor."""


class InvalidInstancesSectionError(ConfigError):
    """
    Exceção levantada quando a seção `instances` não é um mapa.

    Exemplo inválido:
        - instances: [users, posts]

    Cada instância precisa ser endereçável pelo nome usado na rota
    do painel, por isso listas não são aceitas.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"instances": {"users": {"list": {"fields": {}}}}}
        - override: {"instances": {"users": {"list": "disabled"}}}

    Exceção à regra:
        - Entradas diretas de um mapa `fields` são substituídas por completo,
          pois um override de campo pode trocar de notação (ex.: objeto → false)

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
