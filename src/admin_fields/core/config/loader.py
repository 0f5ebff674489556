# src/admin_fields/core/config/loader.py
"""
Loader canônico da configuração do painel administrativo.

A configuração efetiva é resolvida a partir de:
    - um arquivo base (obrigatório)
    - um arquivo local de overrides (opcional)
    - defaults embutidos (`identifierField: "id"`, `instances: {}`)

Shape esperado:

    identifierField: id
    instances:
      users:
        model: User
        fields: {...}        # overrides globais da instância
        list: {fields: {...}} # overrides por action

Responsabilidades do módulo:
    - Carregar YAML ou JSON
    - Validar o tipo raiz e a seção `instances`
    - Resolver a configuração final via `deep_merge` (local vence)

Limites explícitos:
    - Não normaliza notações de campo
    - Não localiza models nem instâncias de uma requisição
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigNotFoundError,
    InvalidConfigRootTypeError,
    InvalidInstancesSectionError,
    UnsupportedConfigFormatError,
)

DEFAULT_IDENTIFIER_FIELD = "id"

BUILTIN_DEFAULTS: Dict[str, Any] = {
    "identifierField": DEFAULT_IDENTIFIER_FIELD,
    "instances": {},
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida o tipo raiz.

    Arquivos vazios são interpretados como `{}`.

    Raises:
        ConfigNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _apply_builtin_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    effective = dict(config)
    for key, value in BUILTIN_DEFAULTS.items():
        if effective.get(key) is None:
            effective[key] = deepcopy(value)

    if not isinstance(effective["instances"], dict):
        raise InvalidInstancesSectionError(
            f"'instances' deve ser dict, recebido: {type(effective['instances']).__name__}"
        )

    return effective


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva do painel administrativo.

    Política de resolução:
        - O arquivo base é obrigatório
        - O arquivo local é opcional; se o caminho não existir, é ignorado
        - Quando presente, o local sempre tem prioridade sobre o base
        - Defaults embutidos preenchem apenas chaves ausentes ou nulas

    Args:
        defaults_path (str): Caminho para o arquivo base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        ConfigNotFoundError: Se o arquivo base não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        InvalidInstancesSectionError: Se `instances` não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return _apply_builtin_defaults(effective)
