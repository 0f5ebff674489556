# src/admin_fields/fields/normalizer.py
"""
Normalizador de notações de configuração de campo.

Um override de campo pode ser escrito em três notações:

+ Booleana

    fieldName: true   # exibe/edita o campo com o título default
    fieldName: false  # remove o campo da tela

+ String

    fieldName: "Field Title"

+ Objeto

    fieldName:
      title: Field title   # sobrescreve o título
      type: string         # sobrescreve o tipo vindo do model
      required: true       # marca o campo como obrigatório
      editor: true         # qualquer propriedade extra é repassada

O normalizador converte qualquer uma delas em um `FieldConfig` canônico ou no
marcador explícito `Visibility.HIDDEN`.

Invariantes:
    - `key` e `title` estão sempre presentes em um FieldConfig normalizado
    - O mapping recebido nunca é mutado
    - Normalizar um FieldConfig já normalizado só re-aplica defaults
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from admin_fields.core.exceptions import InvalidArgument

from .types import (
    EnabledOverride,
    FieldConfig,
    HiddenOverride,
    InvalidOverride,
    RawOverride,
    RecordOverride,
    TitleOverride,
    Visibility,
)


def parse_override(raw: Any) -> RawOverride:
    """Classifica o valor bruto em uma das variantes de `RawOverride`."""
    # bool antes de qualquer outro teste: True/False também são int
    if isinstance(raw, bool):
        return EnabledOverride() if raw else HiddenOverride()
    if isinstance(raw, str):
        return TitleOverride(title=raw)
    if isinstance(raw, FieldConfig):
        return RecordOverride(properties=raw.to_dict())
    if isinstance(raw, Mapping):
        return RecordOverride(properties=raw)
    return InvalidOverride(value=raw)


def normalize_field_config(raw: Any, key: str) -> Union[FieldConfig, Visibility]:
    """
    Normaliza um override de campo para a forma canônica.

    Args:
        raw: Valor escrito na configuração (bool, str, mapping ou FieldConfig).
        key (str): Nome do atributo ao qual o override se refere.

    Returns:
        FieldConfig | Visibility: Configuração canônica, ou `Visibility.HIDDEN`
        para `false` e para qualquer notação não reconhecida.

    Raises:
        InvalidArgument: Se `raw` ou `key` estiverem ausentes.
    """
    if raw is None or not isinstance(key, str) or not key:
        raise InvalidArgument(
            message="Nenhum `raw` ou `key` informado ao normalizador",
            details={"key": key, "raw_type": type(raw).__name__},
            hint="Chame o normalizador com o valor do override e o nome do atributo.",
        )

    override = parse_override(raw)

    if isinstance(override, EnabledOverride):
        return FieldConfig(key=key, title=key)

    if isinstance(override, TitleOverride):
        return FieldConfig(key=key, title=override.title)

    if isinstance(override, RecordOverride):
        properties = dict(override.properties)
        if not properties.get("key"):
            properties["key"] = key
        if not properties.get("title"):
            properties["title"] = key
        return FieldConfig.from_mapping(properties)

    return Visibility.HIDDEN
