# src/admin_fields/fields/types.py
"""
Tipos canônicos da resolução de campos do admin_fields.

Este módulo define as estruturas trocadas entre o normalizador, o resolver
e os handlers que consomem o mapa de campos resolvidos.

Componentes principais:
    - ActionType        → enum das actions do painel (list, add, edit, view, remove)
    - Visibility        → enum visível/oculto; `HIDDEN` é também o marcador
                          explícito de "omitir campo" devolvido pelo normalizador
    - ModelAttribute    → atributo declarado no model
    - FieldConfig       → configuração canônica e imutável de um campo
    - ResolvedFieldEntry→ par (FieldConfig, ModelAttribute) emitido pelo resolver
    - RawOverride       → união etiquetada das notações aceitas em overrides

Princípios fundamentais:
    - Tipos são imutáveis (frozen) e serializáveis via `to_dict()`
    - Nenhuma lógica de precedência vive neste módulo

Limites explícitos:
    - Não normaliza notações (ver `fields.normalizer`)
    - Não decide visibilidade (ver `fields.resolver`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


class ActionType(str, Enum):
    """
    Actions do painel cujo bloco de configuração pode sobrescrever os
    overrides globais da instância.

    `ADD` tem regra própria: o campo identificador nunca é exibido.
    """
    LIST = "list"
    ADD = "add"
    EDIT = "edit"
    VIEW = "view"
    REMOVE = "remove"


class Visibility(str, Enum):
    """Decisão de exibição de um campo."""
    VISIBLE = "visible"
    HIDDEN = "hidden"


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------

_MODEL_KNOWN_KEYS = ("type", "required", "collection", "model")


@dataclass(frozen=True)
class ModelAttribute:
    """
    Atributo declarado no model de dados.

    A declaração curta `"string"` equivale a `{"type": "string"}`.
    `collection` e `model` marcam atributos relacionais, que não participam
    da resolução de campos.
    """

    key: str
    type: Optional[str] = None
    required: bool = False
    collection: Optional[str] = None
    model: Optional[str] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_declaration(cls, key: str, declaration: Any) -> "ModelAttribute":
        if isinstance(declaration, ModelAttribute):
            return declaration
        if isinstance(declaration, str):
            return cls(key=key, type=declaration)
        if isinstance(declaration, Mapping):
            return cls(
                key=key,
                type=declaration.get("type"),
                required=bool(declaration.get("required", False)),
                collection=declaration.get("collection"),
                model=declaration.get("model"),
                extras={k: v for k, v in declaration.items() if k not in _MODEL_KNOWN_KEYS},
            )
        raise TypeError(
            f"Declaração de atributo '{key}' deve ser str ou mapping, recebido: "
            f"{type(declaration).__name__}"
        )

    @property
    def is_relational(self) -> bool:
        return bool(self.collection or self.model)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "required": self.required}
        if self.collection is not None:
            out["collection"] = self.collection
        if self.model is not None:
            out["model"] = self.model
        out.update(self.extras)
        return out


# ---------------------------------------------------------------------------
# Field config
# ---------------------------------------------------------------------------

FIELD_KNOWN_KEYS = ("key", "title", "type", "required")


@dataclass(frozen=True)
class FieldConfig:
    """
    Configuração canônica de um campo.

    Campos canônicos:
    - key: nome do atributo
    - title: título exibido (default: key)
    - type: tipo semântico; None até o passo final do resolver
    - required: None em registros de camada; sempre bool em entradas resolvidas
    - extras: propriedades livres (ex.: `editor`) repassadas sem alteração
    """

    key: str
    title: str
    type: Optional[str] = None
    required: Optional[bool] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FieldConfig":
        return cls(
            key=data.get("key"),
            title=data.get("title"),
            type=data.get("type"),
            required=data.get("required"),
            extras={k: v for k, v in data.items() if k not in FIELD_KNOWN_KEYS},
        )

    def get(self, name: str, default: Any = None) -> Any:
        """Lê uma propriedade canônica ou extra pelo nome."""
        if name in FIELD_KNOWN_KEYS:
            value = getattr(self, name)
            return default if value is None else value
        return self.extras.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"key": self.key, "title": self.title}
        if self.type is not None:
            out["type"] = self.type
        if self.required is not None:
            out["required"] = self.required
        out.update(self.extras)
        return out


@dataclass(frozen=True)
class ResolvedFieldEntry:
    """Unidade de saída do resolver: configuração final + atributo de origem."""

    config: FieldConfig
    model: ModelAttribute

    def to_dict(self) -> Dict[str, Any]:
        return {"config": self.config.to_dict(), "model": self.model.to_dict()}


# ---------------------------------------------------------------------------
# Raw override (união etiquetada)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HiddenOverride:
    """Notação booleana `false`: oculta o campo."""


@dataclass(frozen=True)
class EnabledOverride:
    """Notação booleana `true`: exibe o campo com título default."""


@dataclass(frozen=True)
class TitleOverride:
    """Notação string: o valor é o título do campo."""

    title: str


@dataclass(frozen=True)
class RecordOverride:
    """Notação objeto: propriedades livres do campo."""

    properties: Mapping[str, Any]


@dataclass(frozen=True)
class InvalidOverride:
    """Qualquer outro shape; tratado como ausência de configuração."""

    value: Any


RawOverride = Union[HiddenOverride, EnabledOverride, TitleOverride, RecordOverride, InvalidOverride]
