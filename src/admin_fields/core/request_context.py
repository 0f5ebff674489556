# src/admin_fields/core/request_context.py
"""
RequestContext — Contexto canônico de uma requisição ao painel administrativo.

Este módulo define o **RequestContext**, a estrutura explícita que substitui o
objeto de requisição do framework web como fonte de dados para a resolução de
campos.

O RequestContext carrega:
- a configuração efetiva do painel (ver `core.config.load_config`)
- o nome da instância requisitada e a action (list/add/edit/view/remove)
- o registro de models disponíveis (nome → model com `attributes`)
- o log estruturado de eventos e os warnings não fatais da requisição

Princípios fundamentais:
- Isolamento por requisição (cada requisição possui seu próprio contexto)
- O resolver nunca lê estado global: tudo chega via contexto ou argumentos
- Eventos e warnings são os únicos dados escritos durante a resolução
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class RequestContext:
    """
    Contexto de uma requisição ao painel.

    Campos canônicos:
    - request_id: identificador da requisição (usado nos eventos)
    - config: configuração efetiva do painel
    - instance_name: chave da instância em `config["instances"]`
    - action: action requisitada; None significa "list"
    - models: registro de models (nome → mapping ou objeto com `attributes`)
    - meta: metadados livres (ex.: rota, usuário)
    - events: log estruturado de eventos
    - warnings: warnings agrupados por escopo (ex.: "fields.bio")
    """

    request_id: str
    config: Dict[str, Any]
    instance_name: str
    action: Optional[str] = None
    models: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, scope: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "request_id": self.request_id,
            "instance": self.instance_name,
            "scope": scope,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, scope: str, message: str) -> None:
        if scope not in self.warnings:
            self.warnings[scope] = []
        self.warnings[scope].append(message)
