# src/variant_forge/core/resolution_context.py
"""
ResolutionContext — contexto canônico de uma resolução de configuração.

Este módulo define o **ResolutionContext**, a estrutura passada pelas
etapas do pipeline de resolução (load → resolve → validate → emit).

O ResolutionContext é o **único meio permitido** de:
- registro de logs estruturados da resolução
- coleta de warnings não fatais por etapa

Princípios fundamentais:
- Isolamento por invocação (cada resolução possui seu próprio contexto)
- Nenhuma etapa acessa estado global
- Eventos registram chaves e origens, **nunca valores** (podem ser segredos)
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


# Etapas canônicas do pipeline de resolução.
STAGE_LOAD = "config.load"
STAGE_RESOLVE = "variant.resolve"
STAGE_VALIDATE = "config.validate"
STAGE_EMIT = "emit"


@dataclass
class ResolutionContext:
    """
    Contexto de uma resolução de configuração de build.

    Campos canônicos:
    - run_id: identificador único da resolução
    - created_at: timestamp UTC de criação do contexto
    - variant: variante solicitada (pode ser None antes da resolução)
    - events: log estruturado de eventos
    - warnings: warnings por etapa
    """

    run_id: str
    created_at: datetime
    variant: Optional[str] = None

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def new(cls, *, variant: Optional[str] = None) -> "ResolutionContext":
        return cls(run_id=uuid.uuid4().hex, created_at=datetime.now(timezone.utc), variant=variant)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)

    def events_for(self, stage: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["stage"] == stage]
