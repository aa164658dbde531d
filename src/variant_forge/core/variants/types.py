# src/variant_forge/core/variants/types.py
"""
Tipos canônicos de resultado da validação de variantes.

Componentes principais:
    - ResolvedConfig   → configuração final, imutável, de uma variante
    - ValidationResult → resultado da validação (config OU lote de erros)

Princípios fundamentais:
    - Tipos são imutáveis e serializáveis
    - Acesso a chaves é explícito: leituras retornam `Optional`
    - Nenhuma lógica de validação vive neste módulo

Invariantes:
    - ResolvedConfig contém todas as chaves obrigatórias de sua variante
    - ValidationResult tem `config` XOR `errors`

Limites explícitos:
    - Não lê fontes
    - Não serializa para formatos externos (ver `core.emit`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..config.errors import ConfigValidationError
from ..exceptions import ValidationError


@dataclass(frozen=True)
class ResolvedConfig:
    """
    Configuração final e validada de uma variante de build.

    Campos:
        - variant: nome da variante
        - values: mapa chave -> valor, ordenado por chave e somente leitura

    Decisões arquiteturais:
        - Não existe `__getitem__`: use `get` (Optional) ou `require` (explícito)
        - Conversões tipadas (`get_int`, `get_bool`, `get_list`) retornam
          `None` quando a chave está ausente
    """

    variant: str
    values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        ordered = dict(sorted(dict(self.values).items()))
        object.__setattr__(self, "values", MappingProxyType(ordered))

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def require(self, key: str) -> str:
        if key not in self.values:
            raise KeyError(key)
        return self.values[key]

    def get_int(self, key: str) -> Optional[int]:
        value = self.get(key)
        return None if value is None else int(value.strip())

    def get_bool(self, key: str) -> Optional[bool]:
        value = self.get(key)
        if value is None:
            return None
        normalized = value.strip().lower()
        if normalized not in ("true", "false"):
            raise ValueError(f"'{key}' não é booleano")
        return normalized == "true"

    def get_list(self, key: str) -> Optional[List[str]]:
        value = self.get(key)
        if value is None:
            return None
        return [item.strip() for item in value.split(",") if item.strip()]

    def keys(self) -> Tuple[str, ...]:
        return tuple(self.values.keys())

    def to_dict(self) -> Dict[str, str]:
        return dict(self.values)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedConfig):
            return NotImplemented
        return self.variant == other.variant and dict(self.values) == dict(other.values)

    def __hash__(self) -> int:
        return hash((self.variant, tuple(self.values.items())))


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado da validação de uma configuração contra uma VariantSpec.

    Campos:
        - variant: nome da variante validada
        - config: configuração resolvida (presente apenas quando `ok`)
        - errors: lote completo de erros (vazio quando `ok`)
    """

    variant: str
    config: Optional[ResolvedConfig] = None
    errors: Tuple[ValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> ResolvedConfig:
        """Retorna a configuração resolvida ou levanta o lote de erros."""
        if self.errors or self.config is None:
            raise ConfigValidationError(self.errors, variant=self.variant)
        return self.config
