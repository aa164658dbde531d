# src/variant_forge/core/config/merge.py
"""
Merge canônico de fontes de propriedades em camadas.

Este módulo implementa a política oficial de merge utilizada pelo
Variant Forge para combinar fontes de propriedades (defaults, overrides
locais, segredos, ambiente) em uma única configuração.

Política de merge (v1):
    - chaves são planas (sem merge recursivo)
    - a fonte de maior prioridade substitui o valor inteiro da chave
    - a prioridade cresce da esquerda para a direita
    - dentro de uma mesma fonte, a última ocorrência vence

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - Não existe concatenação ou merge parcial de valores

Invariantes:
    - O valor final de cada chave pertence integralmente a uma única fonte
    - A origem vencedora de cada chave é registrada
    - Chaves não sobrescritas são preservadas

Limites explícitos:
    - Não lê arquivos
    - Não valida requisitos de variante
    - Não realiza coerção de tipos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .sources import PropertySource


MERGED_ORIGIN = "merged"


@dataclass(frozen=True)
class MergedConfig:
    """
    Configuração plana resultante do merge de fontes em camadas.

    Campos:
        - values: mapa chave -> valor (somente leitura)
        - origins: mapa chave -> origem da fonte vencedora (somente leitura)

    Acesso a chaves é sempre explícito via `get`, que retorna `None`
    para chaves ausentes.
    """

    values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    origins: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dicts(cls, values: Dict[str, str], origins: Dict[str, str]) -> "MergedConfig":
        return cls(values=MappingProxyType(dict(values)), origins=MappingProxyType(dict(origins)))

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def origin_of(self, key: str) -> Optional[str]:
        return self.origins.get(key)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self.values.keys())

    def to_dict(self) -> Dict[str, str]:
        return dict(self.values)

    def as_source(self) -> PropertySource:
        """Reempacota a configuração como uma PropertySource (origem "merged")."""
        return PropertySource(origin=MERGED_ORIGIN, entries=tuple(self.values.items()))

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MergedConfig):
            return NotImplemented
        return dict(self.values) == dict(other.values)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.values.items())))


def merge_sources(base: MergedConfig, override: PropertySource) -> MergedConfig:
    """
    Aplica uma fonte de propriedades sobre uma configuração já mesclada.

    Args:
        base: configuração acumulada até aqui.
        override: fonte de maior prioridade.

    Returns:
        Nova MergedConfig; `base` e `override` não são alterados.
    """
    values = dict(base.values)
    origins = dict(base.origins)

    for key, value in override.entries:
        values[key] = value
        origins[key] = override.origin

    return MergedConfig.from_dicts(values, origins)


def merge_configs(base: MergedConfig, override: MergedConfig) -> MergedConfig:
    """Aplica uma configuração já mesclada sobre outra, preservando as origens vencedoras."""
    values = dict(base.values)
    origins = dict(base.origins)

    for key, value in override.values.items():
        values[key] = value
        origins[key] = override.origins.get(key, MERGED_ORIGIN)

    return MergedConfig.from_dicts(values, origins)
