"""Resolução de variante por nome.

Seleciona, dentre um catálogo explícito, a VariantSpec solicitada.
A busca é exata (sensível a maiúsculas) e não tem efeitos colaterais.
"""

from __future__ import annotations

from typing import Mapping

from .errors import UnknownVariantError
from .schema import VariantSpec


def resolve(name: str, specs: Mapping[str, VariantSpec]) -> VariantSpec:
    """Retorna a VariantSpec de `name`.

    Raises:
        UnknownVariantError: se `name` não existir em `specs`.
    """
    spec = specs.get(name)
    if spec is None:
        raise UnknownVariantError(name, specs.keys())
    return spec
