"""Erros canônicos do domínio de variantes de build.

Uma variante desconhecida ou um catálogo de variantes malformado são
falhas fatais: a resolução é interrompida antes da validação.
"""

from typing import Iterable, Tuple


class VariantError(Exception):
    """Erro base do domínio de variantes."""


class UnknownVariantError(VariantError):
    """Variante solicitada não existe no catálogo informado."""

    def __init__(self, name: str, known: Iterable[str] = ()):
        self.name = name
        self.known: Tuple[str, ...] = tuple(sorted(known))
        listed = ", ".join(self.known) or "<nenhuma>"
        super().__init__(f"unknown variant: {name!r} (known: {listed})")


class VariantSpecError(VariantError):
    """Catálogo de variantes não é estruturalmente válido."""
