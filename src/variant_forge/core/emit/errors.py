"""Erros do Emitter.

A serialização é pura formatação; o único modo de falha é uma saída que
não representaria fielmente a configuração resolvida.
"""

from typing import Iterable, Tuple


class EmitError(Exception):
    """Erro base do Emitter."""


class EnvNameCollisionError(EmitError):
    """Duas ou mais chaves distintas geram o mesmo nome de variável `env`.

    Attributes:
        name: nome de variável em conflito.
        keys: chaves de origem, ordenadas.
    """

    def __init__(self, name: str, keys: Iterable[str]):
        self.name = name
        self.keys: Tuple[str, ...] = tuple(sorted(keys))
        super().__init__(f"env name collision: {name} <- {', '.join(self.keys)}")
