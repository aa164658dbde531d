# src/variant_forge/core/emit/emitter.py
"""
Serialização da configuração resolvida para o toolchain externo.

Formatos suportados (v1):
    - json       → objeto JSON com chaves ordenadas (indent 2)
    - env        → linhas `PREFIX_UPPER_SNAKE=<valor com quoting de shell>`
    - properties → linhas `chave=valor` escapadas

Princípios fundamentais:
    - Formatação pura: nenhuma validação (feita a montante)
    - Determinismo: mesma entrada → saída byte a byte idêntica
    - Saída sempre terminada em newline

Limites explícitos:
    - Não escreve arquivos
    - Não invoca o toolchain de empacotamento
"""

from __future__ import annotations

import json
import re
import shlex
from enum import Enum
from typing import Dict, List, Union

from ..config.properties import escape_properties
from .errors import EnvNameCollisionError
from ..variants.types import ResolvedConfig


REDACTED = "********"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_IDENT = re.compile(r"[^A-Za-z0-9]+")


class EmitFormat(str, Enum):
    """Formatos de saída do Emitter."""

    JSON = "json"
    ENV = "env"
    PROPERTIES = "properties"


def _is_secret(key: str) -> bool:
    return "password" in key.lower()


def to_env_name(key: str, prefix: str = "") -> str:
    """Converte `packaging.pickFirst` em `PACKAGING_PICK_FIRST` (com prefixo opcional)."""
    snake = _CAMEL_BOUNDARY.sub("_", key)
    snake = _NON_IDENT.sub("_", snake).strip("_").upper()
    return f"{prefix.upper()}_{snake}" if prefix else snake


def _values(config: ResolvedConfig, redact: bool) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for key in sorted(config.keys()):
        value = config.get(key) or ""
        out[key] = REDACTED if redact and _is_secret(key) else value
    return out


def _emit_json(values: Dict[str, str]) -> str:
    return json.dumps(values, sort_keys=True, indent=2, ensure_ascii=False) + "\n"


def _emit_env(values: Dict[str, str], prefix: str) -> str:
    names: Dict[str, List[str]] = {}
    for key in values:
        names.setdefault(to_env_name(key, prefix), []).append(key)

    # o shell manteria só a última atribuição de um nome repetido
    for name, keys in sorted(names.items()):
        if len(keys) > 1:
            raise EnvNameCollisionError(name, keys)

    lines = sorted(f"{to_env_name(k, prefix)}={shlex.quote(v)}" for k, v in values.items())
    return "".join(line + "\n" for line in lines)


def _emit_properties(values: Dict[str, str]) -> str:
    return "".join(
        f"{escape_properties(k, is_key=True)}={escape_properties(v)}\n" for k, v in values.items()
    )


def emit(
    config: ResolvedConfig,
    fmt: Union[EmitFormat, str] = EmitFormat.JSON,
    *,
    prefix: str = "",
    redact: bool = False,
) -> str:
    """
    Serializa uma configuração resolvida.

    Args:
        config: configuração final da variante.
        fmt: formato de saída (`json`, `env` ou `properties`).
        prefix: prefixo de variáveis no formato `env`.
        redact: mascara valores de chaves que contêm "password".

    Returns:
        str: representação textual determinística da configuração.

    Raises:
        ValueError: se o formato não for suportado.
        EnvNameCollisionError: formato `env` e duas chaves geram o mesmo nome.
    """
    fmt = EmitFormat(fmt)
    values = _values(config, redact)

    if fmt is EmitFormat.JSON:
        return _emit_json(values)
    if fmt is EmitFormat.ENV:
        return _emit_env(values, prefix)
    return _emit_properties(values)
