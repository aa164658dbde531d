# src/variant_forge/core/config/sources.py
"""
Fontes de propriedades (PropertySource) do Variant Forge.

Uma PropertySource é uma sequência ordenada de pares (chave, valor)
originada de um único lugar: um arquivo, um dicionário inline ou um
conjunto de variáveis de ambiente.

Fontes suportadas (v1):
    - `.properties` (ex.: `key.properties`, `local.properties`)
    - YAML (.yaml, .yml) com raiz plana
    - JSON (.json) com raiz plana
    - dicionário inline
    - variáveis de ambiente com prefixo

Decisões arquiteturais:
    - Arquivo inexistente não é erro: a fonte é simplesmente ausente (`None`)
    - Arquivo existente e ilegível é erro fatal (`MalformedSourceError`)
    - Todo valor é materializado como string
    - A ordem de declaração das chaves é preservada

Limites explícitos:
    - Não realiza merge entre fontes
    - Não valida requisitos de variante
"""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml  # PyYAML

from .errors import MalformedSourceError, UnsupportedSourceFormatError
from .properties import parse_properties


INLINE_ORIGIN = "inline"

_PROPERTIES_SUFFIXES = {".properties"}
_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}

_SNAKE_PART = re.compile(r"[A-Z0-9]+")


@dataclass(frozen=True)
class PropertySource:
    """
    Conjunto ordenado de entradas chave-valor vindas de uma única origem.

    Campos:
        - origin: caminho do arquivo, "inline" ou "env:<PREFIX>"
        - entries: pares (chave, valor) na ordem de declaração

    Invariantes:
        - Chaves e valores são sempre strings
        - A instância é imutável após criada
    """

    origin: str
    entries: Tuple[Tuple[str, str], ...] = ()

    def keys(self) -> Tuple[str, ...]:
        return tuple(k for k, _ in self.entries)

    def to_dict(self) -> Dict[str, str]:
        """Retorna o mapa efetivo da fonte (última ocorrência de cada chave vence)."""
        out: Dict[str, str] = {}
        for key, value in self.entries:
            out[key] = value
        return out

    def __len__(self) -> int:
        return len(self.entries)


def _scalar_to_str(key: Any, value: Any, *, origin: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    kind = "null" if value is None else type(value).__name__
    raise MalformedSourceError(
        f"valor da chave '{key}' deve ser escalar, recebido: {kind}", origin=origin
    )


def _entries_from_mapping(data: Mapping[Any, Any], *, origin: str) -> Tuple[Tuple[str, str], ...]:
    entries = []
    for key, value in data.items():
        if not isinstance(key, str) or not key.strip():
            raise MalformedSourceError(f"chave inválida: {key!r}", origin=origin)
        entries.append((key, _scalar_to_str(key, value, origin=origin)))
    return tuple(entries)


def inline_source(mapping: Mapping[str, Any], *, origin: str = INLINE_ORIGIN) -> PropertySource:
    """Cria uma PropertySource a partir de um dicionário em memória."""
    return PropertySource(origin=origin, entries=_entries_from_mapping(mapping, origin=origin))


def _read_structured(path: Path, raw: str) -> Dict[str, Any]:
    origin = str(path)
    suffix = path.suffix.lower()
    try:
        if suffix in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise MalformedSourceError(str(e) or "falha ao interpretar arquivo", origin=origin) from e

    if data is None:
        # YAML vazio -> fonte vazia
        return {}

    if not isinstance(data, dict):
        raise MalformedSourceError(
            f"raiz deve ser um mapa chave-valor, recebido: {type(data).__name__}",
            origin=origin,
        )
    return data


def read_source(path: Union[str, Path]) -> Optional[PropertySource]:
    """
    Lê uma fonte de propriedades a partir do disco.

    O formato é determinado pela extensão do arquivo.

    Args:
        path: caminho para o arquivo.

    Returns:
        PropertySource com as entradas do arquivo, ou `None` se o arquivo
        não existir.

    Raises:
        UnsupportedSourceFormatError: extensão não suportada.
        MalformedSourceError: conteúdo ilegível, estrutura inválida ou caminho
            que não é um arquivo regular.
    """
    p = Path(path)
    if not p.exists():
        return None

    origin = str(p)
    suffix = p.suffix.lower()
    if suffix not in _PROPERTIES_SUFFIXES | _YAML_SUFFIXES | _JSON_SUFFIXES:
        raise UnsupportedSourceFormatError(f"formato de fonte não suportado: {p.name}")

    if not p.is_file():
        raise MalformedSourceError("caminho existe, mas não é um arquivo regular", origin=origin)

    try:
        raw = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedSourceError("arquivo não está em UTF-8", origin=origin) from e
    except OSError as e:
        raise MalformedSourceError(f"arquivo ilegível: {e.strerror or e}", origin=origin) from e

    if suffix in _PROPERTIES_SUFFIXES:
        return PropertySource(origin=origin, entries=tuple(parse_properties(raw, origin=origin)))

    data = _read_structured(p, raw)
    return PropertySource(origin=origin, entries=_entries_from_mapping(data, origin=origin))


def env_key_to_property(name: str) -> str:
    """
    Converte um nome em UPPER_SNAKE para lowerCamel.

    Exemplos:
        - KEY_ALIAS              -> keyAlias
        - STORE_FILE             -> storeFile
        - PACKAGING__PICK_FIRST  -> packaging.pickFirst
    """
    segments = []
    for segment in name.split("__"):
        parts = [p.lower() for p in _SNAKE_PART.findall(segment.upper())]
        if not parts:
            continue
        segments.append(parts[0] + "".join(p.capitalize() for p in parts[1:]))
    return ".".join(segments)


def environment_source(prefix: str, environ: Optional[Mapping[str, str]] = None) -> PropertySource:
    """
    Cria uma PropertySource a partir de variáveis de ambiente com prefixo.

    Apenas variáveis iniciadas por `<PREFIX>_` participam. As chaves são
    ordenadas para garantir determinismo independentemente da ordem do
    ambiente.

    Args:
        prefix: prefixo das variáveis (ex.: "ANDROID").
        environ: mapa de ambiente explícito; `None` usa um snapshot de `os.environ`.
    """
    env = dict(os.environ if environ is None else environ)
    marker = f"{prefix.upper()}_"

    entries = []
    for name in sorted(env):
        if not name.startswith(marker) or name == marker:
            continue
        key = env_key_to_property(name[len(marker):])
        if key:
            entries.append((key, env[name]))

    return PropertySource(origin=f"env:{prefix.upper()}", entries=tuple(entries))
