"""
Schema canônico — VariantSpec v1.

Uma VariantSpec descreve os requisitos de configuração de uma variante
de build (ex.: `debug`, `release`):
    - chaves obrigatórias
    - chaves opcionais com valor padrão
    - tipos declarados de valores (opcional)

Formato de catálogo (YAML/JSON):

    variants:
      release:
        required: [applicationId, keyAlias]
        defaults:
          minifyEnabled: "true"
        types:
          versionCode: int

Esta implementação evita dependências externas (ex.: Pydantic) para manter
o core leve; a validação estrutural segue o padrão `_expect`.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

import yaml

from .errors import VariantSpecError


VALUE_KINDS = ("str", "int", "bool", "path", "list")

_INT_RE = re.compile(r"^[+-]?\d+$")
_BOOL_VALUES = {"true", "false"}


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise VariantSpecError(msg)


def value_matches_kind(value: str, kind: str) -> bool:
    """Retorna True se `value` é uma representação textual válida de `kind`."""
    if kind == "int":
        return bool(_INT_RE.match(value.strip()))
    if kind == "bool":
        return value.strip().lower() in _BOOL_VALUES
    if kind == "path":
        return bool(value.strip())
    if kind == "list":
        items = [item.strip() for item in value.split(",")]
        return value.strip() == "" or all(items)
    return True


@dataclass(frozen=True)
class VariantSpec:
    """Requisitos de configuração de uma variante de build."""

    name: str
    required: FrozenSet[str] = frozenset()
    defaults: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    types: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        _expect(_is_non_empty_str(self.name), "variant name is required")

        object.__setattr__(self, "required", frozenset(self.required))
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))
        object.__setattr__(self, "types", MappingProxyType(dict(self.types)))

        overlap = sorted(self.required & set(self.defaults))
        _expect(not overlap, f"{self.name}: keys cannot be both required and defaulted: {overlap}")

        for key, kind in self.types.items():
            _expect(kind in VALUE_KINDS, f"{self.name}.types.{key} must be one of {VALUE_KINDS}")

        for key, value in self.defaults.items():
            _expect(isinstance(value, str), f"{self.name}.defaults.{key} must be a string")
            kind = self.types.get(key)
            if kind is not None:
                _expect(
                    value_matches_kind(value, kind),
                    f"{self.name}.defaults.{key} does not match declared type {kind}",
                )

    @property
    def declared_keys(self) -> FrozenSet[str]:
        return self.required | frozenset(self.defaults) | frozenset(self.types)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "required": sorted(self.required),
            "defaults": dict(sorted(self.defaults.items())),
            "types": dict(sorted(self.types.items())),
        }

    def __hash__(self) -> int:
        return hash((self.name, self.required, tuple(sorted(self.defaults.items()))))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariantSpec):
            return NotImplemented
        return self.name == other.name and self.to_dict() == other.to_dict()


def _render_default(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, list) and all(isinstance(v, (str, int, float)) for v in value):
        return ",".join(str(v) for v in value)
    return None


def parse_variant_spec(name: str, data: Any) -> VariantSpec:
    """Valida e materializa a declaração de uma única variante."""
    _expect(isinstance(data, dict), f"variants.{name} must be a mapping")

    required = data.get("required") or []
    _expect(isinstance(required, list), f"variants.{name}.required must be a list")
    for i, key in enumerate(required):
        _expect(_is_non_empty_str(key), f"variants.{name}.required[{i}] must be a non-empty string")

    raw_defaults = data.get("defaults") or {}
    _expect(isinstance(raw_defaults, dict), f"variants.{name}.defaults must be a mapping")
    defaults: Dict[str, str] = {}
    for key, value in raw_defaults.items():
        rendered = _render_default(value)
        _expect(rendered is not None, f"variants.{name}.defaults.{key} must be a scalar or list of scalars")
        defaults[str(key)] = rendered

    types = data.get("types") or {}
    _expect(isinstance(types, dict), f"variants.{name}.types must be a mapping")

    unknown = sorted(set(data) - {"required", "defaults", "types"})
    _expect(not unknown, f"variants.{name} has unknown sections: {unknown}")

    return VariantSpec(name=name, required=frozenset(required), defaults=defaults, types=dict(types))


def parse_variant_specs(data: Any) -> Dict[str, VariantSpec]:
    """Valida e materializa um catálogo de variantes."""
    _expect(isinstance(data, dict), "variant catalog must be a mapping/dict")
    variants = data.get("variants")
    _expect(isinstance(variants, dict) and variants, "variants must be a non-empty mapping")

    specs: Dict[str, VariantSpec] = {}
    for name, body in variants.items():
        _expect(_is_non_empty_str(name), "variant names must be non-empty strings")
        specs[name] = parse_variant_spec(name, body)
    return specs


def load_variant_specs(path: Union[str, Path]) -> Dict[str, VariantSpec]:
    """Carrega um catálogo de variantes a partir de YAML/JSON.

    Raises:
        VariantSpecError: arquivo ausente, formato não suportado, parse ou
            estrutura inválidos.
    """
    p = Path(path)
    if not p.is_file():
        raise VariantSpecError(f"variant catalog not found: {p}")

    suffix = p.suffix.lower()

    try:
        raw = p.read_text(encoding="utf-8")
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise VariantSpecError(f"unsupported variant catalog format: {suffix}")
    except VariantSpecError:
        raise
    except Exception as e:
        raise VariantSpecError(str(e) or "failed to parse variant catalog") from e

    return parse_variant_specs(data)


def specs_by_name(specs: Iterable[VariantSpec]) -> Dict[str, VariantSpec]:
    """Indexa specs por nome, rejeitando nomes duplicados."""
    out: Dict[str, VariantSpec] = {}
    for spec in specs:
        _expect(spec.name not in out, f"duplicate variant name: {spec.name}")
        out[spec.name] = spec
    return out
