"""Variant Forge — Variants (core).

Componentes canônicos de variantes de build:
 - schema (VariantSpec + catálogo YAML/JSON)
 - catálogo Android padrão (debug/release)
 - resolução por nome
 - validação em lote
 - extração de assinatura
"""

from .catalog import SIGNING_KEYS, android_variants  # noqa: F401
from .errors import UnknownVariantError, VariantError, VariantSpecError  # noqa: F401
from .resolver import resolve  # noqa: F401
from .schema import (  # noqa: F401
    VALUE_KINDS,
    VariantSpec,
    load_variant_specs,
    parse_variant_specs,
    specs_by_name,
)
from .signing import SigningConfig, signing_config  # noqa: F401
from .types import ResolvedConfig, ValidationResult  # noqa: F401
from .validator import validate  # noqa: F401
