"""
Variant Forge — resolução de configuração de variantes de build.

API pública:
    - resolve_build_config → pipeline completo (load → resolve → validate → emit)
    - load / load_files    → merge de fontes de propriedades em camadas
    - resolve / validate   → seleção e validação de variante
    - emit                 → serialização determinística
"""

from .core.config import (  # noqa: F401
    ConfigError,
    ConfigValidationError,
    MalformedSourceError,
    MergedConfig,
    PropertySource,
    UnsupportedSourceFormatError,
    environment_source,
    inline_source,
    load,
    load_files,
    read_source,
)
from .core.emit import EmitFormat, EnvNameCollisionError, emit  # noqa: F401
from .core.exceptions import InvalidValueError, MissingKeyError, ValidationError  # noqa: F401
from .core.pipeline import Resolution, resolve_build_config  # noqa: F401
from .core.resolution_context import ResolutionContext  # noqa: F401
from .core.variants import (  # noqa: F401
    ResolvedConfig,
    UnknownVariantError,
    ValidationResult,
    VariantSpec,
    android_variants,
    resolve,
    signing_config,
    validate,
)

__version__ = "0.1.0"
