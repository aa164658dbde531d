# src/variant_forge/core/config/__init__.py
"""
Camada de configuração do Variant Forge.

Este pacote contém as estruturas e utilitários responsáveis por ler,
mesclar e identificar as fontes de propriedades de um build.

A configuração no Variant Forge é:
    - plana (chave -> string)
    - em camadas (a fonte da direita vence)
    - determinística
    - livre de estado global

Responsabilidades do pacote:
    - Parsing de `.properties`, YAML e JSON planos
    - Fontes inline e de variáveis de ambiente
    - Merge determinístico com registro de origem
    - Hash canônico para rastreabilidade

Limites explícitos:
    - Não valida requisitos de variante (ver `core.variants`)
    - Não serializa a configuração final (ver `core.emit`)
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigValidationError,
    MalformedSourceError,
    UnsupportedSourceFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .loader import load, load_files  # noqa: F401
from .merge import MergedConfig, merge_configs, merge_sources  # noqa: F401
from .properties import parse_properties  # noqa: F401
from .sources import (  # noqa: F401
    PropertySource,
    environment_source,
    inline_source,
    read_source,
)
