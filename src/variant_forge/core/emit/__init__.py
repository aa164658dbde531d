"""Variant Forge — Emitter (core).

Serialização determinística da configuração resolvida (json/env/properties).
"""

from .errors import EmitError, EnvNameCollisionError  # noqa: F401
from .emitter import REDACTED, EmitFormat, emit, to_env_name  # noqa: F401
