# src/variant_forge/core/config/hashing.py
"""
Hashing canônico de configuração do Variant Forge.

O hash gerado representa a **identidade estrutural** de uma configuração
resolvida e é utilizado para:
    - rastreabilidade de resoluções (eventos do ResolutionContext)
    - detecção de divergência entre builds

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Configurações equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Mapping


def compute_config_hash(config: Mapping[str, Any]) -> str:
    """
    Gera um hash determinístico de uma configuração.

    Args:
        config: configuração resolvida (qualquer mapa serializável em JSON).

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um mapa.
    """
    if not isinstance(config, Mapping):
        raise TypeError(
            f"Config para hashing deve ser um mapa, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        dict(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
