"""
Variant Forge — Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do Variant Forge.
Erros de resolução fazem parte do contrato operacional do sistema e devem ser:

- explícitos
- serializáveis
- acionáveis

Payloads nunca carregam valores de propriedades, apenas chaves,
origens e nomes de variante (valores podem ser segredos de assinatura).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do Variant Forge.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Fontes
SOURCE_MALFORMED = "SOURCE_MALFORMED"
SOURCE_UNSUPPORTED_FORMAT = "SOURCE_UNSUPPORTED_FORMAT"

# Validação
CONFIG_INVALID = "CONFIG_INVALID"
CONFIG_MISSING_KEY = "CONFIG_MISSING_KEY"
CONFIG_INVALID_VALUE = "CONFIG_INVALID_VALUE"

# Variantes
VARIANT_UNKNOWN = "VARIANT_UNKNOWN"

# Emissão
EMIT_ENV_COLLISION = "EMIT_ENV_COLLISION"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def source_malformed(
    *,
    origin: str,
    line: Optional[int] = None,
    reason: str,
    hint: str = "Corrija a linha indicada no arquivo de propriedades; apenas pares chave=valor são aceitos.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SOURCE_MALFORMED,
        message="Fonte de propriedades ilegível",
        details={"origin": origin, "line": line, "reason": reason},
        hint=hint,
    )


def source_unsupported_format(
    *,
    origin: str,
    supported: List[str],
    hint: str = "Renomeie o arquivo para uma extensão suportada ou converta seu conteúdo.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SOURCE_UNSUPPORTED_FORMAT,
        message="Formato de fonte não suportado",
        details={"origin": origin, "supported": supported},
        hint=hint,
    )


def config_invalid(
    *,
    message: str,
    details: Dict[str, Any],
    hint: Optional[str] = None,
) -> ErrorPayload:
    return ErrorPayload(type=CONFIG_INVALID, message=message, details=details, hint=hint)


def config_missing_key(
    *,
    key: str,
    variant: Optional[str] = None,
    hint: str = "Declare a chave em uma das fontes (ex.: key.properties) ou no ambiente.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_MISSING_KEY,
        message="Chave obrigatória ausente",
        details={"key": key, "variant": variant},
        hint=hint,
    )


def config_invalid_value(
    *,
    key: str,
    expected: str,
    variant: Optional[str] = None,
    origin: Optional[str] = None,
    hint: str = "Ajuste o valor na fonte indicada para o tipo esperado.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_INVALID_VALUE,
        message="Valor incompatível com o tipo declarado",
        details={"key": key, "expected": expected, "variant": variant, "origin": origin},
        hint=hint,
    )


def variant_unknown(
    *,
    name: str,
    known: List[str],
    hint: str = "Use uma das variantes declaradas ou declare a variante no catálogo.",
) -> ErrorPayload:
    return ErrorPayload(
        type=VARIANT_UNKNOWN,
        message="Variante de build desconhecida",
        details={"name": name, "known": known},
        hint=hint,
    )


def emit_env_collision(
    *,
    name: str,
    keys: List[str],
    hint: str = "Renomeie uma das chaves ou use o formato json/properties.",
) -> ErrorPayload:
    return ErrorPayload(
        type=EMIT_ENV_COLLISION,
        message="Chaves distintas geram o mesmo nome de variável",
        details={"name": name, "keys": keys},
        hint=hint,
    )
