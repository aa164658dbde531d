"""
Variant Forge — Canonical Validation Exceptions (v1)

Este módulo define os erros tipados produzidos pela validação de uma
variante de build.

Objetivo:
- Permitir que o validador devolva erros semânticos tipados em lote
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/KeyError genéricos na validação

Regras:
- Erros de validação são *coletados*, não levantados um a um.
  O lote completo é levantado via `ConfigValidationError`.
- Exceções carregam apenas dados estruturados (chave, variante, origem),
  nunca valores de propriedades.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import errors as payloads


@dataclass(frozen=True)
class ValidationError(Exception):
    """Base class para erros de validação de configuração.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message

    @property
    def key(self) -> Optional[str]:
        return self.details.get("key")

    def to_payload(self) -> payloads.ErrorPayload:
        """Payload genérico; subclasses com código próprio sobrescrevem."""
        return payloads.config_invalid(message=self.message, details=dict(self.details), hint=self.hint)


@dataclass(frozen=True)
class MissingKeyError(ValidationError):
    """Chave obrigatória da variante não existe em nenhuma fonte."""

    def to_payload(self) -> payloads.ErrorPayload:
        return payloads.config_missing_key(key=self.details["key"], variant=self.details.get("variant"))


@dataclass(frozen=True)
class InvalidValueError(ValidationError):
    """Valor presente não corresponde ao tipo declarado na variante."""

    def to_payload(self) -> payloads.ErrorPayload:
        return payloads.config_invalid_value(
            key=self.details["key"],
            expected=self.details["expected"],
            variant=self.details.get("variant"),
            origin=self.details.get("origin"),
        )


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def missing_key(*, key: str, variant: Optional[str] = None) -> MissingKeyError:
    return MissingKeyError(
        message=f"chave obrigatória ausente: {key}",
        details={"key": key, "variant": variant},
        hint="Declare a chave em uma das fontes de propriedades.",
    )


def invalid_value(
    *,
    key: str,
    expected: str,
    variant: Optional[str] = None,
    origin: Optional[str] = None,
) -> InvalidValueError:
    return InvalidValueError(
        message=f"valor inválido para '{key}': esperado {expected}",
        details={"key": key, "expected": expected, "variant": variant, "origin": origin},
        hint="Ajuste o valor na fonte indicada.",
    )
