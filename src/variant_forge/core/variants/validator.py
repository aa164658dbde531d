# src/variant_forge/core/variants/validator.py
"""
Validador de configuração por variante.

Este módulo confronta uma configuração mesclada (`MergedConfig`) com os
requisitos de uma `VariantSpec` e produz um `ValidationResult`.

Política de validação (v1):
    - chave obrigatória ausente       → `MissingKeyError`
    - chave opcional ausente          → recebe o default da spec
    - valor com tipo declarado errado → `InvalidValueError`
    - chaves não declaradas           → preservadas sem alteração

Princípios fundamentais:
    - Função pura: nenhum input é mutado, nenhum evento é registrado
    - Todos os erros são coletados (nunca apenas o primeiro)
    - A ordem dos erros é determinística

Invariantes:
    - Um resultado `ok` sempre contém todas as chaves obrigatórias
    - Um resultado com erros nunca contém configuração parcial
    - Uma string vazia conta como chave presente

Limites explícitos:
    - Não lê fontes
    - Não escolhe a variante (ver `resolver`)
"""

from __future__ import annotations

from typing import Dict, List

from ..config.merge import MergedConfig
from ..exceptions import ValidationError, invalid_value, missing_key
from .schema import VariantSpec, value_matches_kind
from .types import ResolvedConfig, ValidationResult


def validate(config: MergedConfig, spec: VariantSpec) -> ValidationResult:
    """
    Valida uma configuração mesclada contra a spec de uma variante.

    Args:
        config: configuração plana resultante do loader.
        spec: requisitos da variante.

    Returns:
        ValidationResult: configuração resolvida, ou o lote completo de erros.
    """
    errors: List[ValidationError] = []

    for key in sorted(spec.required):
        if config.get(key) is None:
            errors.append(missing_key(key=key, variant=spec.name))

    values: Dict[str, str] = config.to_dict()
    for key, default in spec.defaults.items():
        if key not in values:
            values[key] = default

    for key in sorted(spec.types):
        value = values.get(key)
        if value is None:
            continue
        kind = spec.types[key]
        if not value_matches_kind(value, kind):
            errors.append(
                invalid_value(key=key, expected=kind, variant=spec.name, origin=config.origin_of(key))
            )

    if errors:
        return ValidationResult(variant=spec.name, errors=tuple(errors))

    return ValidationResult(variant=spec.name, config=ResolvedConfig(variant=spec.name, values=values))
