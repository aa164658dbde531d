# src/variant_forge/core/pipeline.py
"""
Orquestração ponta a ponta da resolução de configuração de build.

Fluxo canônico:
    1. config.load       → lê e mescla as fontes (da esquerda para a direita)
    2. variant.resolve   → seleciona a VariantSpec solicitada
    3. config.validate   → aplica defaults e coleta todos os erros
    4. emit              → serializa a configuração resolvida

Política de falhas:
    - fonte ilegível         → `MalformedSourceError`, antes da validação
    - variante desconhecida  → `UnknownVariantError`, na resolução
    - erros de validação     → `ConfigValidationError` com o lote completo
    - nomes `env` em conflito → `EnvNameCollisionError`, na serialização

Toda falha é registrada no ResolutionContext e então propagada ao
chamador; nenhuma falha é silenciada e não há retries.

Invariantes:
    - Cada chamada é independente (sem cache e sem estado global)
    - Mesmas entradas → mesma saída (`output` e `config_hash`)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from . import errors as payloads
from .config.errors import ConfigValidationError, MalformedSourceError, UnsupportedSourceFormatError
from .config.hashing import compute_config_hash
from .config.loader import load
from .config.merge import MergedConfig
from .config.sources import PropertySource, read_source
from .emit.emitter import EmitFormat, emit
from .emit.errors import EnvNameCollisionError
from .resolution_context import (
    STAGE_EMIT,
    STAGE_LOAD,
    STAGE_RESOLVE,
    STAGE_VALIDATE,
    ResolutionContext,
)
from .variants.catalog import android_variants
from .variants.errors import UnknownVariantError
from .variants.resolver import resolve
from .variants.schema import VariantSpec
from .variants.types import ResolvedConfig
from .variants.validator import validate


SourceInput = Union[str, Path, PropertySource, MergedConfig, None]

_SUPPORTED_SUFFIXES = [".properties", ".yaml", ".yml", ".json"]


@dataclass(frozen=True)
class Resolution:
    """Resultado de uma resolução bem-sucedida."""

    variant: str
    config: ResolvedConfig
    output: str
    format: EmitFormat
    config_hash: str


def _read_inputs(sources: Iterable[SourceInput], ctx: ResolutionContext) -> List[Union[PropertySource, MergedConfig, None]]:
    read: List[Union[PropertySource, MergedConfig, None]] = []

    for item in sources:
        if not isinstance(item, (str, Path)):
            if item is not None:
                ctx.log(stage=STAGE_LOAD, level="INFO", message="source loaded",
                        origin=getattr(item, "origin", "merged"), keys=len(item))
            read.append(item)
            continue

        try:
            source = read_source(item)
        except MalformedSourceError as e:
            ctx.log(stage=STAGE_LOAD, level="ERROR", message="malformed source",
                    error=payloads.source_malformed(origin=e.origin, line=e.line, reason=str(e)).to_dict())
            raise
        except UnsupportedSourceFormatError:
            ctx.log(stage=STAGE_LOAD, level="ERROR", message="unsupported source format",
                    error=payloads.source_unsupported_format(origin=str(item), supported=_SUPPORTED_SUFFIXES).to_dict())
            raise

        if source is None:
            ctx.log(stage=STAGE_LOAD, level="INFO", message="source missing", origin=str(item))
        else:
            ctx.log(stage=STAGE_LOAD, level="INFO", message="source loaded", origin=source.origin, keys=len(source))
        read.append(source)

    return read


def resolve_build_config(
    *,
    variant: str,
    sources: Iterable[SourceInput],
    specs: Optional[Mapping[str, VariantSpec]] = None,
    fmt: Union[EmitFormat, str] = EmitFormat.JSON,
    prefix: str = "",
    redact: bool = False,
    ctx: Optional[ResolutionContext] = None,
) -> Resolution:
    """
    Resolve, valida e serializa a configuração de uma variante de build.

    Args:
        variant: nome da variante (ex.: "release").
        sources: fontes em ordem de prioridade crescente; caminhos são lidos
            do disco, arquivos inexistentes são ignorados.
        specs: catálogo de variantes; `None` usa `android_variants()`.
        fmt: formato de saída do Emitter.
        prefix: prefixo de variáveis para o formato `env`.
        redact: mascara senhas na saída.
        ctx: contexto de eventos; `None` cria um contexto novo.

    Returns:
        Resolution: configuração resolvida, saída serializada e hash.

    Raises:
        MalformedSourceError: fonte existente e ilegível.
        UnsupportedSourceFormatError: extensão de fonte não suportada.
        UnknownVariantError: variante ausente do catálogo.
        ConfigValidationError: lote completo de erros de validação.
        EnvNameCollisionError: chaves distintas com o mesmo nome `env`.
    """
    ctx = ctx if ctx is not None else ResolutionContext.new(variant=variant)
    catalog = specs if specs is not None else android_variants()

    merged = load(_read_inputs(sources, ctx))
    ctx.log(stage=STAGE_LOAD, level="INFO", message="sources merged", keys=sorted(merged.keys()))

    try:
        spec = resolve(variant, catalog)
    except UnknownVariantError as e:
        ctx.log(stage=STAGE_RESOLVE, level="ERROR", message="unknown variant",
                error=payloads.variant_unknown(name=e.name, known=list(e.known)).to_dict())
        raise
    ctx.log(stage=STAGE_RESOLVE, level="INFO", message="variant resolved", variant=spec.name)

    for key in sorted(set(merged.keys()) - spec.declared_keys):
        ctx.add_warning(stage=STAGE_VALIDATE, message=f"chave não declarada pela variante '{spec.name}': {key}")

    result = validate(merged, spec)
    if not result.ok:
        for error in result.errors:
            ctx.log(stage=STAGE_VALIDATE, level="ERROR", message=error.message, error=error.to_payload().to_dict())
        raise ConfigValidationError(result.errors, variant=spec.name)

    config = result.unwrap()
    ctx.log(stage=STAGE_VALIDATE, level="INFO", message="config validated", keys=len(config))

    fmt = EmitFormat(fmt)
    try:
        output = emit(config, fmt, prefix=prefix, redact=redact)
    except EnvNameCollisionError as e:
        ctx.log(stage=STAGE_EMIT, level="ERROR", message="env name collision",
                error=payloads.emit_env_collision(name=e.name, keys=list(e.keys)).to_dict())
        raise
    config_hash = compute_config_hash(config.to_dict())
    ctx.log(stage=STAGE_EMIT, level="INFO", message="config emitted", format=fmt.value, config_hash=config_hash)

    return Resolution(
        variant=spec.name,
        config=config,
        output=output,
        format=fmt,
        config_hash=config_hash,
    )
