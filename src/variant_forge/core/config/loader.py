# src/variant_forge/core/config/loader.py
"""
Loader canônico de configuração em camadas do Variant Forge.

Este módulo é responsável por resolver a configuração plana efetiva a
partir de zero ou mais fontes de propriedades, aplicadas da esquerda
para a direita.

Cenário típico:
    - `defaults.properties`  (base versionada)
    - `key.properties`       (segredos de assinatura, opcional)
    - variáveis de ambiente  (overrides de CI, opcional)

Responsabilidades do módulo:
    - Ler arquivos de fontes quando recebidos como caminhos
    - Ignorar fontes ausentes sem erro
    - Resolver a configuração final via merge determinístico

Princípios fundamentais:
    - Uma fonte ausente nunca altera o resultado
    - Uma fonte ilegível interrompe o carregamento por completo
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - O resultado é sempre uma `MergedConfig` nova
    - O merge é associativo: load([A, B, C]) == load([load([A, B]), C])

Limites explícitos:
    - Não valida requisitos de variante
    - Não persiste configuração
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from .merge import MergedConfig, merge_configs, merge_sources
from .sources import PropertySource, read_source


SourceLike = Union[PropertySource, MergedConfig, None]


def load(sources: Iterable[SourceLike]) -> MergedConfig:
    """
    Mescla fontes de propriedades em ordem de prioridade crescente.

    Política:
        - `None` representa uma fonte ausente e é ignorada
        - `MergedConfig` é aceito como fonte, preservando as origens
        - a fonte à direita sobrescreve a fonte à esquerda

    Args:
        sources: sequência ordenada de fontes (opcionais).

    Returns:
        MergedConfig: configuração plana resultante.

    Raises:
        TypeError: se algum item não for uma fonte reconhecida.
    """
    merged = MergedConfig()

    for source in sources:
        if source is None:
            continue

        if isinstance(source, MergedConfig):
            merged = merge_configs(merged, source)
            continue

        if not isinstance(source, PropertySource):
            raise TypeError(
                f"Fonte deve ser PropertySource, MergedConfig ou None, recebido: {type(source).__name__}"
            )

        merged = merge_sources(merged, source)

    return merged


def load_files(paths: Iterable[Union[str, Path]]) -> MergedConfig:
    """
    Lê e mescla arquivos de fontes de propriedades.

    Todos os arquivos são lidos antes do merge: um arquivo malformado
    interrompe o carregamento sem produzir configuração parcial.

    Raises:
        MalformedSourceError: se algum arquivo existente for ilegível.
        UnsupportedSourceFormatError: se alguma extensão não for suportada.
    """
    read: List[Optional[PropertySource]] = [read_source(p) for p in paths]
    return load(read)
