# src/variant_forge/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Variant Forge.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura de fontes de propriedades, o merge em camadas e a validação
da configuração de uma variante de build.

As exceções aqui definidas representam **falhas explícitas de entrada**,
e não erros genéricos de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Fontes ilegíveis são tratadas como falhas fatais
    - Erros de validação são entregues em lote, nunca um a um

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção carrega valores de propriedades (apenas chaves e origens)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos (isso é papel do ResolutionContext)
"""

from typing import Optional, Sequence


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração de build.

    Todas as exceções levantadas durante leitura, merge e validação
    de configuração devem herdar desta classe.
    """


class MalformedSourceError(ConfigError):
    """
    Exceção levantada quando uma fonte existe, mas seu conteúdo não pode
    ser interpretado como pares chave-valor.

    Exemplos:
        - linha de `.properties` sem separador (`=` ou `:`)
        - escape `\\uXXXX` inválido
        - YAML/JSON sintaticamente inválido
        - raiz YAML/JSON que não é um mapa plano de escalares

    Decisões arquiteturais:
        - Falha fatal: interrompe o pipeline antes da validação
        - Nenhuma fonte parcial é produzida

    Attributes:
        origin: caminho (ou tag) da fonte que falhou.
        line: número da linha (1-based) quando conhecido.
    """

    def __init__(self, message: str, *, origin: str, line: Optional[int] = None):
        location = origin if line is None else f"{origin}:{line}"
        super().__init__(f"{location}: {message}")
        self.origin = origin
        self.line = line


class UnsupportedSourceFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo de fonte não é suportada.

    Formatos suportados (v1):
        - Properties (.properties)
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class ConfigValidationError(ConfigError):
    """
    Exceção levantada quando a validação de uma variante falha.

    Carrega o lote completo de erros de validação, para que todos os
    problemas sejam apresentados de uma só vez.

    Attributes:
        errors: tupla de `ValidationError` na ordem determinística do validador.
    """

    def __init__(self, errors: Sequence["Exception"], *, variant: Optional[str] = None):
        self.errors = tuple(errors)
        self.variant = variant
        summary = "; ".join(str(e) for e in self.errors)
        prefix = f"variante '{variant}' inválida" if variant else "configuração inválida"
        super().__init__(f"{prefix} ({len(self.errors)} erro(s)): {summary}")
