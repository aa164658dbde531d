# src/variant_forge/core/__init__.py
"""
Core do Variant Forge.

Este pacote contém a implementação canônica da resolução de configuração
de variantes de build, independente de CLI ou do toolchain de empacotamento.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de estado global
    - orientado a contratos explícitos

Componentes principais:
    - config             → fontes de propriedades, merge em camadas, hashing
    - variants           → VariantSpec, catálogo, resolução e validação
    - emit               → serialização para o toolchain externo
    - resolution_context → log estruturado de eventos por resolução
    - pipeline           → orquestração ponta a ponta

Limites explícitos:
    - Não compila, não assina e não empacota binários
    - Não depende de serviços externos
"""
