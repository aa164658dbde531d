# tests/conftest.py
"""
Fixtures compartilhados para testes do Variant Forge.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de fontes de propriedades semelhantes ao uso real
  (defaults versionados + `key.properties` com segredos)
- um catálogo de variantes reduzido e determinístico
- um ResolutionContext controlado

Decisões arquiteturais:
    - Fontes são fornecidas como strings; cada teste decide se materializa
      em disco (via `tmp_path`) ou usa fontes inline
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture depende de variáveis de ambiente reais
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Fontes de propriedades
# =====================================================

@pytest.fixture
def android_defaults_properties() -> str:
    """
    Fixture que fornece um `defaults.properties` semelhante ao uso real.

    Representa a camada base versionada de um app Android: identidade
    do app e versão. Não contém segredos de assinatura.

    Returns:
        str: Conteúdo `.properties` da camada base.
    """
    return """\
# identidade do app
applicationId=com.example.schoolapp
versionCode = 11
versionName: 1.0.10

! sdk
minSdk=23
"""


@pytest.fixture
def android_key_properties() -> str:
    """
    Fixture que fornece um `key.properties` com credenciais de assinatura.

    Este arquivo normalmente fica fora do controle de versão e é a camada
    de maior prioridade em builds de release.

    Returns:
        str: Conteúdo `.properties` com as quatro chaves de assinatura.
    """
    return """\
storePassword=s3cr3t-store
keyPassword=s3cr3t-key
keyAlias=upload
storeFile=keys/upload-keystore.jks
"""


# =====================================================
# Variantes
# =====================================================

@pytest.fixture
def small_specs():
    """Catálogo mínimo com duas variantes e tipos declarados."""
    from variant_forge.core.variants.schema import VariantSpec

    debug = VariantSpec(
        name="debug",
        required=frozenset({"applicationId"}),
        defaults={"debuggable": "true"},
        types={"debuggable": "bool"},
    )
    release = VariantSpec(
        name="release",
        required=frozenset({"applicationId", "keyAlias", "storeFile"}),
        defaults={"debuggable": "false", "minifyEnabled": "true"},
        types={"debuggable": "bool", "minifyEnabled": "bool", "versionCode": "int"},
    )
    return {"debug": debug, "release": release}


@pytest.fixture
def fixed_ctx():
    """
    Fixture que fornece um ResolutionContext determinístico.

    `run_id` e `created_at` são fixos para que asserts sobre eventos
    sejam reprodutíveis.
    """
    from variant_forge.core.resolution_context import ResolutionContext

    return ResolutionContext(
        run_id="resolution-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        variant="release",
    )
