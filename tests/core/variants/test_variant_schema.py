# tests/core/variants/test_variant_schema.py
"""
Testes do schema de VariantSpec e do carregamento de catálogos YAML/JSON.

Os testes asseguram que:
- catálogos válidos são materializados em VariantSpec imutáveis
- defaults escalares e listas são normalizados para string
- inconsistências estruturais são rejeitadas com `VariantSpecError`
"""

from pathlib import Path

import pytest

try:
    from variant_forge.core.variants.errors import VariantSpecError
    from variant_forge.core.variants.schema import (
        VariantSpec,
        load_variant_specs,
        parse_variant_specs,
        specs_by_name,
    )
except Exception as e:  # noqa: BLE001
    load_variant_specs = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing variant schema. Implement:\n"
            "- src/variant_forge/core/variants/schema.py (VariantSpec, load_variant_specs)\n"
            f"Import error: {_IMPORT_ERR}"
        )


_CATALOG_YAML = """\
variants:
  debug:
    required: [applicationId]
    defaults:
      debuggable: true
  release:
    required: [applicationId, keyAlias]
    defaults:
      minifyEnabled: true
      proguardFiles: [proguard-android-optimize.txt, proguard-rules.pro]
      compileSdk: 35
    types:
      versionCode: int
      minifyEnabled: bool
"""


def test_load_catalog_from_yaml(tmp_path: Path):
    """
    Verifica o carregamento de um catálogo YAML completo.

    Invariantes:
        - Booleanos viram `true`/`false`
        - Listas viram strings separadas por vírgula
        - Tipos declarados são preservados
    """
    _require_imports()
    path = tmp_path / "variants.yaml"
    path.write_text(_CATALOG_YAML, encoding="utf-8")

    specs = load_variant_specs(path)

    assert sorted(specs) == ["debug", "release"]
    release = specs["release"]
    assert release.required == frozenset({"applicationId", "keyAlias"})
    assert release.defaults["minifyEnabled"] == "true"
    assert release.defaults["proguardFiles"] == "proguard-android-optimize.txt,proguard-rules.pro"
    assert release.defaults["compileSdk"] == "35"
    assert release.types["versionCode"] == "int"
    assert specs["debug"].defaults["debuggable"] == "true"


def test_load_catalog_from_json(tmp_path: Path):
    _require_imports()
    path = tmp_path / "variants.json"
    path.write_text('{"variants": {"qa": {"required": ["applicationId"]}}}', encoding="utf-8")
    assert load_variant_specs(path)["qa"].required == frozenset({"applicationId"})


def test_spec_is_immutable():
    _require_imports()
    spec = VariantSpec(name="debug", defaults={"debuggable": "true"})
    with pytest.raises(TypeError):
        spec.defaults["debuggable"] = "false"  # type: ignore[index]


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"variants": {}},
        {"variants": {"debug": []}},
        {"variants": {"debug": {"required": "applicationId"}}},
        {"variants": {"debug": {"required": [""]}}},
        {"variants": {"debug": {"defaults": {"nested": {"a": 1}}}}},
        {"variants": {"debug": {"types": {"versionCode": "float"}}}},
        {"variants": {"debug": {"extends": "base"}}},
        {"variants": {"debug": {"required": ["a"], "defaults": {"a": "1"}}}},
        {"variants": {"debug": {"defaults": {"versionCode": "x"}, "types": {"versionCode": "int"}}}},
    ],
)
def test_invalid_catalogs_raise(data):
    """
    Verifica que catálogos estruturalmente inválidos são rejeitados.

    Casos cobertos: raiz não-mapa, catálogo vazio, seções com tipo errado,
    chaves vazias, defaults aninhados, tipos desconhecidos, seções
    desconhecidas, chave obrigatória com default e default com tipo errado.
    """
    _require_imports()
    with pytest.raises(VariantSpecError):
        parse_variant_specs(data)


def test_missing_catalog_file_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(VariantSpecError):
        load_variant_specs(tmp_path / "variants.yaml")


def test_unsupported_catalog_format_raises(tmp_path: Path):
    _require_imports()
    path = tmp_path / "variants.ini"
    path.write_text("[debug]\n", encoding="utf-8")
    with pytest.raises(VariantSpecError):
        load_variant_specs(path)


def test_unparseable_catalog_raises(tmp_path: Path):
    _require_imports()
    path = tmp_path / "variants.yaml"
    path.write_text("variants: [unclosed\n", encoding="utf-8")
    with pytest.raises(VariantSpecError):
        load_variant_specs(path)


def test_non_utf8_catalog_raises_variant_spec_error(tmp_path: Path):
    _require_imports()
    path = tmp_path / "variants.yaml"
    path.write_bytes(b"variants:\n  debug: {defaults: {a: \"\xff\xfe\"}}\n")
    with pytest.raises(VariantSpecError):
        load_variant_specs(path)


def test_catalog_path_that_is_a_directory_raises(tmp_path: Path):
    _require_imports()
    path = tmp_path / "variants.yaml"
    path.mkdir()
    with pytest.raises(VariantSpecError):
        load_variant_specs(path)


def test_specs_by_name_rejects_duplicates():
    _require_imports()
    with pytest.raises(VariantSpecError):
        specs_by_name([VariantSpec(name="debug"), VariantSpec(name="debug")])
