# tests/core/variants/test_resolver.py
"""
Testes da resolução de variante por nome e do catálogo Android padrão.
"""

import pytest

try:
    from variant_forge.core.variants.catalog import DEPENDENCIES, SIGNING_KEYS, android_variants
    from variant_forge.core.variants.errors import UnknownVariantError
    from variant_forge.core.variants.resolver import resolve
except Exception as e:  # noqa: BLE001
    resolve = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing resolver modules. Implement:\n"
            "- src/variant_forge/core/variants/resolver.py (resolve)\n"
            "- src/variant_forge/core/variants/catalog.py (android_variants)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_resolve_known_variant(small_specs):
    _require_imports()
    assert resolve("release", small_specs) is small_specs["release"]


@pytest.mark.parametrize("name", ["unknown_variant", "Release", "", "staging"])
def test_resolve_unknown_variant_raises(small_specs, name):
    """
    Verifica que qualquer nome fora do catálogo falha com `UnknownVariantError`.

    Invariantes:
        - A busca é exata (sensível a maiúsculas)
        - O erro carrega o nome solicitado e os nomes conhecidos
    """
    _require_imports()
    with pytest.raises(UnknownVariantError) as exc_info:
        resolve(name, small_specs)

    assert exc_info.value.name == name
    assert exc_info.value.known == ("debug", "release")


def test_resolve_on_empty_catalog_raises():
    _require_imports()
    with pytest.raises(UnknownVariantError):
        resolve("debug", {})


def test_android_catalog_release_requires_signing():
    _require_imports()
    release = android_variants()["release"]
    assert set(SIGNING_KEYS) <= release.required
    assert release.defaults["minifyEnabled"] == "true"
    assert release.defaults["shrinkResources"] == "true"
    assert release.defaults["debuggable"] == "false"
    assert release.defaults["compileSdk"] == "35"
    assert release.required == frozenset(SIGNING_KEYS)


def test_android_catalog_debug_defaults():
    _require_imports()
    debug = android_variants()["debug"]
    assert not (set(SIGNING_KEYS) & debug.required)
    assert debug.defaults["debuggable"] == "true"
    assert debug.defaults["minifyEnabled"] == "false"
    assert debug.defaults["packaging.pickFirst"] == "**/libc++_shared.so,**/libjsc.so"


def test_android_catalog_is_fresh_per_call():
    _require_imports()
    assert android_variants() is not android_variants()
    assert android_variants() == android_variants()


@pytest.mark.parametrize("name", ["debug", "release"])
def test_android_catalog_identity_and_toolchain_defaults(name):
    """
    Verifica identidade, versão e toolchain padrão das duas variantes.

    Invariantes:
        - Identidade e versão têm defaults (sobrescrevíveis por fontes)
        - `jvmTarget` acompanha `javaVersion`
    """
    _require_imports()
    spec = android_variants()[name]
    assert spec.defaults["namespace"] == "com.smartsafeschool.app"
    assert spec.defaults["applicationId"] == "com.smartsafeschool.app"
    assert spec.defaults["versionCode"] == "11"
    assert spec.defaults["versionName"] == "1.0.10"
    assert spec.defaults["jvmTarget"] == spec.defaults["javaVersion"] == "11"
    assert not ({"namespace", "applicationId", "versionCode", "versionName"} & spec.required)


@pytest.mark.parametrize("name", ["debug", "release"])
def test_android_catalog_declares_feature_delivery_dependencies(name):
    _require_imports()
    spec = android_variants()[name]
    assert spec.types["dependencies"] == "list"
    assert spec.defaults["dependencies"].split(",") == list(DEPENDENCIES)
    assert "com.google.android.play:core-common:2.0.4" in DEPENDENCIES


def test_android_catalog_debug_resolves_from_defaults_alone():
    """Uma build debug sem nenhuma fonte resolve apenas com os defaults."""
    _require_imports()
    from variant_forge.core.config.loader import load
    from variant_forge.core.variants.validator import validate

    config = validate(load([]), android_variants()["debug"]).unwrap()
    assert config.get_int("versionCode") == 11
    assert config.get_list("dependencies") == list(DEPENDENCIES)
    assert config.get_bool("debuggable") is True
