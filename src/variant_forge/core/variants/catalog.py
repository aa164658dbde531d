# src/variant_forge/core/variants/catalog.py
"""
Catálogo padrão de variantes Android (`debug` e `release`).

Os valores refletem a configuração de build de um app Android típico:
    - namespace/applicationId `com.smartsafeschool.app`, versão 11 / 1.0.10
    - compileSdk 35, NDK 27.0.12077973, Java 11 (jvmTarget 11)
    - release: minify + shrink de recursos, não depurável, assinado
    - debug: depurável, sem minify/shrink, sem assinatura obrigatória
    - packaging: `pickFirst` para bibliotecas nativas duplicadas
    - prefab desabilitado
    - dependências do Play Feature Delivery

Identidade e versão têm defaults e podem ser sobrescritas por qualquer
fonte; apenas as chaves de assinatura são obrigatórias (na `release`).

O catálogo é construído a cada chamada: não existe instância global
compartilhada.
"""

from typing import Dict

from .schema import VariantSpec


SIGNING_KEYS = ("keyAlias", "keyPassword", "storeFile", "storePassword")

DEPENDENCIES = (
    "com.google.android.play:feature-delivery:2.1.0",
    "com.google.android.play:feature-delivery-ktx:2.1.0",
    "com.google.android.play:core-common:2.0.4",
)

_IDENTITY_DEFAULTS = {
    "namespace": "com.smartsafeschool.app",
    "applicationId": "com.smartsafeschool.app",
    "versionCode": "11",
    "versionName": "1.0.10",
}

_COMMON_DEFAULTS = {
    **_IDENTITY_DEFAULTS,
    "compileSdk": "35",
    "minSdk": "21",
    "targetSdk": "35",
    "ndkVersion": "27.0.12077973",
    "javaVersion": "11",
    "jvmTarget": "11",
    "prefabEnabled": "false",
    "packaging.pickFirst": "**/libc++_shared.so,**/libjsc.so",
    "dependencies": ",".join(DEPENDENCIES),
}

_COMMON_TYPES = {
    "versionCode": "int",
    "compileSdk": "int",
    "minSdk": "int",
    "targetSdk": "int",
    "debuggable": "bool",
    "minifyEnabled": "bool",
    "shrinkResources": "bool",
    "prefabEnabled": "bool",
    "packaging.pickFirst": "list",
    "dependencies": "list",
}


def android_variants() -> Dict[str, VariantSpec]:
    """Retorna um catálogo novo com as variantes `debug` e `release`."""
    debug = VariantSpec(
        name="debug",
        defaults={
            **_COMMON_DEFAULTS,
            "debuggable": "true",
            "minifyEnabled": "false",
            "shrinkResources": "false",
        },
        types=dict(_COMMON_TYPES),
    )

    release = VariantSpec(
        name="release",
        required=frozenset(SIGNING_KEYS),
        defaults={
            **_COMMON_DEFAULTS,
            "debuggable": "false",
            "minifyEnabled": "true",
            "shrinkResources": "true",
            "proguardFiles": "proguard-android-optimize.txt,proguard-rules.pro",
        },
        types={**_COMMON_TYPES, "storeFile": "path", "proguardFiles": "list"},
    )

    return {debug.name: debug, release.name: release}
