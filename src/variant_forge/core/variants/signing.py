"""Extração da configuração de assinatura de uma variante resolvida.

As credenciais de assinatura (`keyAlias`, `keyPassword`, `storeFile`,
`storePassword`) normalmente vêm de um `key.properties` fora do controle
de versão. O caminho do keystore é relativo à raiz do projeto.

Nenhuma operação criptográfica é realizada aqui: apenas a montagem
explícita dos parâmetros que o toolchain externo consome.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config.errors import ConfigValidationError
from ..exceptions import missing_key
from .catalog import SIGNING_KEYS
from .types import ResolvedConfig


@dataclass(frozen=True)
class SigningConfig:
    """Parâmetros de assinatura de uma variante."""

    key_alias: str
    key_password: str
    store_file: Path
    store_password: str

    def __repr__(self) -> str:
        return (
            f"SigningConfig(key_alias={self.key_alias!r}, key_password='********', "
            f"store_file={str(self.store_file)!r}, store_password='********')"
        )


def signing_config(config: ResolvedConfig, root: Union[str, Path] = ".") -> Optional[SigningConfig]:
    """Monta a SigningConfig a partir de uma configuração resolvida.

    Returns:
        `None` quando nenhuma chave de assinatura está presente.

    Raises:
        ConfigValidationError: quando apenas parte das chaves está presente.
    """
    present = [k for k in SIGNING_KEYS if config.get(k) is not None]
    if not present:
        return None

    absent = [k for k in SIGNING_KEYS if k not in present]
    if absent:
        raise ConfigValidationError(
            [missing_key(key=k, variant=config.variant) for k in absent],
            variant=config.variant,
        )

    store_file = Path(config.require("storeFile")).expanduser()
    if not store_file.is_absolute():
        store_file = Path(root) / store_file

    return SigningConfig(
        key_alias=config.require("keyAlias"),
        key_password=config.require("keyPassword"),
        store_file=store_file,
        store_password=config.require("storePassword"),
    )
