# src/variant_forge/core/config/properties.py
"""
Parser de arquivos `.properties` (formato chave=valor plano).

Política de parsing (v1), alinhada ao `java.util.Properties`:
    - linhas em branco e linhas iniciadas por `#` ou `!` são comentários
    - espaços no início da linha são ignorados
    - o primeiro `=` ou `:` não escapado separa chave e valor
    - espaços ao redor do separador são descartados
    - barra invertida final (em número ímpar) continua a linha lógica
    - escapes `\\t \\n \\r \\f \\\\ \\uXXXX` são decodificados

Diferença deliberada em relação ao Java:
    - uma linha sem separador é rejeitada (não vira chave com valor vazio)

Limites explícitos:
    - Não realiza merge entre fontes
    - Não interpreta tipos (todo valor é string)
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .errors import MalformedSourceError


_COMMENT_CHARS = ("#", "!")
_SEPARATORS = ("=", ":")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _ends_with_continuation(line: str) -> bool:
    count = 0
    for ch in reversed(line):
        if ch != "\\":
            break
        count += 1
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Agrupa linhas físicas em linhas lógicas, preservando a linha inicial."""
    buffer: List[str] = []
    start: Optional[int] = None

    physical = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    for number, raw in enumerate(physical, start=1):
        line = raw.lstrip()
        if not buffer:
            if not line or line[0] in _COMMENT_CHARS:
                continue
            start = number

        if _ends_with_continuation(line):
            buffer.append(line[:-1])
            continue

        buffer.append(line)
        yield start, "".join(buffer)
        buffer = []
        start = None

    # continuação pendente no fim do arquivo encerra a linha lógica
    if buffer:
        yield start, "".join(buffer)


def _code_unit(value: str, start: int, *, origin: str, line: int) -> int:
    """Lê os 4 dígitos hexadecimais de um escape `\\uXXXX` iniciado em `start`."""
    digits = value[start + 2:start + 6]
    if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
        raise MalformedSourceError(
            f"escape unicode inválido: \\u{digits}", origin=origin, line=line
        )
    return int(digits, 16)


def _unescape(value: str, *, origin: str, line: int) -> str:
    out: List[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        if i + 1 >= len(value):
            i += 1
            continue

        nxt = value[i + 1]
        if nxt == "u":
            code = _code_unit(value, i, origin=origin, line=line)
            i += 6
            if 0xDC00 <= code <= 0xDFFF:
                raise MalformedSourceError(
                    f"surrogate baixo sem par: \\u{code:04X}", origin=origin, line=line
                )
            if 0xD800 <= code <= 0xDBFF:
                # par UTF-16 (alto + baixo) vira um único code point
                low = _code_unit(value, i, origin=origin, line=line) if value.startswith("\\u", i) else None
                if low is None or not 0xDC00 <= low <= 0xDFFF:
                    raise MalformedSourceError(
                        f"surrogate alto sem par: \\u{code:04X}", origin=origin, line=line
                    )
                code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                i += 6
            out.append(chr(code))
            continue

        out.append(_SIMPLE_ESCAPES.get(nxt, nxt))
        i += 2

    return "".join(out)


def _split_key_value(logical: str) -> Optional[Tuple[str, str]]:
    i = 0
    while i < len(logical):
        ch = logical[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS:
            return logical[:i].rstrip(), logical[i + 1:].lstrip()
        i += 1
    return None


def parse_properties(text: str, *, origin: str = "inline") -> List[Tuple[str, str]]:
    """
    Interpreta o conteúdo de um arquivo `.properties`.

    Args:
        text: conteúdo textual já decodificado.
        origin: caminho ou tag usada nas mensagens de erro.

    Returns:
        Lista ordenada de pares (chave, valor), na ordem em que aparecem.
        Chaves duplicadas são mantidas; o merge decide a precedência.

    Raises:
        MalformedSourceError: linha sem separador, chave vazia, escape inválido
            ou surrogate UTF-16 sem par.
    """
    entries: List[Tuple[str, str]] = []

    for number, logical in _logical_lines(text):
        split = _split_key_value(logical)
        if split is None:
            raise MalformedSourceError(
                "linha sem separador '=' ou ':'", origin=origin, line=number
            )

        raw_key, raw_value = split
        key = _unescape(raw_key, origin=origin, line=number)
        if not key.strip():
            raise MalformedSourceError("chave vazia", origin=origin, line=number)

        entries.append((key, _unescape(raw_value, origin=origin, line=number)))

    return entries


def escape_properties(text: str, *, is_key: bool = False) -> str:
    """Escapa uma string para escrita em `.properties` (inverso de `parse_properties`)."""
    out: List[str] = []
    for index, ch in enumerate(text):
        if ch == "\\":
            out.append("\\\\")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\f":
            out.append("\\f")
        elif ch in "=:#!" and (is_key or ch in "=:"):
            out.append("\\" + ch)
        elif ch == " " and (is_key or index == 0):
            out.append("\\ ")
        else:
            out.append(ch)
    return "".join(out)
