"""
Utilidades de bajo nivel para clasificar bytes y recorrer ventanas acotadas.

Todas las funciones trabajan sobre enteros 0..255 (lo que devuelve iterar
un ``bytes``) y nunca indexan fuera del buffer.
"""

from __future__ import annotations

from typing import Optional

PRINTABLE_MIN = 32
PRINTABLE_MAX = 126

TAB = 9
LF = 10
CR = 13


def is_printable(b: int) -> bool:
    """ASCII imprimible (32..126)."""
    return PRINTABLE_MIN <= b <= PRINTABLE_MAX


def is_line_break(b: int) -> bool:
    return b == LF or b == CR


def is_tab(b: int) -> bool:
    return b == TAB


def is_whitespace(b: int) -> bool:
    return b == 32 or b == TAB or is_line_break(b)


def is_control(b: int) -> bool:
    return not is_printable(b) and not is_whitespace(b)


def is_letter(b: int) -> bool:
    """A-Z o a-z."""
    return 65 <= b <= 90 or 97 <= b <= 122


def window(data: bytes, limit: int) -> bytes:
    """Primeros ``limit`` bytes (o todo el buffer si es más corto)."""
    if limit <= 0:
        return b""
    return bytes(data[:limit])


def find_marker(data: bytes, marker: bytes, start: int, end: int) -> Optional[int]:
    """
    Busca un marcador de dos bytes en ``data[start:end]``.

    Devuelve la posición del primer byte o None. El marcador tiene que caber
    entero antes de ``end``; una coincidencia que lo cruce no cuenta.
    """
    end = min(end, len(data))
    if start < 0 or len(marker) != 2 or end - start < 2:
        return None
    first, second = marker[0], marker[1]
    i = start
    while i + 1 < end:
        if data[i] == first and data[i + 1] == second:
            return i
        i += 1
    return None
