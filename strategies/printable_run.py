from __future__ import annotations

from core.bytescan import is_line_break, is_printable, is_tab, window
from core.normalize import collapse_whitespace, despace_letters

from . import register
from .base import StrategyId

SCAN_LIMIT = 200_000


@register(StrategyId.PRINTABLE_RUN)
def extract(data: bytes) -> str:
    """
    Recorre los primeros 200 KB copiando los bytes imprimibles.

    Tabuladores -> espacio; cualquier otro byte se colapsa en como mucho
    un espacio para separar bloques.
    """
    out = []
    for b in window(data, SCAN_LIMIT):
        if is_printable(b) or is_line_break(b):
            out.append(chr(b))
        elif is_tab(b):
            out.append(" ")
        elif out and out[-1] != " ":
            out.append(" ")

    text = collapse_whitespace("".join(out))
    return despace_letters(text).strip()
