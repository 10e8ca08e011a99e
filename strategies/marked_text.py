from __future__ import annotations

from core.bytescan import find_marker, is_printable

from . import register
from .base import StrategyId

SCAN_LIMIT = 100_000
MIN_CHUNK_CHARS = 10
MAX_CHARS = 5000

BEGIN_TEXT = b"BT"
END_TEXT = b"ET"


def iter_chunks(data: bytes, limit: int = SCAN_LIMIT):
    """
    Devuelve los bloques de texto entre pares BT ... ET dentro de la ventana.

    Un BT sin ET antes del límite se descarta y se corta el recorrido.
    """
    end = min(len(data), limit)
    i = 0
    while i < end:
        start = find_marker(data, BEGIN_TEXT, i, end)
        if start is None:
            return
        stop = find_marker(data, END_TEXT, start + 2, end)
        if stop is None:
            return
        yield "".join(chr(b) for b in data[start + 2 : stop] if is_printable(b))
        i = stop + 2


@register(StrategyId.MARKED_TEXT_RUN)
def extract(data: bytes) -> str:
    """Concatena el texto imprimible de los bloques BT/ET del contenido."""
    chunks = [c for c in iter_chunks(data) if len(c) > MIN_CHUNK_CHARS]
    return " ".join(chunks)[:MAX_CHARS]
