from __future__ import annotations

import re

from . import register
from .base import StrategyId

MIN_LINE_CHARS = 20
MAX_LINES = 50

# Todo lo que no sea ASCII imprimible ni \n \r \t pasa a espacio
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n\r\t]")


@register(StrategyId.WIDE_DECODE)
def extract(data: bytes) -> str:
    """Decodifica todo el buffer de forma permisiva y se queda con las líneas largas."""
    text = data.decode("utf-8", errors="replace")
    ascii_text = _NON_PRINTABLE_RE.sub(" ", text)
    lines = [ln for ln in ascii_text.split("\n") if len(ln.strip()) > MIN_LINE_CHARS]
    return "\n".join(lines[:MAX_LINES])
