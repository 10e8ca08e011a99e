from __future__ import annotations

import re

_WS_RE = re.compile(r"\s+")
# Un carácter de palabra aislado, un espacio y otro carácter aislado: "H o l a"
_SPACED_LETTERS_RE = re.compile(r"\b(\w) (?=\w\b)", flags=re.ASCII)


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text)


def despace_letters(text: str) -> str:
    """
    Une letras sueltas separadas por un único espacio ("T o t a l" -> "Total").

    Heurística cosmética: sólo toca fragmentos de un carácter, las palabras
    normales separadas por espacio se dejan como están.
    """
    return _SPACED_LETTERS_RE.sub(r"\1", text)


def truncate(text: str, limit: int, marker: str) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + marker
