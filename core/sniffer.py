from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from core.bytescan import is_letter
from core.logger import get_logger

log = get_logger()

PREFIX_BYTES = 1000
SIGNATURE_BYTES = 10
SIGNATURE = "%PDF"


@dataclass(frozen=True)
class SniffVerdict:
    looks_like_document: bool = False
    has_early_text: bool = False


def sniff(prefix: bytes) -> SniffVerdict:
    """
    Comprobación barata sobre los primeros 1000 bytes: firma %PDF en la
    cabecera y alguna letra ASCII. Sólo orientativa, no afecta a la extracción.
    """
    head = bytes(prefix[:PREFIX_BYTES])
    header = head[:SIGNATURE_BYTES].decode("latin-1")
    return SniffVerdict(
        looks_like_document=SIGNATURE in header,
        has_early_text=any(is_letter(b) for b in head),
    )


def sniff_path(path: Union[str, Path]) -> SniffVerdict:
    try:
        with open(path, "rb") as fh:
            prefix = fh.read(PREFIX_BYTES)
    except OSError as e:
        log.warning(f"[SNIFF] No se pudo leer {path}: {e}")
        return SniffVerdict()
    return sniff(prefix)


def is_text_document(verdict: SniffVerdict) -> bool:
    return verdict.looks_like_document and verdict.has_early_text
