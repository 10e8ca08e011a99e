from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from core.logger import get_logger
from core.report import ReportStatus, classify, format_read_error, format_report
from core.selector import NO_TEXT, SelectionOutcome, select

log = get_logger()


@dataclass(frozen=True)
class RawDocument:
    """Contenido del fichero + metadatos declarados. Sólo se lee."""

    data: bytes
    name: str
    size: int = 0
    media_type: str = ""

    @classmethod
    def from_bytes(cls, data: bytes, name: str, media_type: str = "") -> "RawDocument":
        media_type = media_type or (mimetypes.guess_type(name)[0] or "")
        return cls(data=bytes(data), name=name, size=len(data), media_type=media_type)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "RawDocument":
        p = Path(path)
        return cls.from_bytes(p.read_bytes(), p.name)


@dataclass(frozen=True)
class ExtractionRun:
    """Resultado completo de una llamada: informe + datos para el resumen."""

    name: str
    report: str
    status: ReportStatus
    outcome: SelectionOutcome = NO_TEXT


def extract_document(doc: RawDocument, parallel: bool = False) -> ExtractionRun:
    outcome = select(doc.data, parallel=parallel)
    status = classify(outcome)
    log.info(
        f"[EXTRACT] {doc.name}: {status.value} "
        f"({len(outcome.text)} chars, {doc.size} bytes)"
    )
    return ExtractionRun(
        name=doc.name,
        report=format_report(doc.name, outcome),
        status=status,
        outcome=outcome,
    )


def read_error_run(name: str) -> ExtractionRun:
    return ExtractionRun(
        name=name, report=format_read_error(name), status=ReportStatus.READ_ERROR
    )


def extract_path(
    path: Union[str, Path], name: Optional[str] = None, parallel: bool = False
) -> ExtractionRun:
    p = Path(path)
    name = name or p.name
    try:
        doc = RawDocument.from_path(p)
    except OSError as e:
        # Fallo de lectura: no se ejecuta ninguna estrategia
        log.warning(f"[EXTRACT] Error leyendo {p}: {e}")
        return read_error_run(name)
    if name != doc.name:
        doc = RawDocument.from_bytes(doc.data, name)
    return extract_document(doc, parallel=parallel)


def extract_bytes(data: bytes, name: str, parallel: bool = False) -> str:
    return extract_document(RawDocument.from_bytes(data, name), parallel=parallel).report


def read_pdf_text(pdf_path: Union[str, Path]) -> str:
    return extract_path(pdf_path).report
