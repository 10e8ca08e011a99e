"""
Capa de entrada de ficheros: filtra por tipo, aplica los límites (número de
ficheros y tamaño) y enruta cada fichero al lector de texto plano o al
extractor de documentos. Al final arma el bloque de contexto para el prompt.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from core.logger import get_logger
from core.pdf import ExtractionRun, extract_path, read_error_run
from core.report import ReportStatus, format_plain_text, format_read_error, format_unsupported
from core.settings import Settings, load_settings
from core.sniffer import SniffVerdict, sniff_path

log = get_logger()

TEXT_EXTENSIONS = {".txt", ".md", ".json"}
DOCUMENT_EXTENSIONS = {".pdf"}
SUPPORTED_EXTENSIONS = TEXT_EXTENSIONS | DOCUMENT_EXTENSIONS
SUPPORTED_MEDIA_TYPES = {
    "text/plain",
    "text/markdown",
    "application/json",
    "application/pdf",
}

CONTEXT_HEADER = "Contexto de los archivos:"


class Route(str, Enum):
    PLAIN_TEXT = "plain_text"
    DOCUMENT = "document"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Rejected:
    path: Path
    reason: str


@dataclass
class IntakeResult:
    accepted: List[Path] = field(default_factory=list)
    rejected: List[Rejected] = field(default_factory=list)


@dataclass(frozen=True)
class FileContent:
    path: Path
    route: Route
    text: str
    status: ReportStatus
    strategy: str = ""
    chars: int = 0
    sniff: Optional[SniffVerdict] = None


def media_type_of(path: Path) -> str:
    return mimetypes.guess_type(path.name)[0] or ""


def is_supported(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS or media_type_of(path) in SUPPORTED_MEDIA_TYPES


def route_for(path: Path, media_type: Optional[str] = None) -> Route:
    """
    .txt/.md/.json y text/* o application/json -> lector de texto plano.
    Todo lo demás (PDF o binario no reconocido) -> extractor de documentos.
    """
    media_type = media_type if media_type is not None else media_type_of(path)
    ext = path.suffix.lower()
    if ext in TEXT_EXTENSIONS or media_type.startswith("text/") or media_type == "application/json":
        return Route.PLAIN_TEXT
    return Route.DOCUMENT


def select_files(
    paths: Iterable[Path],
    settings: Optional[Settings] = None,
    any_type: bool = False,
) -> IntakeResult:
    """Aplica filtro de tipos, tamaño máximo y número máximo de ficheros (en orden)."""
    settings = settings or load_settings()
    res = IntakeResult()
    for p in paths:
        p = Path(p)
        if not any_type and not is_supported(p):
            res.rejected.append(Rejected(p, "tipo no soportado"))
            continue
        try:
            size = p.stat().st_size
        except OSError as e:
            # Se deja pasar: la lectura fallará y dará el informe de error
            log.warning(f"[INTAKE] No se pudo consultar {p}: {e}")
            size = 0
        if size > settings.max_file_bytes:
            res.rejected.append(Rejected(p, f"supera {settings.max_file_mb} MB"))
            continue
        if len(res.accepted) >= settings.max_files:
            res.rejected.append(Rejected(p, f"máximo {settings.max_files} archivos"))
            continue
        res.accepted.append(p)

    for r in res.rejected:
        log.warning(f"[INTAKE] Descartado {r.path.name}: {r.reason}")
    return res


def read_plain_text(path: Path) -> FileContent:
    try:
        raw = path.read_bytes()
    except OSError as e:
        log.warning(f"[INTAKE] Error leyendo {path}: {e}")
        return FileContent(path, Route.PLAIN_TEXT, format_read_error(path.name), ReportStatus.READ_ERROR)
    text = raw.decode("utf-8", errors="replace")
    return FileContent(
        path,
        Route.PLAIN_TEXT,
        format_plain_text(path.name, text),
        ReportStatus.TEXT_FOUND,
        chars=len(text),
    )


def _from_run(path: Path, run: ExtractionRun, sniff: Optional[SniffVerdict]) -> FileContent:
    winner = run.outcome.winning_strategy_id
    return FileContent(
        path=path,
        route=Route.DOCUMENT,
        text=run.report,
        status=run.status,
        strategy=winner.value if winner else "",
        chars=len(run.outcome.text),
        sniff=sniff,
    )


def read_file_content(
    path: Path,
    route: Optional[Route] = None,
    with_sniff: bool = False,
    parallel: bool = False,
) -> FileContent:
    path = Path(path)
    route = route or route_for(path)
    if route is Route.PLAIN_TEXT:
        return read_plain_text(path)
    if route is Route.UNSUPPORTED:
        return FileContent(
            path, route, format_unsupported(path.name, media_type_of(path)), ReportStatus.NO_TEXT
        )

    # El sniff es informativo y se calcula aparte de la extracción
    sniff = sniff_path(path) if with_sniff else None
    try:
        run = extract_path(path, parallel=parallel)
    except Exception as e:
        log.exception(f"[INTAKE] Error inesperado procesando {path.name}: {e}")
        run = read_error_run(path.name)
    return _from_run(path, run, sniff)


def build_context(contents: Iterable[FileContent]) -> str:
    texts = [c.text for c in contents]
    if not texts:
        return ""
    return f"{CONTEXT_HEADER}\n" + "\n\n".join(texts) + "\n\n"
