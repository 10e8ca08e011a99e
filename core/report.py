"""
Formateo del resultado final que se entrega al ensamblado del prompt.

Siempre devuelve una cadena no vacía con el nombre del fichero y una marca
de estado: texto encontrado, sin texto o error de lectura.
"""

from __future__ import annotations

from enum import Enum

from core.normalize import truncate
from core.selector import SelectionOutcome

MIN_TEXT_CHARS = 50
MAX_TEXT_CHARS = 5000
TRUNCATION_MARKER = "\n\n[Texto truncado]"

TEXT_FOUND_MARK = "📝 Texto extraído:"
NO_TEXT_MARK = "⚠️ No se encontró texto o el archivo contiene solo imágenes."
READ_ERROR_MARK = "❌ Error al leer el archivo"


class ReportStatus(str, Enum):
    TEXT_FOUND = "text_found"
    NO_TEXT = "no_text"
    READ_ERROR = "read_error"


def classify(outcome: SelectionOutcome) -> ReportStatus:
    # Fragmentos cortos son ruido, no contenido
    if len(outcome.text) < MIN_TEXT_CHARS:
        return ReportStatus.NO_TEXT
    return ReportStatus.TEXT_FOUND


def _header(file_name: str) -> str:
    return f"📄 Archivo PDF: {file_name}"


def format_report(file_name: str, outcome: SelectionOutcome) -> str:
    if classify(outcome) is ReportStatus.NO_TEXT:
        return (
            f"{_header(file_name)}\n\n"
            f"{NO_TEXT_MARK}\n\n"
            "Recomendaciones:\n"
            "1. Use una versión del PDF con OCR\n"
            "2. Convierta el archivo a TXT con una herramienta externa\n"
            "3. Copie el texto del PDF manualmente"
        )
    body = truncate(outcome.text, MAX_TEXT_CHARS, TRUNCATION_MARKER)
    return f"{_header(file_name)}\n\n{TEXT_FOUND_MARK}\n{body}"


def format_read_error(file_name: str) -> str:
    return f"{_header(file_name)}\n{READ_ERROR_MARK}"


def format_plain_text(file_name: str, text: str) -> str:
    body = truncate(text, MAX_TEXT_CHARS, TRUNCATION_MARKER)
    return f'Archivo de texto "{file_name}":\n{body}'


def format_unsupported(file_name: str, media_type: str) -> str:
    return f'Archivo "{file_name}" ({media_type or "desconocido"})\n\n[Formato no soportado]'
