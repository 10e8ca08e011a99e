from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from core.intake import FileContent
from core.logger import get_logger

CSV_COLUMNS = [
    "archivo",
    "ruta",
    "estado",
    "estrategia",
    "caracteres",
    "firma_documento",
    "texto_temprano",
]


def summary_frame(contents: Iterable[FileContent]) -> pd.DataFrame:
    rows = []
    for c in contents:
        rows.append(
            {
                "archivo": c.path.name,
                "ruta": c.route.value,
                "estado": c.status.value,
                "estrategia": c.strategy,
                "caracteres": c.chars,
                "firma_documento": "" if c.sniff is None else c.sniff.looks_like_document,
                "texto_temprano": "" if c.sniff is None else c.sniff.has_early_text,
            }
        )
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def write_csv(contents: Iterable[FileContent], csv_path: Union[str, Path]) -> Path:
    log = get_logger()
    df = summary_frame(contents)

    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    df.to_csv(
        csv_path,
        index=False,
        encoding="utf-8",
        lineterminator="\n",
        quoting=csv.QUOTE_MINIMAL,
    )
    log.info(f"[CSV] Escrito: {csv_path}")
    return csv_path
