from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from core.settings import load_settings

_DEF_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level:<8}</level> | "
    "{name}:{function}:{line} - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None):
    """Activa los sinks: consola (stderr) + fichero rotado en LOG_DIR/app.log."""
    settings = load_settings()
    level = level or settings.log_level
    logger.remove()
    logger.add(sys.stderr, level=level, format=_DEF_FMT)

    log_path = Path(log_dir or settings.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / "app.log",
        level=level,
        format=_DEF_FMT,
        rotation="10 MB",
        retention="10 days",
        encoding="utf-8",
    )


def get_logger():
    return logger
