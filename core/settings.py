from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "y"}


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: str = "logs"
    max_files: int = 5
    max_file_mb: int = 10
    parallel: bool = False

    @property
    def max_file_bytes(self) -> int:
        return self.max_file_mb * 1024 * 1024


def load_settings() -> Settings:
    """Lee la configuración del entorno (y de .env si existe)."""
    load_dotenv()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_dir=os.getenv("LOG_DIR", "logs"),
        max_files=_env_int("INTAKE_MAX_FILES", 5),
        max_file_mb=_env_int("INTAKE_MAX_FILE_MB", 10),
        parallel=_env_bool("EXTRACT_PARALLEL"),
    )
