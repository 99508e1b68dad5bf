"""Settings loaded from environment variables.

One Settings object for the whole app; command-line options in main.py
override individual fields.
"""
import os
from dataclasses import dataclass
from pathlib import Path

from constants import LOG_FILE_NAME, STORAGE_FILE_NAME

ENV_PREFIX = "PLANNER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str
    start_page: str

    @property
    def storage_file(self) -> Path:
        return self.data_dir / STORAGE_FILE_NAME

    @property
    def log_file(self) -> Path:
        return self.data_dir / LOG_FILE_NAME


def get_settings() -> Settings:
    return Settings(
        data_dir=_env_path(_k("DATA_DIR"), Path.home() / ".study-planner"),
        log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
        start_page=_env(_k("START_PAGE"), "dashboard"),
    )
