"""File locations used by devsignals."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_or_default

APP_DIR_NAME: Final[str] = "devsignals"
DEFAULT_MANIFEST_PATH: Final[str] = "web-features-signals.json"
DEFAULT_SIGNALS_PATH: Final[str] = "signals.yml"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    manifest_path: Path
    signals_path: Path
    data_dir: Path
    http_cache_filename: str = HTTP_CACHE_FILENAME

    def ensure_data_dir(self) -> Path:
        data_dir = self.data_dir.expanduser().resolve()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.data_dir.expanduser().resolve()
        return base / self.http_cache_filename


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_CACHE_HOME")
        base_path = Path(base) if base else (Path.home() / ".cache")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("DEVSIGNALS_DATA_DIR")
    return StorageConfig(
        manifest_path=Path(env_or_default("DEVSIGNALS_MANIFEST_PATH", DEFAULT_MANIFEST_PATH)),
        signals_path=Path(env_or_default("DEVSIGNALS_SIGNALS_PATH", DEFAULT_SIGNALS_PATH)),
        data_dir=Path(env_dir) if env_dir else _default_data_dir(),
    )


def get_http_cache_path() -> Path:
    return get_storage_config().http_cache_path()
