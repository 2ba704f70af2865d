from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from devsignals.config import StorageConfig

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in (
        "GITHUB_TOKEN",
        "DEVSIGNALS_REPOSITORY",
        "DEVSIGNALS_LABEL",
        "WEB_FEATURES_DATA",
        "STANDARD_POSITIONS_URL",
        "DEVSIGNALS_MANIFEST_PATH",
        "DEVSIGNALS_SIGNALS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEVSIGNALS_DATA_DIR", str(tmp_path / "cache"))


@pytest.fixture
def storage(tmp_path: Path) -> StorageConfig:
    return StorageConfig(
        manifest_path=tmp_path / "web-features-signals.json",
        signals_path=tmp_path / "signals.yml",
        data_dir=tmp_path / "cache",
    )
