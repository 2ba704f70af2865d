"""Manifest mapping feature identity to its tracking issue and vote count.

The manifest is a full snapshot of one pass and replaces the previous file
wholesale; there is no merging with earlier manifests.
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devsignals.domain.model import FeatureId

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    url: str
    votes: int = 0

    def __post_init__(self) -> None:
        if self.votes < 0:
            raise ValueError(f"Vote count must be non-negative, got {self.votes}")

    def as_dict(self) -> dict[str, str | int]:
        return {"url": self.url, "votes": self.votes}


@dataclass(slots=True)
class Manifest:
    entries: dict[FeatureId, ManifestEntry] = field(
        default_factory=dict["FeatureId", "ManifestEntry"]
    )

    def record(self, feature_id: FeatureId, *, url: str, votes: int) -> None:
        self.entries[feature_id] = ManifestEntry(url=url, votes=votes)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self.entries

    def get(self, feature_id: FeatureId) -> ManifestEntry | None:
        return self.entries.get(feature_id)

    def as_dict(self) -> dict[FeatureId, dict[str, str | int]]:
        return {
            feature_id: self.entries[feature_id].as_dict() for feature_id in sorted(self.entries)
        }

    def to_json(self) -> str:
        return json.dumps(self.as_dict(), separators=(",", ":"), ensure_ascii=False)


def write_manifest(manifest: Manifest, path: Path | str) -> Path:
    """Write ``manifest`` to ``path``, replacing the file atomically."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(manifest.to_json())
        Path(tmp_name).replace(target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    log.info("Wrote %s manifest entries to %s", len(manifest), target)
    return target
