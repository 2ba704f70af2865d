from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from devsignals.domain.reconciliation import Manifest, ManifestEntry, write_manifest

if TYPE_CHECKING:
    from pathlib import Path


def test_json_is_compact_and_sorted_by_identity() -> None:
    manifest = Manifest()
    manifest.record("zoom", url="https://github.com/example/signals/issues/3", votes=1)
    manifest.record("anchor", url="https://github.com/example/signals/issues/9", votes=0)

    assert manifest.to_json() == (
        '{"anchor":{"url":"https://github.com/example/signals/issues/9","votes":0},'
        '"zoom":{"url":"https://github.com/example/signals/issues/3","votes":1}}'
    )


def test_negative_votes_are_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        ManifestEntry(url="https://github.com/example/signals/issues/1", votes=-1)


def test_write_replaces_previous_snapshot(tmp_path: Path) -> None:
    target = tmp_path / "out" / "web-features-signals.json"
    first = Manifest()
    first.record("grid", url="https://github.com/example/signals/issues/1", votes=2)
    write_manifest(first, target)

    second = Manifest()
    second.record("dialog", url="https://github.com/example/signals/issues/5", votes=0)
    written = write_manifest(second, target)

    assert written == target
    assert json.loads(target.read_text(encoding="utf-8")) == {
        "dialog": {"url": "https://github.com/example/signals/issues/5", "votes": 0}
    }
    assert sorted(path.name for path in target.parent.iterdir()) == [target.name]
