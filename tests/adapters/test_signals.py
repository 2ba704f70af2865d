from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from devsignals.adapters.signals import (
    SignalsValidationError,
    canonical_url,
    load_signals,
    validate_signals,
)

if TYPE_CHECKING:
    from pathlib import Path

KNOWN = {"grid", "popover", "anchor-positioning"}


def test_valid_document_is_returned(tmp_path: Path) -> None:
    path = tmp_path / "signals.yml"
    path.write_text(
        "anchor-positioning:\n"
        "  - https://2024.stateofcss.com/en-US/features/\n"
        "popover: []\n",
        encoding="utf-8",
    )

    signals = validate_signals(load_signals(path), known_features=KNOWN)

    assert signals == {
        "anchor-positioning": ["https://2024.stateofcss.com/en-US/features/"],
        "popover": [],
    }


def test_every_problem_is_reported() -> None:
    document = {
        "unknown-feature": ["https://example.test/"],
        "grid": "https://example.test/",
        "popover": ["HTTPS://Example.test/path", "ftp://example.test/file", 3],
    }

    with pytest.raises(SignalsValidationError) as excinfo:
        validate_signals(document, known_features=KNOWN)

    problems = excinfo.value.problems
    assert len(problems) == 5
    assert any("'unknown-feature'" in problem for problem in problems)
    assert any("must be a list" in problem for problem in problems)
    assert any("expected 'https://example.test/path'" in problem for problem in problems)
    assert any("ftp://" in problem for problem in problems)
    assert any("must be a string" in problem for problem in problems)


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(SignalsValidationError, match="top level"):
        validate_signals(["https://example.test/"], known_features=KNOWN)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://example.test/a?b=c", "https://example.test/a?b=c"),
        ("https://Example.TEST", "https://example.test/"),
        ("http://example.test:80/x", "http://example.test/x"),
        ("not a url", None),
        ("/relative/path", None),
        ("https://example.com/a/../b", "https://example.com/b"),
        ("https://example.com/./x", "https://example.com/x"),
        ("https://example.com/a/..", "https://example.com/"),
        ("https://example.com/#", "https://example.com/#"),
        ("https://example.com/?", "https://example.com/?"),
        ("https://user@Example.COM/", "https://user@example.com/"),
    ],
)
def test_canonical_url(value: str, expected: str | None) -> None:
    assert canonical_url(value) == expected


def test_dot_segments_are_rejected_and_empty_fragment_is_kept() -> None:
    document = {"grid": ["https://example.com/#", "https://example.com/a/../b"]}

    with pytest.raises(SignalsValidationError) as excinfo:
        validate_signals(document, known_features=KNOWN)

    assert excinfo.value.problems == [
        "'grid': 'https://example.com/a/../b' is not canonical, "
        "expected 'https://example.com/b'"
    ]
