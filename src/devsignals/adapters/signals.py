"""Loader and validator for the curated ``signals.yml`` file.

The file maps web-features identities to lists of URLs pointing at developer
signals (surveys, bug reports, blog posts). Keys must be catalog identities
and every URL must already be in canonical form.
"""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, cast
from urllib.parse import urlsplit

import yaml

if TYPE_CHECKING:
    from collections.abc import Container

    from devsignals.domain.model import FeatureId

log = getLogger(__name__)

type SignalsDocument = dict[FeatureId, list[str]]


class SignalsValidationError(RuntimeError):
    """Raised when ``signals.yml`` does not match the expected shape."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("Invalid signals file:\n" + "\n".join(f"- {p}" for p in problems))
        self.problems = problems


def load_signals(path: Path | str) -> object:
    with Path(path).open(encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def canonical_url(value: str) -> str | None:
    """Return the WHATWG serialisation of an absolute http(s) URL, or ``None``.

    Scheme and host are lowercased, the default port is dropped, dot segments
    are removed from the path, and an empty query or fragment is kept.
    """

    if value != value.strip() or any(char.isspace() for char in value):
        return None
    parts = urlsplit(value)
    scheme = parts.scheme.lower()
    if scheme not in {"http", "https"} or not parts.hostname:
        return None
    userinfo, at, host = parts.netloc.rpartition("@")
    default_port = {"http": ":80", "https": ":443"}[scheme]
    netloc = f"{userinfo}{at}{host.lower().removesuffix(default_port)}"

    before_fragment, has_fragment, _ = value.partition("#")
    has_query = "?" in before_fragment
    path = remove_dot_segments(parts.path or "/")
    canonical = f"{scheme}://{netloc}{path}"
    if has_query:
        canonical += f"?{parts.query}"
    if has_fragment:
        canonical += f"#{parts.fragment}"
    return canonical


def remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments of an absolute path."""

    segments = path.split("/")[1:]
    resolved: list[str] = []
    for position, segment in enumerate(segments, start=1):
        last = position == len(segments)
        if segment == "..":
            if resolved:
                resolved.pop()
            if last:
                resolved.append("")
        elif segment == ".":
            if last:
                resolved.append("")
        else:
            resolved.append(segment)
    return "/" + "/".join(resolved)


def validate_signals(document: object, *, known_features: Container[str]) -> SignalsDocument:
    """Check ``document`` and return it typed, or raise with every problem found."""

    if not isinstance(document, dict):
        raise SignalsValidationError(["top level must be a mapping of feature ids to URL lists"])

    problems: list[str] = []
    for key, value in cast(dict[object, object], document).items():
        if not isinstance(key, str) or key not in known_features:
            problems.append(f"key {key!r} must be a web-features identifier")
        if not isinstance(value, list):
            problems.append(f"value for {key!r} must be a list, got {type(value).__name__}")
            continue
        for item in cast(list[object], value):
            if not isinstance(item, str):
                problems.append(f"{key!r}: item {item!r} must be a string")
                continue
            canonical = canonical_url(item)
            if canonical is None:
                problems.append(f"{key!r}: {item!r} is not an absolute http(s) URL")
            elif canonical != item:
                problems.append(f"{key!r}: {item!r} is not canonical, expected {canonical!r}")

    if problems:
        raise SignalsValidationError(problems)

    signals = cast(SignalsDocument, document)
    log.info(
        "Validated %s features with %s signal URLs",
        len(signals),
        sum(len(urls) for urls in signals.values()),
    )
    return signals
