"""Feature catalog records.

A :class:`FeatureRecord` is an immutable snapshot of one web-features entry for
the duration of a reconciliation run. The lifecycle ``kind`` is a closed tagged
union so callers can dispatch on it once with ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .enums import BaselineLevel, FeatureKindTag

type FeatureId = str
type BrowserId = str


@dataclass(frozen=True, slots=True)
class NormalKind:
    tag: Literal[FeatureKindTag.NORMAL] = FeatureKindTag.NORMAL


@dataclass(frozen=True, slots=True)
class MovedKind:
    """The feature was renamed; ``target`` is its new identity."""

    target: FeatureId
    tag: Literal[FeatureKindTag.MOVED] = FeatureKindTag.MOVED


@dataclass(frozen=True, slots=True)
class SplitKind:
    """The feature was split into several features.

    Issues for split features are left alone until a migration path exists.
    """

    targets: tuple[FeatureId, ...]
    tag: Literal[FeatureKindTag.SPLIT] = FeatureKindTag.SPLIT


type FeatureKind = NormalKind | MovedKind | SplitKind


@dataclass(frozen=True, slots=True)
class Discouraged:
    according_to: tuple[str, ...]
    alternatives: tuple[FeatureId, ...] = ()

    @property
    def source(self) -> str:
        return self.according_to[0] if self.according_to else "unknown source"


@dataclass(frozen=True, slots=True)
class Baseline:
    level: BaselineLevel = BaselineLevel.NONE
    low_date: str | None = None
    high_date: str | None = None

    @property
    def widely_available(self) -> bool:
        return self.level is BaselineLevel.HIGH


@dataclass(frozen=True, slots=True)
class FeatureRecord:
    """One web-platform feature as described by the catalog."""

    id: FeatureId
    name: str = ""
    description: str = ""
    description_html: str = ""
    kind: FeatureKind = field(default_factory=NormalKind)
    discouraged: Discouraged | None = None
    baseline: Baseline = field(default_factory=Baseline)
    # browser id -> first supporting version, possibly prefixed with "≤"
    support: dict[BrowserId, str] = field(default_factory=dict[BrowserId, str])
    spec_urls: tuple[str, ...] = ()
    caniuse: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BrowserReleases:
    """Release history for one browser engine."""

    id: BrowserId
    name: str
    # version -> ISO release date
    releases: dict[str, str] = field(default_factory=dict[str, str])

    def release_date(self, version: str) -> str | None:
        return self.releases.get(normalize_version(version))


def normalize_version(version: str) -> str:
    """Strip the ranged-version marker used for uncertain early versions."""

    return version.strip().removeprefix("≤")
