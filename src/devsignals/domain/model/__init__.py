"""Domain model for feature tracking issues."""

from __future__ import annotations

from .enums import BaselineLevel, FeatureKindTag, ReconcileAction, SkipReason
from .features import (
    Baseline,
    BrowserId,
    BrowserReleases,
    Discouraged,
    FeatureId,
    FeatureKind,
    FeatureRecord,
    MovedKind,
    NormalKind,
    SplitKind,
    normalize_version,
)
from .issues import CreatedIssue, IssueDraft, TrackedIssue

__all__ = [
    "Baseline",
    "BaselineLevel",
    "BrowserId",
    "BrowserReleases",
    "CreatedIssue",
    "Discouraged",
    "FeatureId",
    "FeatureKind",
    "FeatureKindTag",
    "FeatureRecord",
    "IssueDraft",
    "MovedKind",
    "NormalKind",
    "ReconcileAction",
    "SkipReason",
    "SplitKind",
    "TrackedIssue",
    "normalize_version",
]
