"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class BaselineLevel(StrEnum):
    """Baseline maturity of a feature across the core browser set."""

    NONE = "none"
    LOW = "low"  # newly available
    HIGH = "high"  # widely available


class FeatureKindTag(StrEnum):
    NORMAL = "feature"
    MOVED = "moved"
    SPLIT = "split"


class ReconcileAction(StrEnum):
    """Classification of one feature during a reconciliation pass."""

    SKIP = "skip"
    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"


class SkipReason(StrEnum):
    NOT_IN_CATALOG = "not_in_catalog"
    MOVED = "moved"
    SPLIT = "split"
    NEGATIVE_POSITION = "negative_position"
    DISCOURAGED = "discouraged"
    BASELINE = "baseline"
