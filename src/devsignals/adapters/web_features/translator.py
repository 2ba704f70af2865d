"""Translate web-features payloads into domain records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from devsignals.domain.model import (
    Baseline,
    BaselineLevel,
    BrowserReleases,
    Discouraged,
    FeatureKindTag,
    FeatureRecord,
    MovedKind,
    NormalKind,
    SplitKind,
)

if TYPE_CHECKING:
    from devsignals.domain.model import FeatureId, FeatureKind

    from .schema import BrowserPayload, FeaturePayload, StatusPayload

log = getLogger(__name__)


class CatalogError(RuntimeError):
    """Raised when the feature dataset is malformed."""


def parse_browser(browser_id: str, payload: BrowserPayload) -> BrowserReleases:
    return BrowserReleases(
        id=browser_id,
        name=payload.name,
        releases={release.version: release.date for release in payload.releases},
    )


def parse_feature(feature_id: FeatureId, payload: FeaturePayload) -> FeatureRecord | None:
    """Build a record, or return ``None`` for kinds this tool does not know."""

    kind = _parse_kind(feature_id, payload)
    if kind is None:
        return None
    discouraged = (
        Discouraged(
            according_to=tuple(payload.discouraged.according_to),
            alternatives=tuple(payload.discouraged.alternatives),
        )
        if payload.discouraged is not None
        else None
    )
    return FeatureRecord(
        id=feature_id,
        name=payload.name or feature_id,
        description=payload.description,
        description_html=payload.description_html,
        kind=kind,
        discouraged=discouraged,
        baseline=_parse_baseline(payload.status),
        support=dict(payload.status.support) if payload.status else {},
        spec_urls=tuple(payload.spec),
        caniuse=tuple(payload.caniuse),
    )


def _parse_kind(feature_id: FeatureId, payload: FeaturePayload) -> FeatureKind | None:
    try:
        tag = FeatureKindTag(payload.kind)
    except ValueError:
        log.warning("Ignoring %s: unknown feature kind %r", feature_id, payload.kind)
        return None

    match tag:
        case FeatureKindTag.NORMAL:
            return NormalKind()
        case FeatureKindTag.MOVED:
            if not payload.redirect_target:
                raise CatalogError(f"Moved feature {feature_id} has no redirect_target")
            return MovedKind(target=payload.redirect_target)
        case FeatureKindTag.SPLIT:
            if not payload.redirect_targets:
                raise CatalogError(f"Split feature {feature_id} has no redirect_targets")
            return SplitKind(targets=tuple(payload.redirect_targets))


def _parse_baseline(status: StatusPayload | None) -> Baseline:
    if status is None or status.baseline is False:
        return Baseline()
    return Baseline(
        level=BaselineLevel(status.baseline),
        low_date=status.baseline_low_date,
        high_date=status.baseline_high_date,
    )
