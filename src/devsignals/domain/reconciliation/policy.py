"""Per-feature decision policy.

The checks run in a fixed order and the first match wins:

1. identity not in the catalog
2. lifecycle kind (moved and split features are left alone)
3. negative standards position
4. discouraged by the catalog
5. Baseline widely available with no existing issue
6. otherwise create, update or keep the issue

The policy is pure: it never talks to the tracker, so live runs and dry runs
share it unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from devsignals.domain.model import MovedKind, NormalKind, SkipReason, SplitKind

from .plan import CreateDecision, SkipDecision, UnchangedDecision, UpdateDecision

if TYPE_CHECKING:
    from collections.abc import Mapping

    from devsignals.domain.model import FeatureId, TrackedIssue
    from devsignals.domain.ports import FeatureCatalog, IssueRenderer

    from .plan import FeatureDecision


def decide(
    feature_id: FeatureId,
    *,
    catalog: FeatureCatalog,
    issues: Mapping[FeatureId, TrackedIssue],
    skip_list: Mapping[FeatureId, str],
    render: IssueRenderer,
) -> FeatureDecision:
    existing = issues.get(feature_id)

    record = catalog.get(feature_id)
    if record is None:
        return SkipDecision(
            feature_id=feature_id,
            reason=SkipReason.NOT_IN_CATALOG,
            detail="not in web-features",
            existing=existing,
        )

    match record.kind:
        case MovedKind(target=target):
            return SkipDecision(
                feature_id=feature_id,
                reason=SkipReason.MOVED,
                detail=f"moved to {target}",
                existing=existing,
            )
        case SplitKind(targets=targets):
            return SkipDecision(
                feature_id=feature_id,
                reason=SkipReason.SPLIT,
                detail=f"split into {', '.join(targets)}; migration not supported yet",
                existing=existing,
            )
        case NormalKind():
            pass

    skip_reason = skip_list.get(feature_id)
    if skip_reason:
        return SkipDecision(
            feature_id=feature_id,
            reason=SkipReason.NEGATIVE_POSITION,
            detail=skip_reason,
            existing=existing,
        )

    if record.discouraged is not None:
        return SkipDecision(
            feature_id=feature_id,
            reason=SkipReason.DISCOURAGED,
            detail=f"Discouraged according to {record.discouraged.source}",
            existing=existing,
        )

    if record.baseline.widely_available and existing is None:
        return SkipDecision(
            feature_id=feature_id,
            reason=SkipReason.BASELINE,
            detail=f"Baseline widely available since {record.baseline.high_date or 'unknown'}",
        )

    draft = render(record)
    if existing is None:
        return CreateDecision(feature_id=feature_id, draft=draft)
    if draft.matches(existing):
        return UnchangedDecision(feature_id=feature_id, existing=existing)
    return UpdateDecision(feature_id=feature_id, existing=existing, draft=draft)
