"""Lookup from feature identity to the issue tracking it.

The index is rebuilt from live tracker state on every run. Issues filed under
an identity that has since moved are indexed under the move target, so a
renamed feature keeps its existing issue instead of getting a duplicate.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from devsignals.domain.model import MovedKind

from .errors import DuplicateIssueError, MigrationCycleError
from .markers import MarkerCodec

if TYPE_CHECKING:
    from collections.abc import Iterable

    from devsignals.domain.model import FeatureId, TrackedIssue
    from devsignals.domain.ports import FeatureCatalog

log = getLogger(__name__)


class IssueIndex(Mapping["FeatureId", "TrackedIssue"]):
    """Read-only, one-to-one mapping of feature identity to tracked issue."""

    def __init__(self, issues: Mapping[FeatureId, TrackedIssue] | None = None) -> None:
        self._issues: dict[FeatureId, TrackedIssue] = dict(issues or {})

    def __getitem__(self, feature_id: FeatureId) -> TrackedIssue:
        return self._issues[feature_id]

    def __iter__(self) -> Iterator[FeatureId]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __repr__(self) -> str:
        return f"IssueIndex({len(self._issues)} issues)"


def resolve_identity(feature_id: FeatureId, catalog: FeatureCatalog) -> FeatureId:
    """Follow ``moved`` redirects until reaching a non-moved identity."""

    seen: list[FeatureId] = [feature_id]
    current = feature_id
    while True:
        record = catalog.get(current)
        if record is None or not isinstance(record.kind, MovedKind):
            return current
        current = record.kind.target
        if current in seen:
            chain = " -> ".join([*seen, current])
            raise MigrationCycleError(f"Moved features form a cycle: {chain}")
        seen.append(current)


def build_issue_index(
    issues: Iterable[TrackedIssue],
    *,
    catalog: FeatureCatalog,
    marker: MarkerCodec | None = None,
) -> IssueIndex:
    """Drain ``issues`` and index them by (migrated) feature identity.

    Raises :class:`DuplicateIssueError` when two issues end up with the same
    identity; the tracker is then in a state this engine must not touch.
    """

    codec = marker or MarkerCodec()
    indexed: dict[FeatureId, TrackedIssue] = {}
    scanned = 0
    for issue in issues:
        scanned += 1
        embedded = codec.identity_of(issue)
        if embedded is None:
            log.debug("Issue #%s has no feature marker; ignoring", issue.number)
            continue

        feature_id = resolve_identity(embedded, catalog)
        if feature_id != embedded:
            log.info(
                "Issue #%s was filed for %s, which moved to %s",
                issue.number,
                embedded,
                feature_id,
            )

        existing = indexed.get(feature_id)
        if existing is not None:
            raise DuplicateIssueError(feature_id, existing.url, issue.url)
        indexed[feature_id] = issue

    log.info("Indexed %s of %s scanned issues", len(indexed), scanned)
    return IssueIndex(indexed)
