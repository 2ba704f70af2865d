"""Decision, intent and outcome types shared by policy and engine.

Decisions are what the policy concludes for one feature. Intents are the
tracker mutations a decision implies. Outcomes are what a pass reports,
identically in live and dry-run mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from devsignals.domain.model import ReconcileAction, SkipReason

if TYPE_CHECKING:
    from devsignals.domain.model import FeatureId, IssueDraft, TrackedIssue

    from .manifest import Manifest


@dataclass(frozen=True, slots=True, kw_only=True)
class SkipDecision:
    """Leave the tracker alone for this feature."""

    feature_id: FeatureId
    reason: SkipReason
    detail: str
    existing: TrackedIssue | None = None
    action: Literal[ReconcileAction.SKIP] = ReconcileAction.SKIP


@dataclass(frozen=True, slots=True, kw_only=True)
class UnchangedDecision:
    """The existing issue already has the desired content."""

    feature_id: FeatureId
    existing: TrackedIssue
    action: Literal[ReconcileAction.NOOP] = ReconcileAction.NOOP


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateDecision:
    feature_id: FeatureId
    existing: TrackedIssue
    draft: IssueDraft
    action: Literal[ReconcileAction.UPDATE] = ReconcileAction.UPDATE


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateDecision:
    feature_id: FeatureId
    draft: IssueDraft
    action: Literal[ReconcileAction.CREATE] = ReconcileAction.CREATE


type FeatureDecision = SkipDecision | UnchangedDecision | UpdateDecision | CreateDecision


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateIssueIntent:
    feature_id: FeatureId
    draft: IssueDraft
    labels: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateIssueIntent:
    """Replace title and body; labels are never touched to keep manual curation."""

    feature_id: FeatureId
    number: int
    draft: IssueDraft


type IssueIntent = CreateIssueIntent | UpdateIssueIntent


@dataclass(frozen=True, slots=True, kw_only=True)
class FeatureOutcome:
    feature_id: FeatureId
    action: ReconcileAction
    reason: SkipReason | None = None
    detail: str | None = None


@dataclass(slots=True)
class ReconciliationResult:
    """Everything one pass decided, in ranked order."""

    manifest: Manifest
    dry_run: bool = False
    outcomes: list[FeatureOutcome] = field(default_factory=list["FeatureOutcome"])
    intents: list[IssueIntent] = field(default_factory=list["IssueIntent"])

    def outcome_for(self, feature_id: FeatureId) -> FeatureOutcome | None:
        for outcome in self.outcomes:
            if outcome.feature_id == feature_id:
                return outcome
        return None

    def classification(self) -> dict[FeatureId, ReconcileAction]:
        return {outcome.feature_id: outcome.action for outcome in self.outcomes}

    def count(self, action: ReconcileAction) -> int:
        return sum(1 for outcome in self.outcomes if outcome.action is action)
