"""Orchestrator for one reconciliation pass.

The engine drains the tracker's issue listing into an index, ranks every
known identity, asks the policy for a decision per identity and turns the
decision into at most one tracker mutation before moving on. Dry runs go
through exactly the same steps and only replace the mutation with a log line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from devsignals.domain.model import ReconcileAction, SkipReason

from .index import build_issue_index
from .manifest import Manifest
from .plan import (
    CreateDecision,
    CreateIssueIntent,
    FeatureOutcome,
    ReconciliationResult,
    SkipDecision,
    UnchangedDecision,
    UpdateDecision,
    UpdateIssueIntent,
)
from .policy import decide
from .ranking import rank_features
from .settings import ReconciliationSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from devsignals.domain.model import FeatureId
    from devsignals.domain.ports import FeatureCatalog, IssueRenderer, IssueTracker

    from .plan import FeatureDecision

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    """Keep exactly one up-to-date issue per eligible feature."""

    tracker: IssueTracker
    render: IssueRenderer
    settings: ReconciliationSettings = field(default_factory=ReconciliationSettings)
    dry_run: bool = False

    def reconcile(
        self,
        catalog: FeatureCatalog,
        skip_list: Mapping[FeatureId, str],
    ) -> ReconciliationResult:
        """Run a full pass and return decisions, intents and the manifest."""

        index = build_issue_index(
            self.tracker.list_issues(self.settings.tracking_label),
            catalog=catalog,
            marker=self.settings.marker,
        )
        ordered = rank_features(
            [*catalog.features, *index],
            catalog,
            sentinel=self.settings.date_sentinel,
            separator=self.settings.date_separator,
        )
        log.info(
            "Reconciling %s features against %s issues%s",
            len(ordered),
            len(index),
            " (dry run)" if self.dry_run else "",
        )

        result = ReconciliationResult(manifest=Manifest(), dry_run=self.dry_run)
        for feature_id in ordered:
            decision = decide(
                feature_id,
                catalog=catalog,
                issues=index,
                skip_list=skip_list,
                render=self.render,
            )
            self._handle(decision, result)

        log.info(
            "Pass finished: created=%s, updated=%s, unchanged=%s, skipped=%s",
            result.count(ReconcileAction.CREATE),
            result.count(ReconcileAction.UPDATE),
            result.count(ReconcileAction.NOOP),
            result.count(ReconcileAction.SKIP),
        )
        return result

    def _handle(self, decision: FeatureDecision, result: ReconciliationResult) -> None:
        feature_id = decision.feature_id
        match decision:
            case SkipDecision(reason=reason, detail=detail):
                if reason is SkipReason.NOT_IN_CATALOG:
                    log.warning("Skipping %s. Reason: %s", feature_id, detail)
                else:
                    log.info("Skipping %s. Reason: %s", feature_id, detail)
                result.outcomes.append(
                    FeatureOutcome(
                        feature_id=feature_id,
                        action=decision.action,
                        reason=reason,
                        detail=detail,
                    )
                )
                return

            case UnchangedDecision(existing=existing):
                log.info("Issue for %s is up-to-date.", feature_id)
                result.manifest.record(feature_id, url=existing.url, votes=existing.votes)

            case UpdateDecision(existing=existing, draft=draft):
                intent = UpdateIssueIntent(
                    feature_id=feature_id,
                    number=existing.number,
                    draft=draft,
                )
                result.intents.append(intent)
                if self.dry_run:
                    log.info("Dry run. Would update issue for %s.", feature_id)
                else:
                    log.info("Updating issue for %s.", feature_id)
                    self.tracker.update_issue(intent.number, intent.draft)
                result.manifest.record(feature_id, url=existing.url, votes=existing.votes)

            case CreateDecision(draft=draft):
                intent = CreateIssueIntent(
                    feature_id=feature_id,
                    draft=draft,
                    labels=(self.settings.tracking_label,),
                )
                result.intents.append(intent)
                if self.dry_run:
                    log.info("Dry run. Would create new issue for %s.", feature_id)
                else:
                    log.info("Creating new issue for %s.", feature_id)
                    created = self.tracker.create_issue(intent.draft, labels=intent.labels)
                    result.manifest.record(feature_id, url=created.url, votes=0)

        result.outcomes.append(FeatureOutcome(feature_id=feature_id, action=decision.action))
