from __future__ import annotations

import pytest

from devsignals.domain.model import BaselineLevel, MovedKind, ReconcileAction, SkipReason
from devsignals.domain.ports import FeatureCatalog
from devsignals.domain.reconciliation import (
    CreateIssueIntent,
    DuplicateIssueError,
    ReconciliationEngine,
    ReconciliationSettings,
    SkipList,
    UpdateIssueIntent,
)
from tests.helpers.features import make_catalog, make_feature, render_plain
from tests.helpers.tracker import FakeIssueTracker, make_issue


def _scenario() -> tuple[FakeIssueTracker, FeatureCatalog]:
    catalog = make_catalog(
        [
            make_feature("f", baseline=BaselineLevel.HIGH),
            make_feature("g", name="G feature"),
            make_feature("h", support={"chrome": "80"}),
        ]
    )
    tracker = FakeIssueTracker(issues=[make_issue(1, "g", title="G (stale)", votes=12)])
    return tracker, catalog


def test_baseline_update_and_create_scenario() -> None:
    tracker, catalog = _scenario()
    engine = ReconciliationEngine(tracker=tracker, render=render_plain)

    result = engine.reconcile(catalog, SkipList())

    assert result.classification() == {
        "f": ReconcileAction.SKIP,
        "g": ReconcileAction.UPDATE,
        "h": ReconcileAction.CREATE,
    }
    assert result.manifest.as_dict() == {
        "g": {"url": "https://github.com/example/signals/issues/1", "votes": 12},
        "h": {"url": "https://github.com/example/signals/issues/2", "votes": 0},
    }
    assert [number for number, _ in tracker.updated] == [1]
    assert tracker.updated[0][1].title == "G feature"
    assert [(draft.title, labels) for draft, labels in tracker.created] == [("H", ("feature",))]
    assert result.outcome_for("f").reason is SkipReason.BASELINE


def test_second_pass_is_idempotent() -> None:
    tracker, catalog = _scenario()
    engine = ReconciliationEngine(tracker=tracker, render=render_plain)
    engine.reconcile(catalog, SkipList())
    mutations = tracker.mutations

    second = engine.reconcile(catalog, SkipList())

    assert tracker.mutations == mutations
    assert second.intents == []
    assert second.classification() == {
        "f": ReconcileAction.SKIP,
        "g": ReconcileAction.NOOP,
        "h": ReconcileAction.NOOP,
    }


def test_dry_run_classifies_identically_without_mutations() -> None:
    live_tracker, catalog = _scenario()
    dry_tracker, _ = _scenario()

    live = ReconciliationEngine(tracker=live_tracker, render=render_plain).reconcile(
        catalog, SkipList()
    )
    dry = ReconciliationEngine(tracker=dry_tracker, render=render_plain, dry_run=True).reconcile(
        catalog, SkipList()
    )

    assert dry.classification() == live.classification()
    assert dry_tracker.mutations == 0
    assert dry.dry_run is True
    assert [type(intent) for intent in dry.intents] == [CreateIssueIntent, UpdateIssueIntent]
    # Only issues that already existed are part of a dry-run manifest.
    assert list(dry.manifest.as_dict()) == ["g"]


def test_creation_follows_ranking_order() -> None:
    catalog = make_catalog(
        [
            make_feature("unshipped"),
            make_feature("recent", support={"chrome": "100"}),
            make_feature("oldest", support={"safari": "13", "firefox": "70"}),
        ]
    )
    tracker = FakeIssueTracker()

    ReconciliationEngine(tracker=tracker, render=render_plain).reconcile(catalog, SkipList())

    assert [draft.title for draft, _ in tracker.created] == ["Oldest", "Recent", "Unshipped"]


def test_skip_list_and_orphaned_issues_are_left_alone(caplog: pytest.LogCaptureFixture) -> None:
    catalog = make_catalog([make_feature("web-bluetooth"), make_feature("grid")])
    tracker = FakeIssueTracker(
        issues=[make_issue(1, "web-bluetooth"), make_issue(2, "removed-feature")]
    )
    skip_list = SkipList({"web-bluetooth": "mozilla negative position at https://example.test/1"})

    result = ReconciliationEngine(tracker=tracker, render=render_plain).reconcile(
        catalog, skip_list
    )

    assert result.outcome_for("web-bluetooth").reason is SkipReason.NEGATIVE_POSITION
    assert result.outcome_for("removed-feature").reason is SkipReason.NOT_IN_CATALOG
    assert tracker.updated == []
    assert [draft.title for draft, _ in tracker.created] == ["Grid"]
    assert "removed-feature" not in result.manifest
    assert "Skipping removed-feature" in caplog.text


def test_moved_feature_reuses_existing_issue() -> None:
    catalog = make_catalog(
        [make_feature("old-name", kind=MovedKind(target="new-name")), make_feature("new-name")]
    )
    tracker = FakeIssueTracker(issues=[make_issue(3, "old-name", votes=4)])

    result = ReconciliationEngine(tracker=tracker, render=render_plain).reconcile(
        catalog, SkipList()
    )

    assert tracker.created == []
    assert [number for number, _ in tracker.updated] == [3]
    assert "<!-- web-features:new-name -->" in tracker.updated[0][1].body
    assert result.manifest.get("new-name").votes == 4
    assert result.outcome_for("old-name").reason is SkipReason.MOVED


def test_duplicate_issues_abort_before_any_mutation() -> None:
    catalog = make_catalog([make_feature("grid"), make_feature("dialog")])
    tracker = FakeIssueTracker(issues=[make_issue(1, "grid"), make_issue(2, "grid")])

    with pytest.raises(DuplicateIssueError):
        ReconciliationEngine(tracker=tracker, render=render_plain).reconcile(catalog, SkipList())

    assert tracker.mutations == 0


def test_custom_tracking_label_is_used_for_listing_and_creation() -> None:
    catalog = make_catalog([make_feature("grid")])
    tracker = FakeIssueTracker()
    engine = ReconciliationEngine(
        tracker=tracker,
        render=render_plain,
        settings=ReconciliationSettings(tracking_label="signal"),
    )

    engine.reconcile(catalog, SkipList())

    assert tracker.listed_labels == ["signal"]
    assert tracker.created[0][1] == ("signal",)
