"""Reconciliation of web-features against tracking issues.

Flow of one pass:
1) drain the tracker's issue listing into an :class:`IssueIndex`
2) rank every known identity for creation order
3) decide skip, create, update or no-op per identity
4) apply the resulting intents one at a time (or log them in a dry run)
5) collect the manifest of tracked issues
"""

from __future__ import annotations

from .engine import ReconciliationEngine
from .errors import DuplicateIssueError, MigrationCycleError, ReconciliationError
from .index import IssueIndex, build_issue_index, resolve_identity
from .manifest import Manifest, ManifestEntry, write_manifest
from .markers import MarkerCodec
from .plan import (
    CreateDecision,
    CreateIssueIntent,
    FeatureDecision,
    FeatureOutcome,
    IssueIntent,
    ReconciliationResult,
    SkipDecision,
    UnchangedDecision,
    UpdateDecision,
    UpdateIssueIntent,
)
from .policy import decide
from .ranking import rank_features, ranking_key
from .settings import ReconciliationSettings
from .skiplist import SkipList, negative_reason, resolve_skip_list

__all__ = [
    "CreateDecision",
    "CreateIssueIntent",
    "DuplicateIssueError",
    "FeatureDecision",
    "FeatureOutcome",
    "IssueIndex",
    "IssueIntent",
    "Manifest",
    "ManifestEntry",
    "MarkerCodec",
    "MigrationCycleError",
    "ReconciliationEngine",
    "ReconciliationError",
    "ReconciliationResult",
    "ReconciliationSettings",
    "SkipDecision",
    "SkipList",
    "UnchangedDecision",
    "UpdateDecision",
    "UpdateIssueIntent",
    "build_issue_index",
    "decide",
    "negative_reason",
    "rank_features",
    "ranking_key",
    "resolve_identity",
    "resolve_skip_list",
    "write_manifest",
]
