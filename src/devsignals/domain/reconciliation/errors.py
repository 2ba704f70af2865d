"""Errors raised by the reconciliation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devsignals.domain.model import FeatureId


class ReconciliationError(RuntimeError):
    """Raised when tracker or catalog state makes a pass unsafe to continue."""


class DuplicateIssueError(ReconciliationError):
    """Raised when two issues resolve to the same feature identity."""

    def __init__(self, feature_id: FeatureId, first_url: str, second_url: str) -> None:
        super().__init__(f"Multiple issues for {feature_id}: {first_url} and {second_url}")
        self.feature_id = feature_id
        self.urls = (first_url, second_url)


class MigrationCycleError(ReconciliationError):
    """Raised when moved features redirect to each other in a loop."""
