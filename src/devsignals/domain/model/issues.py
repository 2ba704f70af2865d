"""Tracker-side records the reconciliation engine reads and proposes."""

from __future__ import annotations

from dataclasses import dataclass

from .features import FeatureId  # noqa: TC001


@dataclass(frozen=True, slots=True)
class TrackedIssue:
    """An issue as reported by the tracker.

    ``feature_id`` is set when the tracker stores the identity as structured
    metadata; otherwise the identity is parsed from the marker in ``body``.
    """

    number: int
    title: str
    body: str
    url: str
    votes: int = 0
    feature_id: FeatureId | None = None


@dataclass(frozen=True, slots=True)
class IssueDraft:
    """Desired title and body for the issue tracking one feature."""

    title: str
    body: str

    def matches(self, issue: TrackedIssue) -> bool:
        return issue.title == self.title and issue.body == self.body


@dataclass(frozen=True, slots=True)
class CreatedIssue:
    number: int
    url: str
