"""Port for the issue tracker holding one issue per feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from devsignals.domain.model import CreatedIssue, IssueDraft, TrackedIssue


@runtime_checkable
class IssueTracker(Protocol):
    """Read and write access to tracking issues.

    ``list_issues`` may fetch pages lazily; callers must drain it before
    making decisions that depend on the full issue set.
    """

    def list_issues(self, label: str) -> Iterable[TrackedIssue]: ...

    def create_issue(self, draft: IssueDraft, *, labels: Sequence[str]) -> CreatedIssue: ...

    def update_issue(self, number: int, draft: IssueDraft) -> None: ...
