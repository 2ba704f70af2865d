"""Port for turning feature metadata into issue content."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from devsignals.domain.model import FeatureRecord, IssueDraft


@runtime_checkable
class IssueRenderer(Protocol):
    """Render the desired title and body for ``feature``.

    Rendering must be deterministic and the body must carry the identity
    marker, otherwise the next run cannot find the issue again.
    """

    def __call__(self, feature: FeatureRecord) -> IssueDraft: ...
