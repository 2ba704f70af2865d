"""Identity markers embedded in issue bodies.

Issues carry their feature identity as an HTML comment such as
``<!-- web-features:some-feature -->``. Whitespace is tolerated wherever
possible so that manual edits to the body do not break matching.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devsignals.domain.model import FeatureId, TrackedIssue

log = getLogger(__name__)

DEFAULT_MARKER_NAMESPACE = "web-features"
FEATURE_ID_PATTERN = r"[a-z0-9-]+"


def _compile(namespace: str) -> re.Pattern[str]:
    return re.compile(rf"<!--\s*{re.escape(namespace)}\s*:\s*({FEATURE_ID_PATTERN})\s*-->")


@dataclass(frozen=True, slots=True)
class MarkerCodec:
    namespace: str = DEFAULT_MARKER_NAMESPACE
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", _compile(self.namespace))

    def render(self, feature_id: FeatureId) -> str:
        if not re.fullmatch(FEATURE_ID_PATTERN, feature_id):
            raise ValueError(f"Invalid feature identity for marker: {feature_id!r}")
        return f"<!-- {self.namespace}:{feature_id} -->"

    def extract(self, body: str | None) -> FeatureId | None:
        if not body:
            return None
        found = self.pattern.findall(body)
        if not found:
            return None
        if len(set(found)) > 1:
            log.warning("Body carries several markers %s; using %s", sorted(set(found)), found[0])
        return found[0]

    def identity_of(self, issue: TrackedIssue) -> FeatureId | None:
        """Prefer structured tracker metadata, falling back to the body marker."""

        if issue.feature_id:
            return issue.feature_id
        return self.extract(issue.body)
