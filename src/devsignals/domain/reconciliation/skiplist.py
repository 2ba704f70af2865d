"""Features excluded from signal collection because of standards positions.

Features that an engine vendor opposes are very unlikely to ever reach
Baseline, so no developer signals are collected for them.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from devsignals.domain.model import FeatureId
    from devsignals.domain.ports import PositionsByFeature, StandardsPosition

# Mozilla says "negative" while WebKit says "oppose".
DEFAULT_NEGATIVE_POSITIONS = frozenset({"negative", "oppose"})

log = getLogger(__name__)

REASON_SEPARATOR = "; "


class SkipList(Mapping["FeatureId", str]):
    """Feature identity to human-readable skip reason."""

    def __init__(self, reasons: Mapping[FeatureId, str] | None = None) -> None:
        self._reasons: dict[FeatureId, str] = dict(reasons or {})

    def __getitem__(self, feature_id: FeatureId) -> str:
        return self._reasons[feature_id]

    def __iter__(self) -> Iterator[FeatureId]:
        return iter(self._reasons)

    def __len__(self) -> int:
        return len(self._reasons)

    def reason_for(self, feature_id: FeatureId) -> str | None:
        return self._reasons.get(feature_id)


def describe_position(position: StandardsPosition) -> str:
    return f"{position.organization} {position.position} position at {position.url}"


def negative_reason(
    positions: Iterable[StandardsPosition],
    *,
    negative_positions: frozenset[str] = DEFAULT_NEGATIVE_POSITIONS,
) -> str | None:
    """Join every negative position into one reason, or ``None`` if there is none."""

    messages = [
        describe_position(position)
        for position in positions
        if position.position.strip().lower() in negative_positions
    ]
    return REASON_SEPARATOR.join(messages) or None


def resolve_skip_list(
    positions_by_feature: PositionsByFeature,
    *,
    negative_positions: frozenset[str] = DEFAULT_NEGATIVE_POSITIONS,
) -> SkipList:
    reasons: dict[FeatureId, str] = {}
    for feature_id, positions in positions_by_feature.items():
        reason = negative_reason(positions, negative_positions=negative_positions)
        if reason is not None:
            reasons[feature_id] = reason
    log.info(
        "Resolved %s features with negative standards positions out of %s",
        len(reasons),
        len(positions_by_feature),
    )
    return SkipList(reasons)
