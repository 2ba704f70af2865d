"""Port for standards-position data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from devsignals.domain.model import FeatureId


@dataclass(frozen=True, slots=True)
class StandardsPosition:
    organization: str
    position: str
    url: str


type PositionsByFeature = Mapping[FeatureId, Sequence[StandardsPosition]]


@runtime_checkable
class StandardsPositionSource(Protocol):
    """Fetch the per-organization standards positions for every feature."""

    def __call__(self) -> PositionsByFeature: ...
