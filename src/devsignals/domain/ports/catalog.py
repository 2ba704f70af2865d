"""Port for the web-features catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from devsignals.domain.model import BrowserId, BrowserReleases, FeatureId, FeatureRecord


@dataclass(frozen=True, slots=True)
class FeatureCatalog:
    """Fully materialized feature dataset for one run."""

    features: Mapping[FeatureId, FeatureRecord]
    browsers: Mapping[BrowserId, BrowserReleases] = field(
        default_factory=dict["BrowserId", "BrowserReleases"]
    )

    def get(self, feature_id: FeatureId) -> FeatureRecord | None:
        return self.features.get(feature_id)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self.features

    def __len__(self) -> int:
        return len(self.features)

    def release_date(self, browser: BrowserId, version: str) -> str | None:
        releases = self.browsers.get(browser)
        if releases is None:
            return None
        return releases.release_date(version)


@runtime_checkable
class CatalogLoader(Protocol):
    def __call__(self) -> FeatureCatalog: ...
