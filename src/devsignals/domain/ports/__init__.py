"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import CatalogLoader, FeatureCatalog
from .positions import PositionsByFeature, StandardsPosition, StandardsPositionSource
from .rendering import IssueRenderer
from .tracker import IssueTracker

__all__ = [
    "CatalogLoader",
    "FeatureCatalog",
    "IssueRenderer",
    "IssueTracker",
    "PositionsByFeature",
    "StandardsPosition",
    "StandardsPositionSource",
]
