"""Public interface for the web-features catalog adapter."""

from __future__ import annotations

from .loader import WebFeaturesLoader, catalog_from_payload
from .schema import FeaturePayload, WebFeaturesDocument
from .translator import CatalogError, parse_feature

__all__ = [
    "CatalogError",
    "FeaturePayload",
    "WebFeaturesDocument",
    "WebFeaturesLoader",
    "catalog_from_payload",
    "parse_feature",
]
