"""Public interface for the standards-position adapter."""

from __future__ import annotations

from .client import StandardPositionsFetcher, StandardsPositionsError
from .schema import StandardPositionsDocument

__all__ = [
    "StandardPositionsDocument",
    "StandardPositionsFetcher",
    "StandardsPositionsError",
]
