"""Tunable constants of a reconciliation pass."""

from __future__ import annotations

from dataclasses import dataclass, field

from .markers import MarkerCodec
from .ranking import DATE_SENTINEL, DATE_SEPARATOR

DEFAULT_TRACKING_LABEL = "feature"


@dataclass(frozen=True, slots=True)
class ReconciliationSettings:
    tracking_label: str = DEFAULT_TRACKING_LABEL
    marker: MarkerCodec = field(default_factory=MarkerCodec)
    date_sentinel: str = DATE_SENTINEL
    date_separator: str = DATE_SEPARATOR
