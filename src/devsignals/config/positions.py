"""Standards-position feed configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from devsignals.domain.reconciliation.skiplist import DEFAULT_NEGATIVE_POSITIONS

from .env import env_or_default
from .http_resilience import ResilienceConfig

DEFAULT_STANDARD_POSITIONS_URL = (
    "https://raw.githubusercontent.com/web-platform-dx/web-features-explorer/"
    "refs/heads/main/additional-data/standard-positions.json"
)


@dataclass(frozen=True, slots=True)
class StandardPositionsConfig:
    url: str
    resilience: ResilienceConfig
    negative_positions: frozenset[str] = field(default=DEFAULT_NEGATIVE_POSITIONS)


def get_standard_positions_config(
    *,
    resilience: ResilienceConfig | None = None,
) -> StandardPositionsConfig:
    # The skip list must reflect the live feed, so no cache is configured.
    return StandardPositionsConfig(
        url=env_or_default("STANDARD_POSITIONS_URL", DEFAULT_STANDARD_POSITIONS_URL),
        resilience=resilience or ResilienceConfig(name="standard-positions", cache=None),
    )
