"""Fetch the standards-position feed used to build the skip list."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from devsignals.adapters.http_resilience import ResilientClient
from devsignals.config.positions import StandardPositionsConfig, get_standard_positions_config
from devsignals.domain.ports.positions import StandardsPosition, StandardsPositionSource

from .schema import StandardPositionsDocument

if TYPE_CHECKING:
    from collections.abc import Callable

    from devsignals.config.http_resilience import ResilienceConfig
    from devsignals.domain.model import FeatureId

log = getLogger(__name__)


class StandardsPositionsError(RuntimeError):
    """Raised when the standards-position feed has an unexpected shape."""


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class StandardPositionsFetcher:
    """Fetch the feed; any network or shape failure aborts the run."""

    config: StandardPositionsConfig = field(default_factory=get_standard_positions_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> dict[FeatureId, list[StandardsPosition]]:
        document = asyncio.run(self._fetch_async())
        positions = {
            feature_id: [
                StandardsPosition(
                    organization=entry.organization,
                    position=entry.position,
                    url=entry.url,
                )
                for entry in entries.root
            ]
            for feature_id, entries in document.root.items()
        }
        log.info("Fetched standards positions for %s features", len(positions))
        return positions

    async def _fetch_async(self) -> StandardPositionsDocument:
        async with self.client_factory(self.config.resilience) as client:
            response = await client.get(self.config.url)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise StandardsPositionsError("Standards-position feed must be a JSON object")
        try:
            return StandardPositionsDocument.model_validate(payload)
        except ValidationError as exc:
            raise StandardsPositionsError(f"Malformed standards-position feed: {exc}") from exc


if TYPE_CHECKING:
    _source_check: StandardsPositionSource = StandardPositionsFetcher()
