"""Load the web-features dataset from a local file or a URL."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from devsignals.adapters.http_resilience import ResilientClient
from devsignals.config.web_features import WebFeaturesConfig, get_web_features_config
from devsignals.domain.ports.catalog import CatalogLoader, FeatureCatalog

from .schema import WebFeaturesDocument
from .translator import CatalogError, parse_browser, parse_feature

if TYPE_CHECKING:
    from collections.abc import Callable

    from devsignals.config.http_resilience import ResilienceConfig
    from devsignals.domain.model import FeatureId, FeatureRecord

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _is_feature_document(payload: object) -> bool:
    return isinstance(payload, dict) and "features" in payload


def catalog_from_payload(payload: object) -> FeatureCatalog:
    """Validate a decoded ``data.json`` document and build the catalog."""

    if not _is_feature_document(payload):
        raise CatalogError("web-features document must be an object with a 'features' key")
    try:
        document = WebFeaturesDocument.model_validate(payload)
    except ValidationError as exc:
        raise CatalogError(f"Malformed web-features document: {exc}") from exc

    features: dict[FeatureId, FeatureRecord] = {}
    for feature_id, feature_payload in document.features.items():
        record = parse_feature(feature_id, feature_payload)
        if record is not None:
            features[feature_id] = record
    browsers = {
        browser_id: parse_browser(browser_id, browser_payload)
        for browser_id, browser_payload in document.browsers.items()
    }
    return FeatureCatalog(features=features, browsers=browsers)


def _default_config() -> WebFeaturesConfig:
    return get_web_features_config(cache_predicate=_is_feature_document)


@dataclass(slots=True)
class WebFeaturesLoader:
    config: WebFeaturesConfig = field(default_factory=_default_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> FeatureCatalog:
        if self.config.is_remote:
            payload = asyncio.run(self._fetch_async())
        else:
            payload = self._read_file(Path(self.config.source))
        catalog = catalog_from_payload(payload)
        log.info(
            "Loaded %s features and %s browsers from %s",
            len(catalog),
            len(catalog.browsers),
            self.config.source,
        )
        return catalog

    async def _fetch_async(self) -> object:
        async with self.client_factory(self.config.resilience) as client:
            response = await client.get(self.config.source)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _read_file(path: Path) -> object:
        try:
            with path.open(encoding="utf-8") as handle:
                return json.load(handle)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"{path} is not valid JSON: {exc}") from exc


if TYPE_CHECKING:
    _loader_check: CatalogLoader = WebFeaturesLoader()
