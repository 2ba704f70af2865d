"""web-features dataset configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default
from .http_resilience import CacheConfig, ResilienceConfig, ShouldCacheHook

DEFAULT_WEB_FEATURES_DATA = "https://unpkg.com/web-features/data.json"


@dataclass(frozen=True, slots=True)
class WebFeaturesConfig:
    """Where to load the web-features ``data.json`` document from.

    ``source`` is either a local path or an http(s) URL.
    """

    source: str
    resilience: ResilienceConfig

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))


def get_web_features_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> WebFeaturesConfig:
    return WebFeaturesConfig(
        source=env_or_default("WEB_FEATURES_DATA", DEFAULT_WEB_FEATURES_DATA),
        resilience=resilience
        or ResilienceConfig(
            name="web-features",
            timeout_seconds=60.0,
            follow_redirects=True,
            cache=CacheConfig(should_cache=cache_predicate),
        ),
    )
