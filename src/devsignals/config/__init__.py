"""Application configuration helpers."""

from __future__ import annotations

from .env import env_or_default, require_env_var, require_env_vars, split_repository
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .github import GitHubConfig, get_github_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .positions import StandardPositionsConfig, get_standard_positions_config
from .storage import StorageConfig, get_http_cache_path, get_storage_config
from .web_features import WebFeaturesConfig, get_web_features_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "GitHubConfig",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StandardPositionsConfig",
    "StorageConfig",
    "WebFeaturesConfig",
    "configure_logging",
    "env_or_default",
    "get_github_config",
    "get_http_cache_path",
    "get_standard_positions_config",
    "get_storage_config",
    "get_web_features_config",
    "require_env_var",
    "require_env_vars",
    "split_repository",
]
