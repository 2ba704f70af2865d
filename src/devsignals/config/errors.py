"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base class for configuration problems."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration value is present but malformed."""
