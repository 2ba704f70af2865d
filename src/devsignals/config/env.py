"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    missing = [name for name in names if not (os.getenv(name) or "").strip()]
    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")
    return {name: os.environ[name].strip() for name in names}


def require_env_var(name: str) -> str:
    """Return a required environment variable by name."""

    return require_env_vars([name])[name]


def env_or_default(name: str, default: str) -> str:
    """Return an optional environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def split_repository(value: str) -> tuple[str, str]:
    """Split an ``owner/name`` repository slug."""

    owner, sep, name = value.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        raise InvalidConfigurationError(f"Repository must look like 'owner/name', got {value!r}")
    return owner, name
