"""GitHub issue tracker configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from devsignals.domain.reconciliation.settings import DEFAULT_TRACKING_LABEL

from .env import env_or_default, require_env_var, split_repository
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
DEFAULT_REPOSITORY = "web-platform-dx/developer-signals"
DEFAULT_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Holds GitHub API credentials and the repository that tracks features."""

    token: str
    owner: str
    repo: str
    label: str
    resilience: ResilienceConfig
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


def github_resilience(token: str) -> ResilienceConfig:
    # Live tracker state must never be served from a cache.
    return ResilienceConfig(
        name="github",
        base_url=GITHUB_API_URL,
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        retry=RetryPolicy(total=3),
        cache=None,
        default_headers={
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        },
    )


def get_github_config(*, resilience: ResilienceConfig | None = None) -> GitHubConfig:
    token = require_env_var("GITHUB_TOKEN")
    owner, repo = split_repository(env_or_default("DEVSIGNALS_REPOSITORY", DEFAULT_REPOSITORY))
    return GitHubConfig(
        token=token,
        owner=owner,
        repo=repo,
        label=env_or_default("DEVSIGNALS_LABEL", DEFAULT_TRACKING_LABEL),
        resilience=resilience or github_resilience(token),
    )
