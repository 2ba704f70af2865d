"""HTTP client for the GitHub issues API."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from pydantic import ValidationError

from devsignals.adapters.http_resilience import ResilientClient
from devsignals.domain.ports.tracker import IssueTracker

from .schema import CreatedIssuePayload, ErrorPayload, IssuePayload
from .translator import parse_created_issue, parse_issue

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterator, Sequence

    from devsignals.config.github import GitHubConfig
    from devsignals.config.http_resilience import ResilienceConfig
    from devsignals.domain.model import CreatedIssue, IssueDraft, TrackedIssue

log = getLogger(__name__)


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API returns an error or an unexpected payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubIssueTracker:
    """Issue tracker backed by one GitHub repository.

    Every call runs its own event loop around a fresh resilient client, while
    the rate limiter lives as long as the tracker so that consecutive calls
    are spaced out. The issue listing is paginated through ``Link`` headers
    and yields issues as pages arrive.
    """

    def __init__(
        self,
        *,
        config: GitHubConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        ratelimit = config.resilience.ratelimit
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds) if ratelimit else None
        )
        self._resilience = replace(config.resilience, ratelimit=None)
        self._client_factory = client_factory or ResilientClient

    @property
    def _issues_path(self) -> str:
        return f"/repos/{self._config.owner}/{self._config.repo}/issues"

    def list_issues(self, label: str) -> Iterator[TrackedIssue]:
        params: dict[str, str] | None = {
            "labels": label,
            "state": "open",
            "per_page": str(self._config.page_size),
        }
        url: str | None = self._issues_path
        page = 0
        while url is not None:
            page += 1
            payloads, url = asyncio.run(self._fetch_issue_page(url, params=params))
            # The "next" link already carries the query string.
            params = None
            log.debug("Fetched page %s of %s issues (%s items)", page, label, len(payloads))
            for payload in payloads:
                if payload.is_pull_request:
                    continue
                yield parse_issue(payload)

    def create_issue(self, draft: IssueDraft, *, labels: Sequence[str]) -> CreatedIssue:
        body = {"title": draft.title, "body": draft.body, "labels": list(labels)}
        payload = asyncio.run(self._send_json("POST", self._issues_path, body))
        try:
            created = CreatedIssuePayload.model_validate(payload)
        except ValidationError as exc:
            raise GitHubAPIError("Unexpected GitHub response to issue creation") from exc
        return parse_created_issue(created)

    def update_issue(self, number: int, draft: IssueDraft) -> None:
        # Labels are left out so that manually added labels survive.
        body = {"title": draft.title, "body": draft.body}
        asyncio.run(self._send_json("PATCH", f"{self._issues_path}/{number}", body))

    async def _fetch_issue_page(
        self,
        url: str,
        *,
        params: dict[str, str] | None,
    ) -> tuple[list[IssuePayload], str | None]:
        async with self._client_factory(self._resilience) as client:
            response = await self._throttled(client.get(url, params=params))
        payload = _checked_json(response)
        if not isinstance(payload, list):
            raise GitHubAPIError("Unexpected GitHub issue listing payload")
        issues = [IssuePayload.model_validate(item) for item in payload]
        next_url = response.links.get("next", {}).get("url")
        return issues, next_url

    async def _send_json(self, method: str, url: str, body: dict[str, object]) -> object:
        async with self._client_factory(self._resilience) as client:
            response = await self._throttled(client.request(method, url, json=body))
        return _checked_json(response)

    async def _throttled(self, call: Awaitable[httpx.Response]) -> httpx.Response:
        if self._limiter is None:
            return await call
        async with self._limiter:
            return await call


def _checked_json(response: httpx.Response) -> object:
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        message = _error_message(response)
        log.error("GitHub API error %s: %s", response.status_code, message)
        raise GitHubAPIError(message, status_code=response.status_code) from exc
    return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        return ErrorPayload.model_validate(response.json()).message
    except (ValueError, ValidationError):
        return response.reason_phrase or f"HTTP {response.status_code}"


if TYPE_CHECKING:
    _tracker_check: type[IssueTracker] = GitHubIssueTracker
