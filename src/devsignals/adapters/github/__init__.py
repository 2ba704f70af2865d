"""Public interface for the GitHub issue tracker adapter."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubIssueTracker
from .schema import IssuePayload
from .translator import parse_issue

__all__ = [
    "GitHubAPIError",
    "GitHubIssueTracker",
    "IssuePayload",
    "parse_issue",
]
