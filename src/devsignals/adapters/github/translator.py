"""Translate GitHub payloads into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from devsignals.domain.model import CreatedIssue, TrackedIssue

if TYPE_CHECKING:
    from .schema import CreatedIssuePayload, IssuePayload


def parse_issue(payload: IssuePayload) -> TrackedIssue:
    # Only thumbs-up reactions count as votes.
    return TrackedIssue(
        number=payload.number,
        title=payload.title,
        body=payload.body or "",
        url=payload.html_url,
        votes=payload.reactions.plus_one,
    )


def parse_created_issue(payload: CreatedIssuePayload) -> CreatedIssue:
    return CreatedIssue(number=payload.number, url=payload.html_url)
