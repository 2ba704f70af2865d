"""Pydantic models describing the GitHub issues API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ReactionsPayload(GitHubBaseModel):
    plus_one: int = Field(default=0, alias="+1")
    total_count: int = 0


class LabelPayload(GitHubBaseModel):
    name: str


class IssuePayload(GitHubBaseModel):
    number: int
    title: str
    body: str | None = None
    html_url: str
    state: str = "open"
    labels: list[LabelPayload] = Field(default_factory=list["LabelPayload"])
    reactions: ReactionsPayload = Field(default_factory=ReactionsPayload)
    pull_request: dict[str, object] | None = None

    @field_validator("body", mode="before")
    @classmethod
    def _blank_body(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None


class CreatedIssuePayload(GitHubBaseModel):
    number: int
    html_url: str


class ErrorPayload(GitHubBaseModel):
    message: str
    documentation_url: str | None = None
