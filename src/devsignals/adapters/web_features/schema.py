"""Pydantic models describing the web-features ``data.json`` document."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_list(value: object) -> object:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class WebFeaturesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ReleasePayload(WebFeaturesBaseModel):
    version: str
    date: str


class BrowserPayload(WebFeaturesBaseModel):
    name: str
    releases: list[ReleasePayload] = Field(default_factory=list["ReleasePayload"])


class DiscouragedPayload(WebFeaturesBaseModel):
    according_to: list[str] = Field(default_factory=list[str])
    alternatives: list[str] = Field(default_factory=list[str])

    _normalize_lists = field_validator("according_to", "alternatives", mode="before")(_as_list)


class StatusPayload(WebFeaturesBaseModel):
    baseline: Literal["high", "low", False] = False
    baseline_low_date: str | None = None
    baseline_high_date: str | None = None
    support: dict[str, str] = Field(default_factory=dict[str, str])


class FeaturePayload(WebFeaturesBaseModel):
    # Documents predating redirects have no "kind"; those are all features.
    kind: str = "feature"
    name: str = ""
    description: str = ""
    description_html: str = ""
    spec: list[str] = Field(default_factory=list[str])
    caniuse: list[str] = Field(default_factory=list[str])
    status: StatusPayload | None = None
    discouraged: DiscouragedPayload | None = None
    redirect_target: str | None = None
    redirect_targets: list[str] = Field(default_factory=list[str])

    _normalize_lists = field_validator("spec", "caniuse", "redirect_targets", mode="before")(
        _as_list
    )


class WebFeaturesDocument(WebFeaturesBaseModel):
    browsers: dict[str, BrowserPayload] = Field(default_factory=dict[str, "BrowserPayload"])
    features: dict[str, FeaturePayload]
