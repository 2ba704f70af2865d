"""Pydantic models for the standards-position feed.

The feed maps a feature identity either to ``{organization: {position, url}}``
or to a list of ``{organization, position, url}`` objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, RootModel, model_validator


class PositionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    organization: str
    position: str = ""
    url: str = ""

    @model_validator(mode="before")
    @classmethod
    def _accept_vendor_alias(cls, value: object) -> object:
        if isinstance(value, Mapping):
            data = dict(cast(Mapping[str, object], value))
            if "organization" not in data and "vendor" in data:
                data["organization"] = data["vendor"]
            if data.get("position") is None:
                data["position"] = ""
            if data.get("url") is None:
                data["url"] = ""
            return data
        return value


class FeaturePositions(RootModel[list[PositionPayload]]):
    @model_validator(mode="before")
    @classmethod
    def _flatten_by_organization(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            flattened: list[object] = []
            for organization, entry in mapping_value.items():
                if isinstance(entry, Mapping):
                    entry_mapping = cast(Mapping[str, object], entry)
                    flattened.append({"organization": organization, **entry_mapping})
                else:
                    flattened.append(entry)
            return flattened
        return value


class StandardPositionsDocument(RootModel[dict[str, FeaturePositions]]):
    pass
