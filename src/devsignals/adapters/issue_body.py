"""Markdown rendering of tracking issues."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from devsignals.domain.model import BaselineLevel, IssueDraft
from devsignals.domain.ports.rendering import IssueRenderer
from devsignals.domain.reconciliation.markers import MarkerCodec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from devsignals.domain.model import BrowserId, BrowserReleases, FeatureRecord

EXPLORER_URL = "https://web-platform-dx.github.io/web-features-explorer/features/{id}"
WEBSTATUS_URL = "https://webstatus.dev/features/{id}"
CANIUSE_URL = "https://caniuse.com/{id}"

CALL_TO_ACTION = (
    "If you're a web developer and want this feature to be available in all browsers, "
    "please give this issue a thumbs up 👍!"
)


@dataclass(frozen=True, slots=True)
class MarkdownIssueRenderer:
    """Render the title and body of the issue tracking one feature.

    The output depends only on the feature record and the browser table, so
    rendering the same data twice yields byte-identical bodies. The identity
    marker is always the last line.
    """

    browsers: Mapping[BrowserId, BrowserReleases] = field(
        default_factory=dict["BrowserId", "BrowserReleases"]
    )
    marker: MarkerCodec = field(default_factory=MarkerCodec)

    def __call__(self, feature: FeatureRecord) -> IssueDraft:
        sections = [
            feature.description_html or feature.description,
            CALL_TO_ACTION,
            self._status_section(feature),
            self._links_section(feature),
            self.marker.render(feature.id),
        ]
        return IssueDraft(
            title=feature.name,
            body="\n\n".join(section for section in sections if section),
        )

    def _status_section(self, feature: FeatureRecord) -> str:
        lines = ["Browser support:", ""]
        browser_ids = list(self.browsers) or sorted(feature.support)
        for browser_id in browser_ids:
            lines.append(f"- {self._support_line(feature, browser_id)}")
        baseline = feature.baseline
        if baseline.level is BaselineLevel.LOW and baseline.low_date:
            lines.extend(["", f"Baseline newly available since {baseline.low_date}."])
        elif baseline.level is BaselineLevel.HIGH and baseline.high_date:
            lines.extend(["", f"Baseline widely available since {baseline.high_date}."])
        return "\n".join(lines)

    def _support_line(self, feature: FeatureRecord, browser_id: BrowserId) -> str:
        browser = self.browsers.get(browser_id)
        name = browser.name if browser is not None else browser_id
        version = feature.support.get(browser_id)
        if version is None:
            return f"{name}: not supported"
        date = browser.release_date(version) if browser is not None else None
        if date is None:
            return f"{name}: {version}"
        return f"{name}: {version} ({date})"

    @staticmethod
    def _links_section(feature: FeatureRecord) -> str:
        links = [
            f"- [caniuse.com]({CANIUSE_URL.format(id=caniuse)})" for caniuse in feature.caniuse
        ]
        links.append(f"- [web features explorer]({EXPLORER_URL.format(id=feature.id)})")
        links.append(f"- [webstatus.dev]({WEBSTATUS_URL.format(id=feature.id)})")
        links.extend(f"- [Specification]({url})" for url in feature.spec_urls)
        return "\n".join(["For more details on this feature:", "", *links])


if TYPE_CHECKING:
    _renderer_check: IssueRenderer = MarkdownIssueRenderer()
