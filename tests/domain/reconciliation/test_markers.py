from __future__ import annotations

import pytest

from devsignals.domain.model import TrackedIssue
from devsignals.domain.reconciliation import MarkerCodec


def test_render_embeds_identity_in_html_comment() -> None:
    assert MarkerCodec().render("container-queries") == "<!-- web-features:container-queries -->"


def test_render_rejects_identity_outside_marker_alphabet() -> None:
    with pytest.raises(ValueError, match="Invalid feature identity"):
        MarkerCodec().render("Not_Valid")


@pytest.mark.parametrize(
    "body",
    [
        "<!-- web-features:anchor-positioning -->",
        "intro\n<!--web-features:anchor-positioning-->\noutro",
        "<!--   web-features :  anchor-positioning   -->",
    ],
)
def test_extract_tolerates_whitespace(body: str) -> None:
    assert MarkerCodec().extract(body) == "anchor-positioning"


@pytest.mark.parametrize("body", [None, "", "no marker here", "<!-- other:thing -->"])
def test_extract_returns_none_without_marker(body: str | None) -> None:
    assert MarkerCodec().extract(body) is None


def test_extract_uses_first_of_several_markers(caplog: pytest.LogCaptureFixture) -> None:
    body = "<!-- web-features:first -->\n<!-- web-features:second -->"

    assert MarkerCodec().extract(body) == "first"
    assert "several markers" in caplog.text


def test_identity_prefers_structured_metadata() -> None:
    issue = TrackedIssue(
        number=1,
        title="Grid",
        body="<!-- web-features:grid -->",
        url="https://github.com/example/signals/issues/1",
        feature_id="subgrid",
    )

    assert MarkerCodec().identity_of(issue) == "subgrid"


def test_custom_namespace_round_trips() -> None:
    codec = MarkerCodec(namespace="feature")

    assert codec.extract(codec.render("dialog")) == "dialog"
    assert MarkerCodec().extract(codec.render("dialog")) is None
