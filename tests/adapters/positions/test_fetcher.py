from __future__ import annotations

import httpx
import pytest

from devsignals.adapters.positions import StandardPositionsFetcher, StandardsPositionsError
from devsignals.config.positions import StandardPositionsConfig
from devsignals.domain.ports import StandardsPosition
from devsignals.domain.reconciliation import resolve_skip_list
from tests.helpers.http import make_client_factory, offline_resilience

FEED_URL = "https://example.test/standard-positions.json"


def _fetcher(payload: object, *, status_code: int = 200) -> StandardPositionsFetcher:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == FEED_URL
        return httpx.Response(status_code, json=payload)

    return StandardPositionsFetcher(
        config=StandardPositionsConfig(url=FEED_URL, resilience=offline_resilience("positions")),
        client_factory=make_client_factory(handler),
    )


def test_mapping_form_is_flattened_per_organization() -> None:
    fetcher = _fetcher(
        {
            "web-bluetooth": {
                "mozilla": {
                    "position": "negative",
                    "url": "https://github.com/mozilla/standards-positions/issues/95",
                },
                "webkit": {
                    "position": "oppose",
                    "url": "https://github.com/WebKit/standards-positions/issues/1",
                },
            },
        }
    )

    positions = fetcher()

    assert positions == {
        "web-bluetooth": [
            StandardsPosition(
                organization="mozilla",
                position="negative",
                url="https://github.com/mozilla/standards-positions/issues/95",
            ),
            StandardsPosition(
                organization="webkit",
                position="oppose",
                url="https://github.com/WebKit/standards-positions/issues/1",
            ),
        ]
    }


def test_list_form_and_missing_fields_are_accepted() -> None:
    fetcher = _fetcher(
        {
            "grid": [{"vendor": "mozilla", "position": "positive", "url": None}],
            "dialog": [],
        }
    )

    positions = fetcher()

    assert positions["grid"] == [
        StandardsPosition(organization="mozilla", position="positive", url="")
    ]
    assert positions["dialog"] == []


def test_feed_drives_skip_list() -> None:
    fetcher = _fetcher(
        {
            "web-bluetooth": {"mozilla": {"position": "negative", "url": "https://example.test/1"}},
            "grid": {"mozilla": {"position": "positive", "url": "https://example.test/2"}},
        }
    )

    skip_list = resolve_skip_list(fetcher())

    assert dict(skip_list) == {
        "web-bluetooth": "mozilla negative position at https://example.test/1"
    }


def test_non_object_feed_aborts() -> None:
    with pytest.raises(StandardsPositionsError):
        _fetcher(["not", "a", "mapping"])()


def test_http_failure_propagates() -> None:
    with pytest.raises(httpx.HTTPStatusError):
        _fetcher({"message": "unavailable"}, status_code=503)()
