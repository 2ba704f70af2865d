from __future__ import annotations

from types import SimpleNamespace

import pytest

from devsignals.ui import cli


def test_update_issues_defaults_to_live_run(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_update(**kwargs: object) -> SimpleNamespace:
        captured.update(kwargs)
        return SimpleNamespace(manifest={}, intents=[])

    monkeypatch.setattr(cli, "update_issues", fake_update)

    cli.main(["update-issues"])

    assert captured == {"dry_run": False}


def test_update_issues_dry_run_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_update(**kwargs: object) -> SimpleNamespace:
        captured.update(kwargs)
        return SimpleNamespace(manifest={}, intents=[])

    monkeypatch.setattr(cli, "update_issues", fake_update)

    cli.main(["update-issues", "--dry-run"])

    assert captured == {"dry_run": True}


def test_validate_signals_command(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def fake_validate() -> dict[str, list[str]]:
        calls.append("validate")
        return {}

    monkeypatch.setattr(cli, "validate_signals", fake_validate)

    cli.main(["validate-signals"])

    assert calls == ["validate"]


def test_failures_exit_with_status_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_update(**_: object) -> None:
        raise RuntimeError("Multiple issues for grid")

    monkeypatch.setattr(cli, "update_issues", failing_update)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["update-issues"])

    assert excinfo.value.code == 1


def test_unknown_command_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["publish"])

    assert excinfo.value.code == 2
