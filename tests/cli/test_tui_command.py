from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
import typer

from sprint.cli.cmd import tui as tui_module
from sprint.core.config import Config


def _fake_app(*, return_code: int = 0, quitting: bool = True) -> SimpleNamespace:
    return SimpleNamespace(return_code=return_code, state=SimpleNamespace(quitting=quitting))


@pytest.fixture
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tui_module, "bootstrap_logging", lambda **kwargs: None)


def test_tui_command_prints_farewell_after_quit(
    quiet_logging: None, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SPRINT_CONFIG_CONTENT", json.dumps({"statusFile": "focus.txt"}))
    seen: list[Config] = []

    def fake_run(config: Config) -> SimpleNamespace:
        seen.append(config)
        return _fake_app()

    tui_module.tui_command(run=fake_run)

    assert seen[0].status_file == "focus.txt"
    assert capsys.readouterr().out.strip() == tui_module.FAREWELL


def test_tui_command_exits_with_app_return_code(quiet_logging: None) -> None:
    with pytest.raises(typer.Exit) as exc:
        tui_module.tui_command(run=lambda config: _fake_app(return_code=2, quitting=False))

    assert exc.value.exit_code == 2


def test_tui_command_reports_startup_failure(quiet_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
    def failing_run(config: Config) -> SimpleNamespace:
        raise RuntimeError("no terminal attached")

    with pytest.raises(typer.Exit) as exc:
        tui_module.tui_command(run=failing_run)

    captured = capsys.readouterr()
    assert exc.value.exit_code == 1
    assert "could not start program" in captured.err
    assert "no terminal attached" in captured.err
    assert tui_module.FAREWELL not in captured.out


def test_tui_command_reports_invalid_config(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SPRINT_CONFIG_CONTENT", json.dumps({"charLimit": 0}))
    calls: list[Config] = []

    with pytest.raises(typer.Exit) as exc:
        tui_module.tui_command(run=lambda config: calls.append(config) or _fake_app())

    assert exc.value.exit_code == 1
    assert calls == []
    assert "Config error in SPRINT_CONFIG_CONTENT" in capsys.readouterr().err
