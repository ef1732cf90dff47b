from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from sprint.core.global_paths import GlobalPath
from sprint.util.log import Log, LogFormat, LogLevel


def test_log_writes_console_and_file(monkeypatch, tmp_path: Path, capsys) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    Log.configure(level=LogLevel.INFO, format=LogFormat.KV, console=True, file=True, dev=True)

    log = Log.create({"service": "test.log"})
    log.info("hello", {"value": 7})
    Log.close()

    stderr = capsys.readouterr().err
    text = (tmp_path / "dev.log").read_text(encoding="utf-8")

    assert "msg=hello" in stderr
    assert "service=test.log" in stderr
    assert "value=7" in text


def test_log_supports_json_format(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    Log.configure(level=LogLevel.INFO, format=LogFormat.JSON, console=False, file=True, dev=True)

    log = Log.create({"service": "test.json"})
    log.info("hello world", {"meta": {"k": "v"}, "error": OSError("disk full")})
    Log.close()

    payload = json.loads((tmp_path / "dev.log").read_text(encoding="utf-8").strip())

    assert payload["level"] == "info"
    assert payload["msg"] == "hello world"
    assert payload["service"] == "test.json"
    assert payload["meta"] == {"k": "v"}
    assert payload["error"] == "disk full"


def test_log_filters_below_configured_level(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.WARN, format=LogFormat.PRETTY, console=True, file=False)

    log = Log.create({"service": "test.level"})
    log.info("quiet")
    log.warn("loud", {"path": "a b"})

    stderr = capsys.readouterr().err
    assert "quiet" not in stderr
    assert "WARN loud" in stderr
    assert 'path="a b"' in stderr


def test_create_caches_by_service() -> None:
    assert Log.create({"service": "test.cache"}) is Log.create({"service": "test.cache"})
    assert Log.create() is not Log.create()


def _old_logs(directory: Path, count: int) -> None:
    for day in range(1, count + 1):
        old = directory / f"2024-01-{day:02d}T000000.log"
        old.write_text("", encoding="utf-8")
        os.utime(old, (1_700_000_000 + day, 1_700_000_000 + day))


def test_timestamped_logs_are_pruned(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    _old_logs(tmp_path, 12)

    Log.configure(console=False, file=True, dev=True)
    Log.close()

    assert len(list(tmp_path.glob("????-??-??T??????.log"))) == 10


def test_new_timestamped_log_counts_towards_kept_files(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    _old_logs(tmp_path, 12)

    Log.configure(console=False, file=True)
    current = Path(Log.file())
    Log.close()

    kept = sorted(tmp_path.glob("????-??-??T??????.log"))
    assert len(kept) == 10
    assert current in kept
    assert tmp_path / "2024-01-03T000000.log" not in kept
    assert tmp_path / "2024-01-04T000000.log" in kept


@pytest.mark.parametrize(("text", "level"), [("debug", LogLevel.DEBUG), ("Warning", LogLevel.WARN), (None, LogLevel.INFO)])
def test_level_parse(text: str | None, level: LogLevel) -> None:
    assert LogLevel.parse(text) is level


def test_parse_rejects_unknown_values() -> None:
    with pytest.raises(ValueError):
        LogLevel.parse("loud")
    with pytest.raises(ValueError):
        LogFormat.parse("xml")
