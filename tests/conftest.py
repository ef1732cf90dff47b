from collections.abc import Iterator
from pathlib import Path

import pytest

from sprint.core.config import ConfigManager
from sprint.core.global_paths import GlobalPath
from sprint.tui.theme import ThemeManager
from sprint.util.log import Log, LogFormat, LogLevel


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def config_context() -> Iterator[None]:
    token = ConfigManager.provide(ConfigManager())
    try:
        yield
    finally:
        ConfigManager.restore(token)


@pytest.fixture(autouse=True)
def isolated_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point user directories at tmp_path and run from an empty working dir."""
    config_dir = tmp_path / "config"
    log_dir = tmp_path / "log"
    work_dir = tmp_path / "work"
    work_dir.mkdir()

    monkeypatch.setattr(GlobalPath, "config", classmethod(lambda cls: str(config_dir)))
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(log_dir)))
    monkeypatch.delenv("SPRINT_CONFIG_CONTENT", raising=False)
    monkeypatch.chdir(work_dir)
    try:
        yield work_dir
    finally:
        Log.configure(level=LogLevel.INFO, format=LogFormat.KV, console=False, file=False, dev=False)
        ThemeManager.set_theme("dark")
