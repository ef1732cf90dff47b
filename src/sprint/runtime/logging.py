"""Logger setup for the two ways sprint runs: plain CLI commands and the TUI."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Optional

from ..core.config import Config, ConfigManager
from ..util.log import Log, LogFormat, LogLevel

LogMode = Literal["cli", "tui"]


@dataclass(frozen=True)
class LogSettings:
    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.KV
    console: bool = False
    file: bool = True
    dev_file: bool = False

    @classmethod
    def for_mode(cls, mode: LogMode) -> "LogSettings":
        # stderr belongs to the screen while the TUI runs
        return cls(console=mode == "cli")

    def with_config(self, cfg: Config) -> "LogSettings":
        """Apply the ``logging`` section, falling back to ``logLevel``."""
        section = cfg.logging
        changes: Dict[str, Any] = {}

        level = (section.level if section else None) or cfg.log_level
        if level:
            changes["level"] = LogLevel.parse(level)
        if section is not None:
            if section.format:
                changes["format"] = LogFormat.parse(section.format)
            for name in ("console", "file", "dev_file"):
                value = getattr(section, name)
                if value is not None:
                    changes[name] = value

        return replace(self, **changes)


def bootstrap_logging(
    *,
    mode: LogMode,
    level: Optional[str] = None,
    format: Optional[str] = None,
    console: Optional[bool] = None,
    file: Optional[bool] = None,
    dev_file: Optional[bool] = None,
) -> LogSettings:
    """Resolve logger settings and configure the process logger.

    Precedence, highest first: explicit arguments, the ``logging`` config
    section, ``logLevel``, then the defaults for ``mode``.
    """
    cfg = asyncio.run(ConfigManager.get())
    settings = LogSettings.for_mode(mode).with_config(cfg)

    changes: Dict[str, Any] = {
        name: value
        for name, value in (("console", console), ("file", file), ("dev_file", dev_file))
        if value is not None
    }
    if level:
        changes["level"] = LogLevel.parse(level)
    if format:
        changes["format"] = LogFormat.parse(format)
    settings = replace(settings, **changes)

    Log.configure(
        level=settings.level,
        format=settings.format,
        console=settings.console,
        file=settings.file,
        dev=settings.dev_file,
    )
    return settings
