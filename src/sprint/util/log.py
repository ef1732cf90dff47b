"""Tagged structured logging with console and file sinks.

Loggers are created per service through ``Log.create({"service": ...})``
and share one process-wide sink configuration. Records are rendered as
``key=value`` pairs, JSON lines, or a human oriented "pretty" line.
"""

import json
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO

from ..core.global_paths import GlobalPath

KEEP_LOG_FILES = 10
STAMPED_LOG_GLOB = "????-??-??T??????.log"


class LogLevel(str, Enum):
    """Log severity levels, lowest first."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        if value is None:
            return cls.INFO
        name = value.strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"invalid log level: {value}") from None

    @property
    def rank(self) -> int:
        return list(LogLevel).index(self)


class LogFormat(str, Enum):
    """Log output format."""

    KV = "kv"
    JSON = "json"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: str | None) -> "LogFormat":
        if value is None:
            return cls.KV
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"invalid log format: {value}") from None


@dataclass
class _Sinks:
    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.KV
    console: bool = False
    path: Optional[Path] = None
    handle: Optional[TextIO] = None
    last_emit: float = 0.0


_sinks = _Sinks(last_emit=time.time())

_HEADER_KEYS = ("time", "delta_ms", "level", "msg")


def _error_text(error: BaseException) -> str:
    parts = []
    current: Optional[BaseException] = error
    while current is not None and len(parts) < 10:
        parts.append(str(current) or current.__class__.__name__)
        current = current.__cause__
    return " Caused by: ".join(parts)


def _plain(value: Any) -> Any:
    if isinstance(value, BaseException):
        return _error_text(value)
    if value is None or isinstance(value, (dict, list, tuple, int, float, bool)):
        return value
    return str(value)


def _kv(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    text = str(value)
    if not text or "=" in text or any(ch.isspace() for ch in text):
        return json.dumps(text, ensure_ascii=False)
    return text


def _pairs(record: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_kv(value)}" for key, value in record.items() if key not in _HEADER_KEYS)


def _format_kv(record: Dict[str, Any]) -> str:
    head = f"{record['time']} +{record['delta_ms']}ms level={record['level']} msg={_kv(record['msg'])}"
    tail = _pairs(record)
    return f"{head} {tail}" if tail else head


def _format_json(record: Dict[str, Any]) -> str:
    return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


def _format_pretty(record: Dict[str, Any]) -> str:
    tail = _pairs(record)
    extra = f" ({tail})" if tail else ""
    msg = record["msg"] or ""
    return f"{record['time']} {record['level'].upper()} {msg}{extra} +{record['delta_ms']}ms"


_FORMATTERS: Dict[LogFormat, Callable[[Dict[str, Any]], str]] = {
    LogFormat.KV: _format_kv,
    LogFormat.JSON: _format_json,
    LogFormat.PRETTY: _format_pretty,
}


class Logger:
    """Logger carrying a fixed set of tags merged into every record."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = tags or {}

    def _emit(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> None:
        if level.rank < _sinks.level.rank:
            return
        if not _sinks.console and _sinks.handle is None:
            return

        now = time.time()
        record: Dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "delta_ms": int((now - _sinks.last_emit) * 1000),
            "level": level.value.lower(),
            "msg": _plain(message),
        }
        _sinks.last_emit = now
        for key, value in {**self.tags, **(extra or {})}.items():
            if value is not None:
                record[key] = _plain(value)

        line = _FORMATTERS[_sinks.format](record) + "\n"
        if _sinks.console:
            sys.stderr.write(line)
            sys.stderr.flush()
        if _sinks.handle is not None:
            _sinks.handle.write(line)
            _sinks.handle.flush()

    def debug(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.DEBUG, message, extra)

    def info(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.INFO, message, extra)

    def warn(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.WARN, message, extra)

    def error(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.ERROR, message, extra)


class Log:
    """Logger factory and sink configuration."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Optional[Dict[str, Any]] = None) -> Logger:
        """Create a logger, cached by its ``service`` tag when present."""
        tags = tags or {}
        service = tags.get("service")
        if not isinstance(service, str) or not service:
            return Logger(tags=tags)
        return cls._loggers.setdefault(service, Logger(tags=tags))

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
        file: bool = True,
        dev: bool = False,
    ) -> None:
        """Configure logging sinks and output format.

        Args:
            level: Minimum level written to any sink
            format: Record format
            console: Write records to stderr
            file: Write records to a file under the log directory
            dev: Use a fixed ``dev.log`` instead of a timestamped file
        """
        if level is not None:
            _sinks.level = level
        if format is not None:
            _sinks.format = format
        if console is not None:
            _sinks.console = console

        cls.close()
        _sinks.path = None
        if not file:
            return

        log_dir = Path(GlobalPath.log())
        log_dir.mkdir(parents=True, exist_ok=True)
        if dev:
            name = "dev.log"
        else:
            name = datetime.now().strftime("%Y-%m-%dT%H%M%S") + ".log"
        _sinks.path = log_dir / name
        _sinks.handle = _sinks.path.open("w", encoding="utf-8")
        cls._cleanup_logs(log_dir)

    @classmethod
    def file(cls) -> str:
        """Path of the current log file, or an empty string."""
        return str(_sinks.path) if _sinks.path else ""

    @classmethod
    def _cleanup_logs(cls, log_dir: Path) -> None:
        """Keep only the most recent timestamped log files."""
        stamped = sorted(log_dir.glob(STAMPED_LOG_GLOB), key=lambda p: p.stat().st_mtime)
        for old in stamped[:-KEEP_LOG_FILES]:
            old.unlink(missing_ok=True)

    @classmethod
    def close(cls) -> None:
        """Close the log file handle if open."""
        if _sinks.handle is not None:
            _sinks.handle.close()
            _sinks.handle = None
