from sprint.core.config import ConfigError
from sprint.tui.state import DurationError
from sprint.util.error import format_error, format_unknown_error


def test_format_error_passes_through_user_errors() -> None:
    assert format_error(DurationError("Enter a duration in minutes.")) == "Enter a duration in minutes."
    assert format_error(ConfigError("sprint.json", "bad")) == "Config error in sprint.json: bad"


def test_format_error_describes_os_errors_with_filename() -> None:
    error = PermissionError(13, "Permission denied", "sprint.txt")

    assert format_error(error) == "Permission denied: sprint.txt"


def test_format_error_returns_none_for_unknown_errors() -> None:
    assert format_error(RuntimeError("boom")) is None


def test_format_unknown_error_variants() -> None:
    assert format_unknown_error(RuntimeError("boom")) == "RuntimeError: boom"
    assert format_unknown_error({"a": 1}) == '{\n  "a": 1\n}'
    assert format_unknown_error(42) == "42"

    try:
        raise ValueError("with traceback")
    except ValueError as e:
        text = format_unknown_error(e)
    assert "Traceback" in text
    assert "ValueError: with traceback" in text
