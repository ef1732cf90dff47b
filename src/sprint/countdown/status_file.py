"""Status file that mirrors the countdown for external readers.

The file is rewritten in full on every update and holds exactly the
``MM:SS`` text with no trailing newline, so status-bar widgets can read it
without parsing.
"""

from pathlib import Path
from typing import Union

from ..util.log import Log

log = Log.create({"service": "countdown.status"})


class StatusFile:
    """Overwrites a single plain-text file with the current remaining time."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def write(self, text: str) -> bool:
        """Replace the file contents with ``text``.

        Failures are logged and reported through the return value so the
        countdown keeps running.

        Returns:
            True if the file was written
        """
        try:
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(text)
                handle.flush()
        except OSError as e:
            log.error("failed to write status file", {"path": str(self.path), "error": e})
            return False

        log.debug("status file written", {"path": str(self.path), "value": text})
        return True
