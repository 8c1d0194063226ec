"""Append to the unified logfile."""

from datetime import datetime, timezone
from pathlib import Path

from .LogEntry import LogEntry


def append_log(log_path: Path, domain: str, level: str, message: str) -> None:
    """Append one entry stamped with the current UTC time.

    Write failures are ignored so that diagnostics never abort an operation.
    """
    entry = LogEntry(datetime.now(timezone.utc), domain, level, message)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(entry.format() + "\n")
    except OSError:
        pass
