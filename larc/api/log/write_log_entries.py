"""Rewrite the unified logfile."""

from pathlib import Path

from .LogEntry import LogEntry


def write_log_entries(log_path: Path, entries: list[LogEntry]) -> None:
    """Replace the logfile with ``entries``."""
    log_path.write_text("".join(entry.format() + "\n" for entry in entries), encoding="utf-8")
