"""Read the unified logfile, dropping expired entries."""

from datetime import datetime, timezone
from pathlib import Path

from ..config.LogConfig import LogConfig
from .LogEntry import LogEntry
from .write_log_entries import write_log_entries


def _expired(entry: LogEntry, log_cfg: LogConfig, now: datetime) -> bool:
    if entry.timestamp.tzinfo is None:
        return False
    return entry.timestamp < now - log_cfg.retention(entry.level)


def read_log_entries(log_path: Path, log_cfg: LogConfig, now: datetime | None = None) -> list[LogEntry]:
    """Return the entries still within retention, in file order.

    The logfile is rewritten without expired and unparseable lines whenever
    any were found.
    """
    if not log_path.exists():
        return []
    now = now or datetime.now(timezone.utc)
    lines = [line for line in log_path.read_text(encoding="utf-8", errors="replace").splitlines() if line.strip()]
    entries = [entry for entry in map(LogEntry.parse, lines) if entry is not None]
    kept = [entry for entry in entries if not _expired(entry, log_cfg, now)]
    if len(kept) != len(lines):
        write_log_entries(log_path, kept)
    return kept

