"""Diagnostic sink used by the operation pipeline."""

from pathlib import Path

from .append_log import append_log

_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


class DiagnosticLog:
    """Append-only log of one pipeline run.

    Every entry at or above ``level`` goes to the unified logfile; the entries
    of the current run are also kept in memory for the terminal summary.
    """

    def __init__(self, log_path: Path | None, domain: str = "queue", level: str = "INFO"):
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self.log_path = log_path
        self.domain = domain
        self.level = level
        self.entries: list[tuple[str, str]] = []

    def _write(self, level: str, message: str) -> None:
        if _LEVELS.index(level) < _LEVELS.index(self.level):
            return
        self.entries.append((level, message))
        if self.log_path is not None:
            append_log(self.log_path, self.domain, level, message)

    def debug(self, message: str) -> None:
        self._write("DEBUG", message)

    def info(self, message: str) -> None:
        self._write("INFO", message)

    def warn(self, message: str) -> None:
        self._write("WARN", message)

    def error(self, message: str) -> None:
        self._write("ERROR", message)

    def messages(self, level: str) -> list[str]:
        return [message for entry_level, message in self.entries if entry_level == level]
