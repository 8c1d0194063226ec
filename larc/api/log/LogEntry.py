"""One line of the unified logfile."""

import re
from dataclasses import dataclass
from datetime import datetime

# [ISO_TIMESTAMP] [DOMAIN] LEVEL: message
_LINE = re.compile(r"^\[(?P<time>[^\]]+)\]\s*\[(?P<domain>\w+)\]\s*(?P<level>DEBUG|INFO|WARN|ERROR):\s*(?P<message>.*)$", re.IGNORECASE)


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    domain: str
    level: str
    message: str

    @classmethod
    def parse(cls, line: str) -> "LogEntry | None":
        """Parse a logfile line; None for lines that are not entries.

        An unreadable timestamp yields a naive ``datetime.min`` so the entry
        sorts first and is kept by retention.
        """
        match = _LINE.match(line.strip())
        if not match:
            return None
        try:
            timestamp = datetime.fromisoformat(match["time"])
        except ValueError:
            timestamp = datetime.min
        return cls(timestamp, match["domain"].lower(), match["level"].upper(), match["message"])

    def format(self) -> str:
        return f"[{self.timestamp.isoformat()}] [{self.domain}] {self.level}: {self.message}"
