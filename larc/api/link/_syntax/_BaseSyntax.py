"""Abstract link syntax."""

import re
from abc import ABC, abstractmethod


class BaseSyntax(ABC):
    """How links, headings and companion metadata are written in one markup."""

    name: str = ""
    companion_extension: str = ""
    link_pattern: re.Pattern[str]
    heading_pattern: re.Pattern[str]
    url_container_pattern: re.Pattern[str]

    def unwrap_target(self, raw_target: str) -> str:
        """Target as written in the link, without markup-specific prefixes."""
        return raw_target.strip()

    @abstractmethod
    def format_link(self, target: str, label: str) -> str:
        """Render a link."""
        pass

    @abstractmethod
    def render_companion(self, title: str, url: str, date: str, body: str) -> str:
        """Render a companion document with its three metadata fields."""
        pass

    @abstractmethod
    def parse_companion(self, text: str) -> dict[str, str]:
        """Extract ``title``, ``url`` and ``date`` from a companion document."""
        pass

    def covered_spans(self, text: str) -> list[tuple[int, int]]:
        """Spans of markup that already carries a URL, whether or not it is a recognized link."""
        return [match.span() for match in self.url_container_pattern.finditer(text)]

    def heading_level(self, match: re.Match[str]) -> int:
        return len(match.group(1))
