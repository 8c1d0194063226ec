"""Org-mode link syntax."""

import re

from ._BaseSyntax import BaseSyntax

# [[target][label]] or [[target]]
LINK_PATTERN = re.compile(r"\[\[(?P<target>[^\]\n]+)\](?:\[(?P<label>[^\]\n]*)\])?\]")
HEADING_PATTERN = re.compile(r"^(\*+)[ \t]", re.MULTILINE)
KEYWORD_PATTERN = re.compile(r"^#\+(TITLE|URL|DATE):[ \t]*(.*)$", re.MULTILINE | re.IGNORECASE)
# any bracket link, or an angle link such as <https://example.com>
URL_CONTAINER_PATTERN = re.compile(r"\[\[[^\]\n]+\](?:\[[^\]\n]*\])?\]|<[A-Za-z][A-Za-z0-9+.-]*:[^<>\s]+>")


class OrgSyntax(BaseSyntax):
    """Org links; local targets use the ``file:`` link type."""

    name = "org"
    companion_extension = ".org"
    link_pattern = LINK_PATTERN
    heading_pattern = HEADING_PATTERN
    url_container_pattern = URL_CONTAINER_PATTERN

    def unwrap_target(self, raw_target: str) -> str:
        target = raw_target.strip()
        if target.startswith("file:"):
            target = target[len("file:"):]
        return target

    def format_link(self, target: str, label: str) -> str:
        if "://" not in target:
            target = f"file:{target}"
        label = label.replace("[", "(").replace("]", ")")
        if not label:
            return f"[[{target}]]"
        return f"[[{target}][{label}]]"

    def render_companion(self, title: str, url: str, date: str, body: str) -> str:
        return f"#+TITLE: {title}\n#+URL: {url}\n#+DATE: {date}\n\n{body}\n"

    def parse_companion(self, text: str) -> dict[str, str]:
        meta: dict[str, str] = {}
        for match in KEYWORD_PATTERN.finditer(text):
            key = match.group(1).lower()
            if key not in meta:
                meta[key] = match.group(2).strip()
        return meta
