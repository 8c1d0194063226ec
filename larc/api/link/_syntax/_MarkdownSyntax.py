"""Markdown link syntax."""

import re

import yaml

from ._BaseSyntax import BaseSyntax

# [label](target), not preceded by "!" (images)
LINK_PATTERN = re.compile(r"(?<!!)\[(?P<label>[^\]\n]*)\]\((?P<target><[^>\n]+>|[^)\s]+)\)")
HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]", re.MULTILINE)
FRONT_MATTER_PATTERN = re.compile(r"\A---\n(.*?)\n---\n?", re.DOTALL)
# links and images of any target or title, reference definitions (not footnotes), autolinks
URL_CONTAINER_PATTERN = re.compile(
    r"!?\[[^\]\n]*\]\((?:[^()\n]|\([^()\n]*\))*\)"
    r"|^[ \t]{0,3}\[(?!\^)[^\]\n]+\]:[ \t]*\S.*$"
    r"|<[A-Za-z][A-Za-z0-9+.-]*:[^<>\s]+>",
    re.MULTILINE,
)


class MarkdownSyntax(BaseSyntax):
    """Standard Markdown links; companions carry YAML front matter."""

    name = "markdown"
    companion_extension = ".md"
    link_pattern = LINK_PATTERN
    heading_pattern = HEADING_PATTERN
    url_container_pattern = URL_CONTAINER_PATTERN

    def unwrap_target(self, raw_target: str) -> str:
        target = raw_target.strip()
        if target.startswith("<") and target.endswith(">"):
            target = target[1:-1]
        return target

    def format_link(self, target: str, label: str) -> str:
        label = label.replace("[", "(").replace("]", ")")
        if any(ch in target for ch in " ()"):
            target = f"<{target}>"
        return f"[{label}]({target})"

    def render_companion(self, title: str, url: str, date: str, body: str) -> str:
        meta = yaml.safe_dump({"title": title, "url": url, "date": date}, sort_keys=False, allow_unicode=True)
        return f"---\n{meta}---\n\n{body}\n"

    def parse_companion(self, text: str) -> dict[str, str]:
        match = FRONT_MATTER_PATTERN.match(text)
        if not match:
            return {}
        try:
            meta = yaml.safe_load(match.group(1))
        except yaml.YAMLError:
            return {}
        if not isinstance(meta, dict):
            return {}
        return {key: str(meta[key]) for key in ("title", "url", "date") if meta.get(key) is not None}
