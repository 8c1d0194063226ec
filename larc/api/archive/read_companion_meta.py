"""Read metadata from a companion document."""

from pathlib import Path

from ..link._syntax import BaseSyntax


def read_companion_meta(path: Path, syntax: BaseSyntax) -> dict[str, str]:
    """``title``/``url``/``date`` of a companion; empty when the file is missing."""
    if not path.is_file():
        return {}
    return syntax.parse_companion(path.read_text(encoding="utf-8", errors="replace"))
