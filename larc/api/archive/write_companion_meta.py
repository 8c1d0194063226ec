"""Create a companion document."""

from pathlib import Path

from ..link._syntax import BaseSyntax


def write_companion_meta(path: Path, syntax: BaseSyntax, title: str, url: str, date: str, body: str) -> bool:
    """Create ``path`` unless it exists. Returns True when a file was written."""
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(syntax.render_companion(title, url, date, body), encoding="utf-8")
    return True
