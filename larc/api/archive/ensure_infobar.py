"""Make sure an artifact carries its original URL."""

from pathlib import Path

from bs4 import BeautifulSoup

from .add_infobar import add_infobar


def ensure_infobar(path: Path, url: str) -> bool:
    """Insert the infobar anchor into ``path`` if missing. Returns True when the file changed."""
    soup = BeautifulSoup(path.read_text(encoding="utf-8", errors="replace"), "html.parser")
    if not add_infobar(soup, url):
        return False
    path.write_text(str(soup), encoding="utf-8")
    return True
