"""Read title and original URL from an artifact."""

from pathlib import Path

from bs4 import BeautifulSoup

from .ArtifactMeta import ArtifactMeta
from .INFOBAR_ATTRIBUTE import INFOBAR_ATTRIBUTE


def read_artifact_meta(path: Path) -> ArtifactMeta:
    """Parse an artifact; missing files yield empty metadata."""
    if not path.is_file():
        return ArtifactMeta(title=None, anchor_url=None)
    soup = BeautifulSoup(path.read_text(encoding="utf-8", errors="replace"), "html.parser")
    title = " ".join(soup.title.get_text().split()) if soup.title else ""
    anchor = soup.find("a", attrs={INFOBAR_ATTRIBUTE: True})
    href = anchor.get("href") if anchor is not None else None
    return ArtifactMeta(title=title or None, anchor_url=str(href) if href else None)
