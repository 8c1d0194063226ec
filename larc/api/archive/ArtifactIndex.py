"""Lookup of existing artifacts by URL hash."""

from pathlib import Path
from typing import Literal


class ArtifactIndex:
    """Map a URL hash to an artifact already present in the artifact directory.

    Nothing is persisted: every lookup globs the directory.
    """

    def __init__(self, artifact_dir: Path, placement: Literal["prefix", "suffix"] = "prefix", extension: str = ".html"):
        self.artifact_dir = Path(artifact_dir)
        self.placement = placement
        self.extension = extension

    def _pattern(self, digest: str) -> str:
        if self.placement == "prefix":
            return f"{digest}-*{self.extension}"
        return f"*-{digest}{self.extension}"

    def matches(self, digest: str) -> list[Path]:
        if not self.artifact_dir.is_dir():
            return []
        return sorted(path for path in self.artifact_dir.glob(self._pattern(digest)) if path.is_file())

    def find(self, digest: str, preferred: Path | None = None) -> Path | None:
        """Existing artifact for ``digest``; ``preferred`` wins when it exists."""
        if preferred is not None and preferred.is_file():
            return preferred
        found = self.matches(digest)
        return found[0] if found else None
