"""In-memory text document with self-adjusting markers."""

from pathlib import Path

from .DocumentClosedError import DocumentClosedError
from .Marker import Marker


class Document:
    """Text buffer that keeps its markers valid across edits.

    A document is the subject of queued operations. It is live until
    ``close()`` is called; operations whose subject is no longer live are
    skipped.
    """

    def __init__(self, text: str = "", path: Path | None = None):
        self.text = text
        self.path = Path(path) if path is not None else None
        self.closed = False
        self.modified = False
        self._markers: list[Marker] = []

    @classmethod
    def open(cls, path: Path) -> "Document":
        """Read a document from disk."""
        path = Path(path).expanduser().resolve()
        return cls(path.read_text(encoding="utf-8"), path)

    @property
    def directory(self) -> Path:
        """Directory relative link targets are resolved against."""
        if self.path is None:
            return Path.cwd()
        return self.path.parent

    @property
    def marker_count(self) -> int:
        return len(self._markers)

    def __len__(self) -> int:
        return len(self.text)

    def _check_live(self) -> None:
        if self.closed:
            name = str(self.path) if self.path else "<buffer>"
            raise DocumentClosedError(f"Document is closed: {name}")

    def marker(self, position: int, advances: bool = False) -> Marker:
        """Create a marker at ``position``."""
        self._check_live()
        if position < 0 or position > len(self.text):
            raise ValueError(f"Position {position} outside document (length {len(self.text)})")
        marker = Marker(position, advances)
        self._markers.append(marker)
        return marker

    def release(self, *markers: Marker) -> None:
        """Stop tracking markers. Unknown markers are ignored."""
        released = {id(m) for m in markers}
        self._markers = [m for m in self._markers if id(m) not in released]

    def substring(self, start: int, end: int) -> str:
        self._check_live()
        return self.text[start:end]

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace ``[start, end)`` with ``text`` and adjust every marker."""
        self._check_live()
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Invalid range [{start}, {end}) for document of length {len(self.text)}")
        self._delete(start, end)
        self._insert(start, text)
        self.modified = True

    def _delete(self, start: int, end: int) -> None:
        removed = end - start
        if not removed:
            return
        self.text = self.text[:start] + self.text[end:]
        for marker in self._markers:
            if marker.position >= end:
                marker.position -= removed
            elif marker.position > start:
                marker.position = start

    def _insert(self, position: int, text: str) -> None:
        if not text:
            return
        self.text = self.text[:position] + text + self.text[position:]
        for marker in self._markers:
            if marker.position > position or (marker.position == position and marker.advances):
                marker.position += len(text)

    def save(self) -> None:
        """Write the document back to its path if it was modified."""
        self._check_live()
        if self.path is None or not self.modified:
            return
        self.path.write_text(self.text, encoding="utf-8")
        self.modified = False

    def close(self) -> None:
        self.closed = True
        self._markers.clear()
