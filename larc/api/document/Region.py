"""Tracked span of a document."""

from dataclasses import dataclass

from .Document import Document
from .DocumentClosedError import DocumentClosedError
from .Marker import Marker


@dataclass(eq=False)
class Region:
    """A half-open span ``[start, end)`` that follows edits to its document."""

    document: Document
    start: Marker
    end: Marker

    def resolve(self) -> tuple[int, int]:
        """Current absolute offsets of the region."""
        if self.document.closed:
            raise DocumentClosedError("Region refers to a closed document")
        return self.start.position, self.end.position

    def overlaps(self, other: "Region") -> bool:
        """True if both regions share a document and intersect or coincide."""
        if self.document is not other.document:
            return False
        start, end = self.start.position, self.end.position
        other_start, other_end = other.start.position, other.end.position
        if (start, end) == (other_start, other_end):
            return True
        return start < other_end and other_start < end

    def text(self) -> str:
        start, end = self.resolve()
        return self.document.substring(start, end)

    def release(self) -> None:
        self.document.release(self.start, self.end)
