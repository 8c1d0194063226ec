"""Link occurrence dataclass."""

from dataclasses import dataclass

from ..document.Marker import Marker
from .LinkKind import LinkKind


@dataclass(eq=False)
class LinkOccurrence:
    """One recognized link or raw URL found by scanning a document."""

    kind: LinkKind
    target: str
    label: str
    start: Marker
    end: Marker

    @property
    def span(self) -> tuple[int, int]:
        return self.start.position, self.end.position
