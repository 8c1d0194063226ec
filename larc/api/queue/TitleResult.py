"""Title result dataclass."""

from dataclasses import dataclass

from ..document.Document import Document
from ..link.LinkOccurrence import LinkOccurrence


@dataclass(eq=False)
class TitleResult:
    """Resolved title of a raw URL occurrence in ``document``."""

    document: Document
    occurrence: LinkOccurrence
    title: str
