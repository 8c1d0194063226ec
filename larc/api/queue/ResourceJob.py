"""Resource job dataclass."""

from dataclasses import dataclass

from ..document.Document import Document
from ..link.LinkOccurrence import LinkOccurrence


@dataclass(eq=False)
class ResourceJob:
    """Work item of a sub-queue.

    Download jobs carry the artifact file name to write; title jobs carry the
    raw URL occurrence (and its document) the title belongs to.
    """

    url: str
    name: str = ""
    occurrence: LinkOccurrence | None = None
    document: Document | None = None
