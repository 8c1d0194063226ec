"""Scan a region for recognized links."""

from ..document.Document import Document
from ..document.Region import Region
from ._syntax import BaseSyntax
from .classify_target import classify_target
from .LinkOccurrence import LinkOccurrence


def scan_links(document: Document, region: Region, syntax: BaseSyntax, artifact_extension: str = ".html") -> list[LinkOccurrence]:
    """Return the resource-url, artifact and companion links of a region in document order."""
    start, end = region.resolve()
    occurrences: list[LinkOccurrence] = []
    for match in syntax.link_pattern.finditer(document.text, start, end):
        target = syntax.unwrap_target(match.group("target"))
        kind = classify_target(target, syntax, artifact_extension)
        if kind is None:
            continue
        occurrences.append(
            LinkOccurrence(
                kind=kind,
                target=target,
                label=(match.group("label") or "").strip(),
                start=document.marker(match.start(), advances=True),
                end=document.marker(match.end(), advances=False),
            )
        )
    return occurrences
