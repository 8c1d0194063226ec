"""Create a tracked region."""

from .Document import Document
from .Region import Region


def track(document: Document, start: int, end: int) -> Region:
    """Track ``[start, end)`` so that text inserted at either boundary stays inside."""
    if start > end:
        raise ValueError(f"Region start {start} is after end {end}")
    return Region(
        document=document,
        start=document.marker(start, advances=False),
        end=document.marker(end, advances=True),
    )
