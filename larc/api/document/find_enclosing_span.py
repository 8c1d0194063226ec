"""Span of the section enclosing a cursor position."""

from ..link._syntax import BaseSyntax
from .Document import Document


def find_enclosing_span(document: Document, cursor: int, syntax: BaseSyntax) -> tuple[int, int]:
    """Return ``(start, end)`` of the heading section containing ``cursor``.

    The section starts at the nearest heading at or before the cursor and ends
    at the next heading of the same or a higher level. Text before the first
    heading, and documents without headings, map to the whole document.
    """
    text = document.text
    cursor = max(0, min(cursor, len(text)))
    headings = [(match.start(), syntax.heading_level(match)) for match in syntax.heading_pattern.finditer(text)]

    enclosing = None
    for index, (position, _level) in enumerate(headings):
        if position > cursor:
            break
        enclosing = index
    if enclosing is None:
        return 0, len(text)

    start, level = headings[enclosing]
    for position, other_level in headings[enclosing + 1 :]:
        if other_level <= level:
            return start, position
    return start, len(text)
