"""Region selected by a command's cursor or range options."""

from ..config.ArchiveConfig import ArchiveConfig
from ..document.Document import Document
from ..document.find_enclosing_span import find_enclosing_span
from ..link._syntax import BaseSyntax


def _command_region(
    document: Document,
    syntax: BaseSyntax,
    config: ArchiveConfig,
    cursor: int | None = None,
    start: int | None = None,
    end: int | None = None,
) -> tuple[int, int]:
    """Offsets of the region a command works on.

    A cursor selects its enclosing section; an explicit range is clamped to
    the document; otherwise the whole document is used.

    Raises:
        ValueError: If the range is inverted
    """
    length = len(document)
    if cursor is not None:
        region_start, region_end = find_enclosing_span(document, cursor, syntax)
        region_start = max(0, region_start - config.region_start_offset)
    elif start is not None or end is not None:
        region_start = max(0, min(start if start is not None else 0, length))
        region_end = max(0, min(end if end is not None else length, length))
    else:
        region_start, region_end = 0, length
    if region_start > region_end:
        raise ValueError(f"Region start {region_start} is after end {region_end}")
    return region_start, region_end
