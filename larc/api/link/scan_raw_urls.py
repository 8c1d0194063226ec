"""Scan a region for bare URLs."""

import re
from collections.abc import Iterable

from ..document.Document import Document
from ..document.Region import Region
from .LinkKind import LinkKind
from .LinkOccurrence import LinkOccurrence

RAW_URL_PATTERN = re.compile(r"https?://[^\s<>\"]+")
TRAILING_PUNCTUATION = ",.;:)!]>'\""


def _trim(url: str) -> str:
    """Drop trailing punctuation; a closing parenthesis stays while it balances an opening one."""
    while url and url[-1] in TRAILING_PUNCTUATION:
        if url[-1] == ")" and url.count(")") <= url.count("("):
            break
        url = url[:-1]
    return url


def scan_raw_urls(document: Document, region: Region, covered: Iterable[tuple[int, int]] = ()) -> list[LinkOccurrence]:
    """Return bare http(s) URLs of a region that lie outside every ``covered`` span.

    ``covered`` is normally the spans of a prior ``scan_links`` over the same
    region plus the syntax's ``covered_spans``, so URLs already inside
    other markup are not counted as bare.
    """
    start, end = region.resolve()
    spans = sorted(covered)
    occurrences: list[LinkOccurrence] = []
    for match in RAW_URL_PATTERN.finditer(document.text, start, end):
        url = _trim(match.group(0))
        url_start = match.start()
        url_end = url_start + len(url)
        if any(span_start < url_end and url_start < span_end for span_start, span_end in spans):
            continue
        occurrences.append(
            LinkOccurrence(
                kind=LinkKind.UNTYPED,
                target=url,
                label="",
                start=document.marker(url_start, advances=True),
                end=document.marker(url_end, advances=False),
            )
        )
    return occurrences
