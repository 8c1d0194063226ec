"""Kinds of link occurrences."""

from enum import Enum


class LinkKind(str, Enum):
    """Kind of a scanned link, used in archive-order templates."""

    URL = "url"
    ARTIFACT = "artifact"
    COMPANION = "companion"
    UNTYPED = "untyped"
