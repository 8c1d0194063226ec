"""Canonical artifact file name."""

from typing import Literal

from .safe_title import safe_title
from .url_hash import url_hash


def artifact_name(url: str, title: str, placement: Literal["prefix", "suffix"] = "prefix", extension: str = ".html") -> str:
    """``<hash>-<title>.html`` or ``<title>-<hash>.html`` depending on ``placement``."""
    digest = url_hash(url)
    slug = safe_title(title)
    stem = f"{digest}-{slug}" if placement == "prefix" else f"{slug}-{digest}"
    return stem + extension
