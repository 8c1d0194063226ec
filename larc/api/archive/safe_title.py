"""Filesystem-safe form of a title."""

import re
import unicodedata

_UNSAFE = re.compile(r"[^\w]+")


def safe_title(title: str, max_length: int = 80) -> str:
    slug = unicodedata.normalize("NFKC", title).lower()
    slug = _UNSAFE.sub("-", slug).strip("-_")
    slug = slug[:max_length].rstrip("-_")
    return slug or "untitled"
