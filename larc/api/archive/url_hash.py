"""Content hash of a normalized URL."""

import hashlib

from .normalize_url import normalize_url

HASH_LENGTH = 16


def url_hash(url: str) -> str:
    """First 16 hex digits of the SHA256 of the normalized URL."""
    return hashlib.sha256(normalize_url(url).encode("utf-8", errors="ignore")).hexdigest()[:HASH_LENGTH]
