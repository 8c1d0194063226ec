"""Normalize a URL for content hashing."""

import re
from urllib.parse import urlsplit

_EXTENSION = re.compile(r"\.[A-Za-z0-9]{1,5}$")


def normalize_url(url: str) -> str:
    """Drop scheme, leading ``www.``, fragment, trailing slash and file extension.

    ``https://www.example.com/docs/index.html#top`` becomes
    ``example.com/docs/index``.
    """
    parts = urlsplit(url.strip())
    host = parts.netloc.lower()
    if host.startswith("www."):
        host = host[len("www."):]
    path = parts.path.rstrip("/")
    last_slash = path.rfind("/")
    if last_slash >= 0:
        path = path[: last_slash + 1] + _EXTENSION.sub("", path[last_slash + 1 :])
    normalized = host + path.rstrip("/")
    if parts.query:
        normalized += "?" + parts.query
    return normalized
