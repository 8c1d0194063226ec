"""Bidirectional origin substitution for mirror domains."""


class DomainMapper:
    """Swap URL origins between their original and mirror forms.

    The mapping is ``original origin -> mirror origin``, for example
    ``{"https://www.reddit.com": "https://old.reddit.com"}``. External
    processes receive mirror URLs; documents always get original URLs back.
    """

    def __init__(self, mapping: dict[str, str] | None = None):
        self._pairs = [(original.rstrip("/"), mirror.rstrip("/")) for original, mirror in (mapping or {}).items()]

    @staticmethod
    def _swap(url: str, source: str, target: str) -> str | None:
        if not url.startswith(source):
            return None
        rest = url[len(source):]
        if rest and rest[0] not in "/?#":
            return None
        return target + rest

    def to_mirror(self, url: str) -> str:
        for original, mirror in self._pairs:
            swapped = self._swap(url, original, mirror)
            if swapped is not None:
                return swapped
        return url

    def to_origin(self, url: str) -> str:
        for original, mirror in self._pairs:
            swapped = self._swap(url, mirror, original)
            if swapped is not None:
                return swapped
        return url
