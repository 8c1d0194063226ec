"""Classify a link target by its shape."""

from ._syntax import BaseSyntax
from .LinkKind import LinkKind


def classify_target(target: str, syntax: BaseSyntax, artifact_extension: str) -> LinkKind | None:
    """Return the kind of ``target`` or None when it is not a recognized link."""
    lowered = target.lower()
    if lowered.startswith(("http://", "https://")):
        return LinkKind.URL
    if "://" in lowered:
        return None
    if lowered.endswith(artifact_extension.lower()):
        return LinkKind.ARTIFACT
    if lowered.endswith(syntax.companion_extension):
        return LinkKind.COMPANION
    return None
