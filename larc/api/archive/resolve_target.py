"""Resolve a local link target."""

from pathlib import Path

from ..document.Document import Document


def resolve_target(document: Document, target: str) -> Path:
    """Absolute path of a local link target, relative targets resolved against the document."""
    path = Path(target).expanduser()
    if not path.is_absolute():
        path = document.directory / path
    return path
