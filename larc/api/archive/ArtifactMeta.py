"""Artifact metadata dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArtifactMeta:
    """Fields read from an archived artifact."""

    title: str | None
    anchor_url: str | None
