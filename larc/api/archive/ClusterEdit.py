"""Replacement text for one cluster."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClusterEdit:
    start: int
    end: int
    text: str
