"""Position reference into a Document."""

from dataclasses import dataclass


@dataclass(eq=False)
class Marker:
    """A position that follows the text around it as the document is edited.

    ``advances`` selects what happens on an insertion exactly at ``position``:
    an advancing marker ends up after the inserted text, a non-advancing one
    stays before it.
    """

    position: int
    advances: bool = False
