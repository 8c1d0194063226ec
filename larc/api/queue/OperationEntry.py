"""Queued operation."""

from dataclasses import dataclass

from ..document.Document import Document
from ..document.Region import Region
from .Opcode import Opcode


@dataclass(eq=False)
class OperationEntry:
    """One unit of scheduled work on a region of a document."""

    subject: Document
    region: Region
    opcode: Opcode
