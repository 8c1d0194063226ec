"""Document domain: subjects, markers and tracked regions."""

from .Document import Document
from .DocumentClosedError import DocumentClosedError
from .Marker import Marker
from .Region import Region
from .track import track

__all__ = ["Document", "DocumentClosedError", "Marker", "Region", "track"]
