"""Run of adjacent link occurrences."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .LinkKind import LinkKind
from .LinkOccurrence import LinkOccurrence


@dataclass(eq=False)
class LinkCluster:
    """Occurrences separated only by the configured separator."""

    occurrences: list[LinkOccurrence] = field(default_factory=list)

    @property
    def start(self) -> int:
        return self.occurrences[0].start.position

    @property
    def end(self) -> int:
        return self.occurrences[-1].end.position

    @property
    def kinds(self) -> tuple[LinkKind, ...]:
        return tuple(occurrence.kind for occurrence in self.occurrences)

    def is_canonical(self, template: Sequence[LinkKind]) -> bool:
        return self.kinds == tuple(template)

    def of_kind(self, kind: LinkKind) -> list[LinkOccurrence]:
        return [occurrence for occurrence in self.occurrences if occurrence.kind == kind]
