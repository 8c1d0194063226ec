"""Group adjacent link occurrences into clusters."""

from collections.abc import Sequence

from ..document.Document import Document
from .LinkCluster import LinkCluster
from .LinkKind import LinkKind
from .LinkOccurrence import LinkOccurrence


def group_links(
    document: Document,
    occurrences: Sequence[LinkOccurrence],
    separator: str,
    template: Sequence[LinkKind],
) -> tuple[list[LinkCluster], list[LinkCluster]]:
    """Cluster occurrences separated exactly by ``separator``.

    Returns ``(canonical, other)``: clusters whose kind sequence equals
    ``template`` and all remaining clusters, each in document order.
    """
    clusters: list[LinkCluster] = []
    current: LinkCluster | None = None
    for occurrence in occurrences:
        if current is not None:
            gap = document.substring(current.end, occurrence.start.position)
            if gap == separator:
                current.occurrences.append(occurrence)
                continue
            clusters.append(current)
        current = LinkCluster([occurrence])
    if current is not None:
        clusters.append(current)

    canonical = [cluster for cluster in clusters if cluster.is_canonical(template)]
    other = [cluster for cluster in clusters if not cluster.is_canonical(template)]
    return canonical, other
