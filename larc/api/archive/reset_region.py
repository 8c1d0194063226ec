"""Reset archived clusters of a region."""

from pathlib import Path

from ..config.ArchiveConfig import ArchiveConfig
from ..document.Region import Region
from ..link._syntax import BaseSyntax
from ..link.DomainMapper import DomainMapper
from ..link.group_links import group_links
from ..link.scan_links import scan_links
from ..log.DiagnosticLog import DiagnosticLog
from .ArchiveWorkflow import ArchiveWorkflow


def reset_region(region: Region, config: ArchiveConfig, syntax: BaseSyntax, log: DiagnosticLog) -> tuple[int, list[Path]]:
    """Collapse every canonical cluster of ``region`` to its resource link.

    Returns the number of clusters rewritten and the files deleted.
    """
    document = region.document
    links = scan_links(document, region, syntax, config.artifact_extension)
    canonical, _ = group_links(document, links, config.separator, config.order)
    workflow = ArchiveWorkflow(document, config, syntax, DomainMapper(config.domain_map), log)
    edits = []
    deleted: list[Path] = []
    for cluster in canonical:
        edit, removed = workflow.reset_cluster(cluster)
        deleted.extend(removed)
        if edit is not None:
            edits.append(edit)
    for edit in sorted(edits, key=lambda e: e.start, reverse=True):
        document.replace(edit.start, edit.end, edit.text)
    for occurrence in links:
        document.release(occurrence.start, occurrence.end)
    return len(edits), deleted
