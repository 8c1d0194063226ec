"""Per-cluster archive, reset and revert logic."""

from collections.abc import Callable
from datetime import date
from pathlib import Path
from urllib.parse import urlsplit

from ..config.ArchiveConfig import ArchiveConfig
from ..document.Document import Document
from ..link._syntax import BaseSyntax
from ..link.DomainMapper import DomainMapper
from ..link.LinkCluster import LinkCluster
from ..link.LinkKind import LinkKind
from ..link.LinkOccurrence import LinkOccurrence
from ..log.DiagnosticLog import DiagnosticLog
from ..queue.ResourceJob import ResourceJob
from .artifact_name import artifact_name
from .ArtifactIndex import ArtifactIndex
from .ClusterEdit import ClusterEdit
from .normalize_url import normalize_url
from .read_artifact_meta import read_artifact_meta
from .read_companion_meta import read_companion_meta
from .relative_target import relative_target
from .resolve_target import resolve_target
from .url_hash import url_hash
from .write_companion_meta import write_companion_meta
from .write_redirect_stub import write_redirect_stub

# Candidate precedence when resolving a cluster's URL and title
_CANDIDATE_ORDER = (LinkKind.COMPANION, LinkKind.ARTIFACT, LinkKind.URL)


class ArchiveWorkflow:
    """Compute replacements for the link clusters of one document.

    Nothing here mutates the document: every method returns a ``ClusterEdit``
    (or None) and the caller applies them in reverse document order. Download
    work is collected in ``jobs``, at most one job per URL hash.
    """

    def __init__(
        self,
        document: Document,
        config: ArchiveConfig,
        syntax: BaseSyntax,
        mapper: DomainMapper,
        log: DiagnosticLog,
        today: Callable[[], str] | None = None,
    ):
        self.document = document
        self.config = config
        self.syntax = syntax
        self.mapper = mapper
        self.log = log
        self.today = today or (lambda: date.today().isoformat())
        self.index = ArtifactIndex(config.artifact_dir, config.hash_placement, config.artifact_extension)
        self.jobs: list[ResourceJob] = []
        self._pending: dict[str, Path] = {}

    # Identity resolution

    def _candidates(self, occurrences: list[LinkOccurrence]) -> tuple[list[str], list[str]]:
        urls: list[str] = []
        titles: list[str] = []
        for kind in _CANDIDATE_ORDER:
            for occurrence in occurrences:
                if occurrence.kind != kind:
                    continue
                if kind == LinkKind.COMPANION:
                    meta = read_companion_meta(resolve_target(self.document, occurrence.target), self.syntax)
                    urls.append(meta.get("url", ""))
                    titles.append(meta.get("title", ""))
                elif kind == LinkKind.ARTIFACT:
                    artifact = read_artifact_meta(resolve_target(self.document, occurrence.target))
                    urls.append(artifact.anchor_url or "")
                    titles.append(artifact.title or "")
                else:
                    urls.append(occurrence.target)
                    if occurrence.label != occurrence.target:
                        titles.append(occurrence.label)
        return [self.mapper.to_origin(u) for u in urls if u], [t for t in titles if t]

    def _identity(self, cluster: LinkCluster) -> tuple[str | None, str | None, list[LinkOccurrence]]:
        """First URL and title candidates, and the occurrences they came from."""
        occurrences = list(cluster.occurrences)
        urls, titles = self._candidates(occurrences)
        if len(occurrences) > 1 and len({normalize_url(u) for u in urls}) > 1:
            self.log.warn(f"Links at {cluster.start} point at different URLs; keeping only the resource links")
            occurrences = cluster.of_kind(LinkKind.URL)
            urls, titles = self._candidates(occurrences)
        url = urls[0] if urls else None
        title = titles[0] if titles else None
        return url, title, occurrences

    def _referenced_files(self, cluster: LinkCluster) -> list[Path]:
        return [
            resolve_target(self.document, occurrence.target)
            for occurrence in cluster.occurrences
            if occurrence.kind in (LinkKind.ARTIFACT, LinkKind.COMPANION)
        ]

    # Archive

    def _ensure_artifact(self, url: str, title: str, canonical: Path) -> None:
        digest = url_hash(url)
        existing = self.index.find(digest, preferred=canonical)
        if existing is None:
            existing = self._pending.get(digest)
        if existing is None:
            self.jobs.append(ResourceJob(url=url, name=canonical.name))
            self._pending[digest] = canonical
            self.log.debug(f"Queued download of {url} to {canonical.name}")
            return
        if existing.resolve() != canonical.resolve():
            write_redirect_stub(canonical, existing, title, url)
            self.log.info(f"Reusing {existing.name} for {url} through {canonical.name}")

    def _link_target(self, path: Path) -> str:
        return relative_target(path, self.document.directory)

    def _create_companion(self, path: Path, url: str, title: str, artifact: Path, fields: dict[str, str]) -> None:
        base = path.parent
        legs = [
            self.syntax.format_link(url, self.config.label_for(LinkKind.URL, fields)),
            self.syntax.format_link(relative_target(artifact, base), self.config.label_for(LinkKind.ARTIFACT, fields)),
        ]
        if write_companion_meta(path, self.syntax, title, url, fields["date"], self.config.separator.join(legs)):
            self.log.info(f"Created companion {path.name}")

    def archive_cluster(self, cluster: LinkCluster) -> ClusterEdit | None:
        """Rewrite a non-canonical cluster into the configured archive order."""
        url, title, occurrences = self._identity(cluster)
        if not url or not title:
            self.log.info(f"Skipping links at {cluster.start}: no {'URL' if not url else 'title'} available")
            return None

        name = artifact_name(url, title, self.config.hash_placement, self.config.artifact_extension)
        artifact = self.config.artifact_dir / name
        companion = self.config.companion_dir / (Path(name).stem + self.syntax.companion_extension)
        order = self.config.order
        if LinkKind.ARTIFACT in order or LinkKind.COMPANION in order:
            self._ensure_artifact(url, title, artifact)

        fields = {"title": title, "url": url, "domain": urlsplit(url).hostname or "", "date": self.today()}
        legs: list[tuple[LinkKind, str, str]] = []
        for occurrence in occurrences:
            if occurrence.kind in order:
                legs.append((occurrence.kind, occurrence.target, self.config.label_for(occurrence.kind, fields)))
        present = {kind for kind, _, _ in legs}
        for kind in order:
            if kind in present:
                continue
            if kind == LinkKind.URL:
                target = url
            elif kind == LinkKind.ARTIFACT:
                target = self._link_target(artifact)
            else:
                self._create_companion(companion, url, title, artifact, fields)
                target = self._link_target(companion)
            legs.append((kind, target, self.config.label_for(kind, fields)))

        unique: list[tuple[LinkKind, str, str]] = []
        for leg in legs:
            if leg not in unique:
                unique.append(leg)
        chosen = []
        for kind in order:
            for leg_kind, target, label in unique:
                if leg_kind == kind:
                    chosen.append(self.syntax.format_link(target, label))
                    break
        text = self.config.separator.join(chosen)
        if text == self.document.substring(cluster.start, cluster.end):
            return None
        return ClusterEdit(cluster.start, cluster.end, text)

    # Reset and revert

    def reset_cluster(self, cluster: LinkCluster) -> tuple[ClusterEdit | None, list[Path]]:
        """Collapse an archived cluster back to its resource link.

        Returns the edit and the files deleted. A cluster none of whose
        referenced files exist is left untouched.
        """
        url, title, _ = self._identity(cluster)
        if not url:
            return None, []
        existing = [path for path in self._referenced_files(cluster) if path.is_file()]
        if not existing:
            return None, []
        deleted: list[Path] = []
        if self.config.delete_on_reset:
            for path in existing:
                path.unlink()
                deleted.append(path)
                self.log.info(f"Deleted {path}")
        return ClusterEdit(cluster.start, cluster.end, self.syntax.format_link(url, title or url)), deleted

    def revert_cluster(self, cluster: LinkCluster) -> ClusterEdit | None:
        """Collapse a canonical cluster whose artifact or companion is missing."""
        missing = [path for path in self._referenced_files(cluster) if not path.is_file()]
        if not missing:
            return None
        url, title, _ = self._identity(cluster)
        if not url:
            self.log.warn(f"Cannot revert links at {cluster.start}: no URL available")
            return None
        self.log.info(f"Reverting {url}: missing {', '.join(path.name for path in missing)}")
        return ClusterEdit(cluster.start, cluster.end, self.syntax.format_link(url, title or url))
