"""Single-threaded scheduler of document operations."""

from collections import Counter, deque
from collections.abc import Iterator

from ..archive.ArchiveWorkflow import ArchiveWorkflow
from ..archive.ClusterEdit import ClusterEdit
from ..config.LarcConfig import LarcConfig
from ..document.Document import Document
from ..document.Region import Region
from ..document.track import track
from ..link._syntax import BaseSyntax, get_syntax
from ..link.DomainMapper import DomainMapper
from ..link.group_links import group_links
from ..link.LinkOccurrence import LinkOccurrence
from ..link.scan_links import scan_links
from ..link.scan_raw_urls import scan_raw_urls
from ..log.DiagnosticLog import DiagnosticLog
from .DownloadQueue import DownloadQueue
from .Opcode import Opcode
from .OperationEntry import OperationEntry
from .ProcessRunner import ProcessRunner
from .ResourceJob import ResourceJob
from .TitleFetchQueue import TitleFetchQueue
from .TitleResult import TitleResult


class OperationScheduler:
    """FIFO of operations on document regions, run one at a time.

    ``fetch`` and ``archive`` hand work to a sub-queue and stay current until
    that sub-queue reports empty; ``update`` and ``revert`` complete
    synchronously. Queued and current regions of one document never overlap.
    Everything runs on the thread that calls ``drain``/``run_until_idle``.
    """

    def __init__(
        self,
        config: LarcConfig,
        runner: ProcessRunner | None = None,
        log: DiagnosticLog | None = None,
        syntax: BaseSyntax | None = None,
    ):
        self.config = config
        self.runner = runner or ProcessRunner()
        self.log = log or DiagnosticLog(LarcConfig.get_logfile_path(), "queue", config.log.level)
        self.syntax = syntax
        self.mapper = DomainMapper(config.archive.domain_map)
        self.fifo: deque[OperationEntry] = deque()
        self.current: OperationEntry | None = None
        self.titles: list[TitleResult] = []
        self.stats: Counter[str] = Counter()
        self.downloads = DownloadQueue(self.runner, config, self.mapper, self.log, on_empty=self._on_downloads_empty)
        self.title_fetches = TitleFetchQueue(
            self.runner, config, self.mapper, self.log, on_result=self.titles.append, on_empty=self._on_titles_empty
        )
        self._draining = False

    @property
    def is_idle(self) -> bool:
        return not self.fifo and self.current is None and self.downloads.idle and self.title_fetches.idle

    def _syntax_for(self, document: Document) -> BaseSyntax:
        return self.syntax or get_syntax(file_path=document.path)

    # Admission

    def _conflict(self, subject: Document, region: Region) -> OperationEntry | None:
        active = list(self.fifo)
        if self.current is not None:
            active.append(self.current)
        for entry in active:
            if entry.subject is subject and entry.region.overlaps(region):
                return entry
        return None

    def _reject(self, opcode: Opcode, region: Region, conflict: OperationEntry) -> bool:
        self.log.warn(
            f"Rejected {opcode.value} on {region.start.position}-{region.end.position}: "
            f"overlaps queued {conflict.opcode.value} on {conflict.region.start.position}-{conflict.region.end.position}"
        )
        return False

    def enqueue(self, subject: Document, region: Region, opcode: Opcode) -> bool:
        """Queue ``opcode`` on ``region``. Returns False when the region overlaps queued work."""
        conflict = self._conflict(subject, region)
        if conflict is not None:
            return self._reject(opcode, region, conflict)
        self.fifo.append(OperationEntry(subject, region, opcode))
        return True

    def enqueue_all(self, subject: Document, region: Region, opcodes: list[Opcode]) -> bool:
        """Queue a sequence of opcodes over one region.

        Each entry after the first tracks its own copy of the region so that
        releasing one entry's markers leaves the others valid.
        """
        if not opcodes:
            return True
        conflict = self._conflict(subject, region)
        if conflict is not None:
            return self._reject(opcodes[0], region, conflict)
        start, end = region.resolve()
        for index, opcode in enumerate(opcodes):
            entry_region = region if index == 0 else track(subject, start, end)
            self.fifo.append(OperationEntry(subject, entry_region, opcode))
        return True

    # Dispatch

    def drain(self) -> None:
        """Start queued operations until one is waiting on a sub-queue."""
        if self._draining:
            return
        self._draining = True
        try:
            while self.fifo and self.current is None and self.downloads.idle and self.title_fetches.idle:
                entry = self.fifo.popleft()
                if entry.subject.closed:
                    self.log.debug(f"Skipped {entry.opcode.value}: document closed")
                    continue
                self.current = entry
                if not self._dispatch(entry):
                    self._finish(entry)
        finally:
            self._draining = False

    def _dispatch(self, entry: OperationEntry) -> bool:
        """Run ``entry``. Returns True when it waits on a sub-queue."""
        handlers = {
            Opcode.FETCH: self._fetch,
            Opcode.UPDATE: self._update,
            Opcode.ARCHIVE: self._archive,
            Opcode.REVERT: self._revert,
        }
        return handlers[entry.opcode](entry)

    def _finish(self, entry: OperationEntry) -> None:
        entry.region.release()
        if self.current is entry:
            self.current = None

    def _on_titles_empty(self) -> None:
        if self.current is not None and self.current.opcode == Opcode.FETCH:
            self._finish(self.current)
        self.drain()

    def _on_downloads_empty(self) -> None:
        if self.current is not None and self.current.opcode == Opcode.ARCHIVE:
            self._finish(self.current)
        self.drain()

    @staticmethod
    def _release(document: Document, occurrences: list[LinkOccurrence]) -> None:
        for occurrence in occurrences:
            document.release(occurrence.start, occurrence.end)

    def _apply(self, document: Document, edits: list[ClusterEdit]) -> None:
        for edit in sorted(edits, key=lambda e: e.start, reverse=True):
            document.replace(edit.start, edit.end, edit.text)

    def _fetch(self, entry: OperationEntry) -> bool:
        document = entry.subject
        syntax = self._syntax_for(document)
        links = scan_links(document, entry.region, syntax, self.config.archive.artifact_extension)
        covered = [occurrence.span for occurrence in links] + syntax.covered_spans(document.text)
        raw = scan_raw_urls(document, entry.region, covered)
        self._release(document, links)
        if not raw:
            self.log.info("No bare URLs to fetch titles for")
            return False
        jobs = [ResourceJob(url=self.mapper.to_origin(o.target), occurrence=o, document=document) for o in raw]
        self.log.info(f"Fetching titles for {len(jobs)} URL(s)")
        self.title_fetches.enqueue_all(jobs)
        return True

    def _update(self, entry: OperationEntry) -> bool:
        document = entry.subject
        syntax = self._syntax_for(document)
        start, end = entry.region.resolve()
        mine = [
            result
            for result in self.titles
            if result.document is document
            and start <= result.occurrence.start.position
            and result.occurrence.end.position <= end
        ]
        self.titles[:] = [result for result in self.titles if all(result is not m for m in mine)]
        for result in sorted(mine, key=lambda r: r.occurrence.start.position, reverse=True):
            occurrence = result.occurrence
            span_start, span_end = occurrence.span
            if document.substring(span_start, span_end) != occurrence.target:
                self.log.warn(f"Text of {occurrence.target} changed before its title arrived; left as is")
            else:
                url = self.mapper.to_origin(occurrence.target)
                document.replace(span_start, span_end, syntax.format_link(url, result.title))
                self.stats["titles"] += 1
            self._release(document, [occurrence])
        return False

    def _archive(self, entry: OperationEntry) -> bool:
        document = entry.subject
        syntax = self._syntax_for(document)
        archive = self.config.archive
        links = scan_links(document, entry.region, syntax, archive.artifact_extension)
        _, other = group_links(document, links, archive.separator, archive.order)
        workflow = ArchiveWorkflow(document, archive, syntax, self.mapper, self.log)
        edits = []
        for cluster in other:
            edit = workflow.archive_cluster(cluster)
            if edit is not None:
                edits.append(edit)
        self._apply(document, edits)
        self._release(document, links)
        self.stats["clusters"] += len(edits)
        self.stats["downloads"] += len(workflow.jobs)
        if not workflow.jobs:
            return False
        self.downloads.enqueue_all(workflow.jobs)
        return True

    def _revert(self, entry: OperationEntry) -> bool:
        document = entry.subject
        syntax = self._syntax_for(document)
        archive = self.config.archive
        links = scan_links(document, entry.region, syntax, archive.artifact_extension)
        canonical, _ = group_links(document, links, archive.separator, archive.order)
        workflow = ArchiveWorkflow(document, archive, syntax, self.mapper, self.log)
        edits = []
        for cluster in canonical:
            edit = workflow.revert_cluster(cluster)
            if edit is not None:
                edits.append(edit)
        self._apply(document, edits)
        self._release(document, links)
        self.stats["reverted"] += len(edits)
        return False

    # Control

    def kill_all(self) -> None:
        """Stop every process and forget all queued work. Document text is left as is."""
        self.runner.terminate_all()
        self.downloads.reset()
        self.title_fetches.reset()
        for entry in self.fifo:
            entry.region.release()
        self.fifo.clear()
        if self.current is not None:
            self.current.region.release()
            self.current = None
        for result in self.titles:
            result.document.release(result.occurrence.start, result.occurrence.end)
        self.titles.clear()
        self.log.warn("Killed all operations")

    def pump(self) -> Iterator[None]:
        """Deliver process completions until idle, yielding after each one."""
        self.drain()
        while not self.is_idle:
            deliver = self.runner.wait_next()
            if deliver is None:
                self.log.error("Queue is not idle but no process is running")
                return
            deliver()
            yield None

    def run_until_idle(self) -> None:
        for _ in self.pump():
            pass
