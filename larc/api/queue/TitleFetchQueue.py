"""Sub-queue resolving titles of raw URLs."""

from collections.abc import Callable
from functools import partial
from pathlib import Path
from urllib.parse import urlsplit

from ..archive.artifact_name import artifact_name
from ..archive.ArtifactIndex import ArtifactIndex
from ..archive.ensure_infobar import ensure_infobar
from ..archive.read_artifact_meta import read_artifact_meta
from ..archive.url_hash import url_hash
from ..config.LarcConfig import LarcConfig
from ..link.DomainMapper import DomainMapper
from ..log.DiagnosticLog import DiagnosticLog
from .expand_command import expand_command
from .ProcessResult import ProcessResult
from .ProcessRunner import ProcessRunner
from .ResourceJob import ResourceJob
from .TitleResult import TitleResult
from ._BaseQueue import _BaseQueue

# Title used for the artifact name until the real title is known
PROVISIONAL_TITLE = "untitled"


class TitleFetchQueue(_BaseQueue):
    """Resolve the title of each job's URL.

    The fast path runs the title extractor. When it fails or prints nothing,
    the archival path archives the page once and reads the title from the
    artifact. Domains listed in ``slow_title_domains`` go straight to the
    archival path, and URLs already archived are answered from disk.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        config: LarcConfig,
        mapper: DomainMapper,
        log: DiagnosticLog,
        on_result: Callable[[TitleResult], None],
        on_empty: Callable[[], None] | None = None,
    ):
        super().__init__(runner, config, mapper, log, on_empty)
        self.on_result = on_result
        archive = config.archive
        self.index = ArtifactIndex(archive.artifact_dir, archive.hash_placement, archive.artifact_extension)

    def _is_slow(self, url: str) -> bool:
        host = (urlsplit(url).hostname or "").lower()
        return any(host == domain or host.endswith("." + domain) for domain in self.config.archive.slow_title_domains)

    def _record(self, job: ResourceJob, title: str) -> None:
        if job.occurrence is None or job.document is None:
            return
        self.on_result(TitleResult(document=job.document, occurrence=job.occurrence, title=title))

    def _start(self, job: ResourceJob) -> bool:
        existing = self.index.find(url_hash(job.url))
        if existing is not None:
            title = read_artifact_meta(existing).title
            if title:
                self.log.info(f"{self._progress()} Title of {job.url} read from {existing.name}")
                self._record(job, title)
                return False
        if self._is_slow(job.url):
            self.log.info(f"{self._progress()} Fetching title of {job.url} by archiving")
            self._spawn_archival(job)
        else:
            self.log.info(f"{self._progress()} Fetching title of {job.url}")
            self._spawn_fast(job)
        return True

    def _spawn_fast(self, job: ResourceJob) -> None:
        command = expand_command(self.config.tools.title_extractor, url=self.mapper.to_mirror(job.url))
        self.runner.spawn(command, partial(self._on_fast_exit, self.generation, job))

    def _spawn_archival(self, job: ResourceJob) -> None:
        archive = self.config.archive
        output = archive.artifact_dir / artifact_name(job.url, PROVISIONAL_TITLE, archive.hash_placement, archive.artifact_extension)
        output.parent.mkdir(parents=True, exist_ok=True)
        command = expand_command(self.config.tools.archiver, url=self.mapper.to_mirror(job.url), output=str(output))
        self.runner.spawn(command, partial(self._on_archival_exit, self.generation, job, output))

    def _on_fast_exit(self, generation: int, job: ResourceJob, result: ProcessResult) -> None:
        if not self._is_current(generation):
            return
        lines = result.stdout.strip().splitlines()
        title = lines[0].strip() if lines else ""
        if not result.ok or not title:
            self.log.info(f"Title extraction for {job.url} failed (exit {result.returncode}); falling back to archiving")
            self._spawn_archival(job)
            return
        self._record(job, title)
        self._finish()

    def _on_archival_exit(self, generation: int, job: ResourceJob, output: Path, result: ProcessResult) -> None:
        if not self._is_current(generation):
            return
        if not result.ok or not output.is_file():
            self.log.error(f"Archiving {job.url} for its title failed (exit {result.returncode})")
            self._release(job)
            self._finish()
            return
        ensure_infobar(output, job.url)
        title = read_artifact_meta(output).title
        if not title:
            self.log.error(f"Archived {job.url} but found no title in {output.name}")
            self._release(job)
            self._finish()
            return
        archive = self.config.archive
        canonical = output.with_name(artifact_name(job.url, title, archive.hash_placement, archive.artifact_extension))
        if canonical != output:
            output.replace(canonical)
            self.log.debug(f"Renamed {output.name} to {canonical.name}")
        self._record(job, title)
        self._finish()
