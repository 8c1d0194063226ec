"""Sub-queue archiving resources into artifacts."""

from functools import partial
from pathlib import Path

from ..archive.ensure_infobar import ensure_infobar
from .expand_command import expand_command
from .ProcessResult import ProcessResult
from .ResourceJob import ResourceJob
from ._BaseQueue import _BaseQueue


class DownloadQueue(_BaseQueue):
    """Run the configured archiver for each job, one at a time.

    Failures are logged and never escalated; draining continues.
    """

    def _start(self, job: ResourceJob) -> bool:
        output = self.config.archive.artifact_dir / job.name
        output.parent.mkdir(parents=True, exist_ok=True)
        command = expand_command(self.config.tools.archiver, url=self.mapper.to_mirror(job.url), output=str(output))
        self.log.info(f"{self._progress()} Archiving {job.url}")
        self.runner.spawn(command, partial(self._on_exit, self.generation, job, output))
        return True

    def _on_exit(self, generation: int, job: ResourceJob, output: Path, result: ProcessResult) -> None:
        if not self._is_current(generation):
            return
        if result.ok and output.is_file():
            ensure_infobar(output, job.url)
            self.log.info(f"Archived {job.url} to {output.name}")
        else:
            detail = result.stderr.strip().splitlines()[-1] if result.stderr.strip() else "no output written"
            self.log.error(f"Archiving {job.url} failed (exit {result.returncode}): {detail}")
        self._finish()
