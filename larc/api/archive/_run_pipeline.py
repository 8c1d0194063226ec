"""Shared body of the commands that queue operations on a document."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.archive import ArchivePipelineOutput
from ..config.LarcConfig import LarcConfig
from ..document.Document import Document
from ..document.track import track
from ..link._syntax import get_syntax
from ..log.DiagnosticLog import DiagnosticLog
from ..queue.check_tools import check_tools
from ..queue.MissingToolError import MissingToolError
from ..queue.Opcode import Opcode
from ..queue.OperationScheduler import OperationScheduler
from ..StageResult import StageResult
from ._command_region import _command_region

# Opcodes that spawn external tools
_TOOL_OPCODES = (Opcode.FETCH, Opcode.ARCHIVE)


def _failed(result_obj: StageResult, path: Path, opcodes: list[Opcode], message: str) -> None:
    output = ArchivePipelineOutput(
        errors=[message],
        warnings=[],
        path=str(path),
        region=[],
        opcodes=[opcode.value for opcode in opcodes],
        titles=0,
        clusters=0,
        downloads=0,
        reverted=0,
        saved=False,
    )
    result_obj.finish(message, output, False)


def _run_pipeline(
    announce: str,
    path: Path,
    opcodes: list[Opcode],
    cursor: int | None = None,
    start: int | None = None,
    end: int | None = None,
) -> StageResult:
    """Queue ``opcodes`` over a region of the document at ``path`` and run them to completion."""
    path = Path(path).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        try:
            config = LarcConfig.load()
            if any(opcode in _TOOL_OPCODES for opcode in opcodes):
                check_tools(config.tools)
        except (ValueError, MissingToolError) as e:
            _failed(result_obj, path, opcodes, str(e))
            return

        if not path.is_file():
            _failed(result_obj, path, opcodes, f"Document not found: {path}")
            return

        yield (0.1, "Reading document...")
        document = Document.open(path)
        syntax = get_syntax(file_path=document.path)
        try:
            region_start, region_end = _command_region(document, syntax, config.archive, cursor, start, end)
        except ValueError as e:
            _failed(result_obj, path, opcodes, str(e))
            return

        log = DiagnosticLog(LarcConfig.get_logfile_path(), "archive", config.log.level)
        scheduler = OperationScheduler(config, log=log, syntax=syntax)
        if not scheduler.enqueue_all(document, track(document, region_start, region_end), opcodes):
            _failed(result_obj, path, opcodes, f"Region {region_start}-{region_end} overlaps queued work")
            return

        yield (0.2, f"Running {', '.join(opcode.value for opcode in opcodes)} on {region_start}-{region_end}...")
        interrupted = False
        try:
            for _ in scheduler.pump():
                message = log.entries[-1][1] if log.entries else "Working..."
                yield (0.5, message)
        except KeyboardInterrupt:
            scheduler.kill_all()
            interrupted = True

        yield (0.9, "Saving document...")
        saved = document.modified
        document.save()
        document.close()

        errors = log.messages("ERROR")
        warnings = log.messages("WARN")
        stats = scheduler.stats
        summary = (
            f"{stats['titles']} title(s), {stats['clusters']} cluster(s), "
            f"{stats['downloads']} download(s), {stats['reverted']} reverted"
        )
        if interrupted:
            result = f"Interrupted; kept completed edits ({summary})"
        elif errors:
            result = f"Completed with {len(errors)} error(s): {summary}"
        else:
            result = f"Completed: {summary}"
        output = ArchivePipelineOutput(
            errors=errors,
            warnings=warnings,
            path=str(path),
            region=[region_start, region_end],
            opcodes=[opcode.value for opcode in opcodes],
            titles=stats["titles"],
            clusters=stats["clusters"],
            downloads=stats["downloads"],
            reverted=stats["reverted"],
            saved=saved,
        )
        result_obj.finish(result, output, not interrupted)
        yield (1.0, "Complete")

    return StageResult(announce=announce, progress_callback=do_work)
