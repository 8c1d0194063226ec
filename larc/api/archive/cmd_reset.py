"""Archive reset command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.archive import ArchiveResetOutput
from ..config.LarcConfig import LarcConfig
from ..document.Document import Document
from ..document.track import track
from ..link._syntax import get_syntax
from ..log.DiagnosticLog import DiagnosticLog
from ..StageResult import StageResult
from ._command_region import _command_region
from .reset_region import reset_region


def cmd_reset(path: Path, cursor: int | None = None, start: int | None = None, end: int | None = None) -> StageResult:
    """Collapse archived link clusters back to their resource link and delete their files."""
    path = Path(path).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = LarcConfig.load()
            if not path.is_file():
                raise ValueError(f"Document not found: {path}")
            document = Document.open(path)
            syntax = get_syntax(file_path=document.path)
            region_start, region_end = _command_region(document, syntax, config.archive, cursor, start, end)
        except ValueError as e:
            failed = ArchiveResetOutput(errors=[str(e)], path=str(path), region=[], reset=0, deleted=[], saved=False)
            result_obj.finish(str(e), failed, False)
            return

        yield (0.4, f"Resetting links in {region_start}-{region_end}...")
        log = DiagnosticLog(LarcConfig.get_logfile_path(), "archive", config.log.level)
        region = track(document, region_start, region_end)
        count, deleted = reset_region(region, config.archive, syntax, log)
        region.release()

        yield (0.8, "Saving document...")
        saved = document.modified
        document.save()
        document.close()

        output = ArchiveResetOutput(
            errors=log.messages("ERROR"),
            warnings=log.messages("WARN"),
            path=str(path),
            region=[region_start, region_end],
            reset=count,
            deleted=[str(p) for p in deleted],
            saved=saved,
        )
        result_obj.finish(f"Reset {count} cluster(s), deleted {len(deleted)} file(s)", output)
        yield (1.0, "Complete")

    return StageResult(announce=f"Resetting archived links in {path}...", progress_callback=do_work)
