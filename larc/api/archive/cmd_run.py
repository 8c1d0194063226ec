"""Archive run command."""

from pathlib import Path

from ..queue.Opcode import Opcode
from ..StageResult import StageResult
from ._run_pipeline import _run_pipeline


def cmd_run(path: Path, cursor: int | None = None, start: int | None = None, end: int | None = None) -> StageResult:
    """Archive the links of a document region."""
    return _run_pipeline(f"Archiving links in {path}...", path, [Opcode.ARCHIVE], cursor, start, end)
