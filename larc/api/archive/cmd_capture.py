"""Archive capture command."""

from pathlib import Path

from ..queue.Opcode import Opcode
from ..StageResult import StageResult
from ._run_pipeline import _run_pipeline


def cmd_capture(path: Path, cursor: int | None = None, start: int | None = None, end: int | None = None) -> StageResult:
    """Fetch titles, then archive the links of a document region."""
    return _run_pipeline(f"Capturing links in {path}...", path, [Opcode.FETCH, Opcode.UPDATE, Opcode.ARCHIVE], cursor, start, end)
