"""Archive fetch command."""

from pathlib import Path

from ..queue.Opcode import Opcode
from ..StageResult import StageResult
from ._run_pipeline import _run_pipeline


def cmd_fetch(path: Path, cursor: int | None = None, start: int | None = None, end: int | None = None) -> StageResult:
    """Fetch titles of bare URLs and write them as links."""
    return _run_pipeline(f"Fetching titles in {path}...", path, [Opcode.FETCH, Opcode.UPDATE], cursor, start, end)
