"""Archive revert command."""

from pathlib import Path

from ..queue.Opcode import Opcode
from ..StageResult import StageResult
from ._run_pipeline import _run_pipeline


def cmd_revert(path: Path, cursor: int | None = None, start: int | None = None, end: int | None = None) -> StageResult:
    """Revert archived links whose artifact or companion is missing."""
    return _run_pipeline(f"Reverting links with missing files in {path}...", path, [Opcode.REVERT], cursor, start, end)
