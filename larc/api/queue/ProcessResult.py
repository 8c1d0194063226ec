"""Process result dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured output of an external process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0
