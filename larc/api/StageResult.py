"""Return value of every API command."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel


@dataclass
class StageResult:
    """Four stages of a command: announce, progress, result, output.

    Nothing runs until the caller iterates ``progress_callback(self)``; the
    generator yields ``(fraction, message)`` pairs and must call ``finish``
    before it returns.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def finish(self, result: str, output: BaseModel, success: bool = True) -> None:
        self.result = result
        self.output = output.model_dump(mode="python")
        self.success = success
