"""Interface of command output renderers."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Renders the stages of a ``StageResult``.

    Messages (announce, progress, result, warnings) and structured output go
    to separate channels so that output can be piped.
    """

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print ``data``; ``format`` selects ``"yaml"`` (default) or ``"json"``."""
        pass
