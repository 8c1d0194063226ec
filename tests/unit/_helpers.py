"""Test helpers: config builders, command runner and a scripted process runner."""

from collections.abc import Callable
from functools import partial
from pathlib import Path

from larc.api.config.LarcConfig import LarcConfig
from larc.api.queue.ProcessResult import ProcessResult


def minimal_config_dict(base_dir: Path) -> dict:
    """Minimal valid larc configuration dict with directories under ``base_dir``."""
    return {
        "archive": {
            "artifact_dir": str(base_dir / "archive"),
            "companion_dir": str(base_dir / "notes"),
            "order": ["url", "artifact"],
        },
        "tools": {},
        "log": {"level": "DEBUG", "retention_days": {"DEBUG": 0.5, "INFO": 1.0}},
    }


def minimal_larc_config(base_dir: Path, **archive) -> LarcConfig:
    data = minimal_config_dict(base_dir)
    data["archive"].update(archive)
    return LarcConfig(**data)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def page_html(title: str, body: str = "<p>content</p>") -> str:
    return f"<html><head><title>{title}</title></head><body>{body}</body></html>"


class FakeWeb:
    """Answers the default title extractor and archiver commands without a network.

    ``titles`` maps URLs to what the title extractor prints, ``pages`` maps
    URLs to the title of the page the archiver writes. URLs in ``failing``
    make both tools exit with status 1.
    """

    def __init__(self, titles: dict[str, str] | None = None, pages: dict[str, str] | None = None, failing=()):
        self.titles = titles or {}
        self.pages = pages or {}
        self.failing = set(failing)

    def __call__(self, command: list[str]) -> ProcessResult:
        joined = " ".join(command)
        if "_extract_title" in joined:
            url = command[-1]
            if url in self.failing or url not in self.titles:
                return ProcessResult(1, "", "fetch failed")
            return ProcessResult(0, self.titles[url] + "\n")
        if "_archive_page" in joined:
            url, output = command[-2], Path(command[-1])
            if url in self.failing:
                return ProcessResult(1, "", "fetch failed")
            output.write_text(page_html(self.pages.get(url, "Archived Page")), encoding="utf-8")
            return ProcessResult(0)
        return ProcessResult(127, "", "unknown command")


class FakeRunner:
    """In-process stand-in for ProcessRunner.

    Spawned commands are answered by ``responder`` when their completion is
    pumped through ``wait_next``, in spawn order.
    """

    def __init__(self, responder: Callable[[list[str]], ProcessResult] | None = None):
        self.responder = responder or (lambda command: ProcessResult(0))
        self.commands: list[list[str]] = []
        self._outstanding: list[tuple[int, list[str], Callable[[ProcessResult], None]]] = []
        self._killed: set[int] = set()

    @property
    def pending(self) -> int:
        return len(self._outstanding)

    def spawn(self, command: list[str], on_exit: Callable[[ProcessResult], None]) -> int:
        handle = len(self.commands)
        self.commands.append(command)
        self._outstanding.append((handle, command, on_exit))
        return handle

    def terminate(self, handle: int) -> None:
        self._killed.add(handle)

    def terminate_all(self) -> None:
        for handle, _, _ in self._outstanding:
            self._killed.add(handle)

    def wait_next(self, timeout: float | None = None):  # noqa: ARG002
        if not self._outstanding:
            return None
        handle, command, on_exit = self._outstanding.pop(0)
        result = ProcessResult(-15) if handle in self._killed else self.responder(command)
        return partial(on_exit, result)
