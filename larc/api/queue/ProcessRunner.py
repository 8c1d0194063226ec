"""Spawn external processes and deliver their exits on the pumping thread."""

import contextlib
import os
import queue
import shutil
import signal
import subprocess
import threading
from collections.abc import Callable
from functools import partial

from .MissingToolError import MissingToolError
from .ProcessResult import ProcessResult


class ProcessRunner:
    """Run commands in the background and hand back their completions.

    Each spawned process gets a watcher thread that waits for it to exit and
    posts the completion onto an event queue. Completions are only delivered
    by ``wait_next()``, so ``on_exit`` always runs on the thread that pumps
    the runner, exactly once per spawn.
    """

    def __init__(self):
        self._events: queue.Queue[tuple[int, Callable[[ProcessResult], None], ProcessResult]] = queue.Queue()
        self._processes: dict[int, subprocess.Popen] = {}
        self._lock = threading.Lock()

    @property
    def pending(self) -> int:
        """Number of spawned processes whose completion has not been delivered."""
        with self._lock:
            return len(self._processes)

    def spawn(self, command: list[str], on_exit: Callable[[ProcessResult], None]) -> int:
        """Start ``command`` and return its handle."""
        if not command or shutil.which(command[0]) is None:
            raise MissingToolError(f"Executable not found: {command[0] if command else '<empty command>'}")
        process = subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            start_new_session=True,
        )
        with self._lock:
            self._processes[process.pid] = process
        watcher = threading.Thread(target=self._watch, args=(process, on_exit), daemon=True)
        watcher.start()
        return process.pid

    def _watch(self, process: subprocess.Popen, on_exit: Callable[[ProcessResult], None]) -> None:
        stdout, stderr = process.communicate()
        self._events.put((process.pid, on_exit, ProcessResult(process.returncode, stdout or "", stderr or "")))

    def terminate(self, handle: int) -> None:
        """Signal the process group of ``handle``, so children of the command stop too."""
        with self._lock:
            process = self._processes.get(handle)
        if process is not None and process.poll() is None:
            with contextlib.suppress(ProcessLookupError):
                os.killpg(process.pid, signal.SIGTERM)

    def terminate_all(self) -> None:
        with self._lock:
            handles = list(self._processes)
        for handle in handles:
            self.terminate(handle)

    def wait_next(self, timeout: float | None = None) -> Callable[[], None] | None:
        """Block for the next completion.

        Returns a zero-argument callable delivering it, or None when nothing
        is outstanding or ``timeout`` expires.
        """
        if not self.pending:
            return None
        try:
            handle, on_exit, result = self._events.get(timeout=timeout)
        except queue.Empty:
            return None
        with self._lock:
            self._processes.pop(handle, None)
        return partial(on_exit, result)
