"""Shared draining logic of the resource sub-queues."""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterable

from ..config.LarcConfig import LarcConfig
from ..link.DomainMapper import DomainMapper
from ..log.DiagnosticLog import DiagnosticLog
from .ProcessRunner import ProcessRunner
from .ResourceJob import ResourceJob


class _BaseQueue(ABC):
    """FIFO of resource jobs with at most one job in flight.

    Subclasses implement ``_start``; it either spawns a process (returning
    True) and later calls ``_finish``, or handles the job synchronously
    (returning False).
    """

    def __init__(
        self,
        runner: ProcessRunner,
        config: LarcConfig,
        mapper: DomainMapper,
        log: DiagnosticLog,
        on_empty: Callable[[], None] | None = None,
    ):
        self.runner = runner
        self.config = config
        self.mapper = mapper
        self.log = log
        self.on_empty = on_empty
        self.pending: deque[ResourceJob] = deque()
        self.busy = False
        self.active: ResourceJob | None = None
        self.total = 0
        self.done = 0
        self.generation = 0
        self._notified = True

    @property
    def idle(self) -> bool:
        return not self.busy and not self.pending

    def enqueue_all(self, jobs: Iterable[ResourceJob]) -> None:
        """Replace the pending sequence with ``jobs`` and start draining."""
        self.pending = deque(jobs)
        self.total = len(self.pending)
        self.done = 0
        self._notified = False
        self.drain()

    def drain(self) -> None:
        while not self.busy and self.pending:
            job = self.pending.popleft()
            self.done += 1
            self.active = job
            self.busy = self._start(job)
            if not self.busy:
                self.active = None
        if self.idle and not self._notified:
            self._notified = True
            if self.on_empty is not None:
                self.on_empty()

    def reset(self) -> None:
        """Forget all jobs; completions of jobs already spawned are ignored."""
        for job in [*self.pending, self.active]:
            if job is not None:
                self._release(job)
        self.pending.clear()
        self.active = None
        self.busy = False
        self.total = 0
        self.done = 0
        self.generation += 1
        self._notified = True

    def _progress(self) -> str:
        return f"[{self.done}/{self.total}]"

    def _is_current(self, generation: int) -> bool:
        return generation == self.generation

    @staticmethod
    def _release(job: ResourceJob) -> None:
        if job.occurrence is not None and job.document is not None:
            job.document.release(job.occurrence.start, job.occurrence.end)

    def _finish(self) -> None:
        self.busy = False
        self.active = None
        self.drain()

    @abstractmethod
    def _start(self, job: ResourceJob) -> bool:
        """Begin ``job``. Returns True when a process was spawned for it."""
        pass
