"""Periodic real-time style tasks on threads, with deadline tracking."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from .constants import MAX_TASKS
from .task_time import Timespec, time_cmp

_NSEC_PER_USEC = 1_000
_NSEC_PER_MSEC = 1_000_000
_ACTIVATION_POLL = 0.05  # seconds between checks for cancellation while waiting

TaskFunction = Callable[["TaskScheduler", int, Any], Any]


class TimeUnit(Enum):
    """Resolution of :meth:`TaskScheduler.sys_time`."""

    MICRO = 0
    MILLI = 1


@dataclass(eq=False)
class TaskParams:
    """Bookkeeping for one task slot."""

    index: int
    arg: Any = None
    period: int = 0  # ms
    deadline: int = 0  # relative, ms
    priority: int = 0
    dmiss: int = 0
    at: Timespec = field(default_factory=Timespec)  # next activation
    dl: Timespec = field(default_factory=Timespec)  # absolute deadline
    thread: threading.Thread | None = None
    activation: threading.Semaphore = field(default_factory=lambda: threading.Semaphore(0))
    stop: threading.Event = field(default_factory=threading.Event)


class TaskScheduler:
    """A fixed table of periodic tasks, each running on its own thread.

    Task functions are called as ``func(scheduler, index, arg)``. Threads
    cannot be killed, so cancellation is cooperative: a task should leave
    its loop once :meth:`cancelled` reports true.
    """

    def __init__(self, policy: Any = None, max_tasks: int = MAX_TASKS) -> None:
        self.policy = policy
        self.t0 = Timespec.now()
        self.tasks: list[TaskParams] = [TaskParams(i) for i in range(max_tasks)]
        self._used = [False] * max_tasks
        self._lock = threading.Lock()
        self.activated = 0

    def _task(self, index: int) -> TaskParams:
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"task index {index} out of range")
        return self.tasks[index]

    def sys_time(self, unit: TimeUnit = TimeUnit.MILLI) -> int:
        """Time elapsed since the scheduler started, in the given unit."""
        elapsed = Timespec.now().to_ns() - self.t0.to_ns()
        if TimeUnit(unit) is TimeUnit.MICRO:
            return elapsed // _NSEC_PER_USEC
        return elapsed // _NSEC_PER_MSEC

    def create(
        self,
        func: TaskFunction,
        index: int,
        arg: Any,
        period: int,
        deadline: int,
        priority: int,
        activate: bool = True,
    ) -> threading.Thread:
        """Start ``func`` on a new thread in slot ``index`` and return the thread."""
        task = self._task(index)
        with self._lock:
            self._used[index] = True
        task.arg = arg
        task.period = period
        task.deadline = deadline
        task.priority = priority
        task.dmiss = 0
        task.activation = threading.Semaphore(0)
        task.stop = threading.Event()
        thread = threading.Thread(
            target=func, args=(self, index, arg), name=f"task-{index}", daemon=True
        )
        task.thread = thread
        thread.start()
        if activate:
            self.activate(index)
        return thread

    def activate(self, index: int) -> None:
        """Release a task waiting in :meth:`wait_for_activation`."""
        self._task(index).activation.release()
        with self._lock:
            self.activated += 1

    def deactivate(self, index: int) -> None:
        """Ask a task to stop and free its slot."""
        task = self._task(index)
        task.stop.set()
        with self._lock:
            self.activated -= 1
            self._used[index] = False

    def cancelled(self, index: int) -> bool:
        """Whether the task in slot ``index`` has been asked to stop."""
        return self._task(index).stop.is_set()

    def shutdown(self) -> None:
        """Deactivate every running task except slot 0."""
        for index in range(1, len(self.tasks)):
            if self.is_active(index):
                self.deactivate(index)

    def is_active(self, index: int) -> bool:
        """Whether slot ``index`` is in use."""
        self._task(index)
        with self._lock:
            return self._used[index]

    def free_index(self) -> int | None:
        """Lowest unused slot, or None when the table is full."""
        with self._lock:
            return next((i for i, used in enumerate(self._used) if not used), None)

    def wait_for_activation(self, index: int) -> bool:
        """Block until activated, then arm the first period and deadline.

        Returns False if the task was cancelled before being activated.
        """
        task = self._task(index)
        while not task.activation.acquire(timeout=_ACTIVATION_POLL):
            if task.stop.is_set():
                return False
        now = Timespec.now()
        task.at = now.add_ms(task.period)
        task.dl = now.add_ms(task.deadline)
        return True

    def deadline_miss(self, index: int) -> bool:
        """Count and report a miss if the current deadline has passed."""
        task = self._task(index)
        if time_cmp(Timespec.now(), task.dl) > 0:
            task.dmiss += 1
            return True
        return False

    def total_deadline_misses(self) -> int:
        """Sum of deadline misses over all slots in use."""
        with self._lock:
            used = [i for i, flag in enumerate(self._used) if flag]
        return sum(self.tasks[i].dmiss for i in used)

    def reset_deadline(self, index: int) -> None:
        """Set the absolute deadline relative to the next activation time."""
        task = self._task(index)
        task.dl = task.at.add_ms(task.deadline)

    def wait_for_period(self, index: int) -> None:
        """Sleep until the next activation, then advance activation and deadline."""
        task = self._task(index)
        delay = (task.at.to_ns() - Timespec.now().to_ns()) / 1e9
        if delay > 0:
            task.stop.wait(delay)
        task.at = task.at.add_ms(task.period)
        task.dl = task.dl.add_ms(task.period)

    def set_period(self, index: int, period: int) -> None:
        """Change the period of a task, in milliseconds."""
        self._task(index).period = period

    def set_deadline(self, index: int, deadline: int) -> None:
        """Change the relative deadline of a task, in milliseconds."""
        self._task(index).deadline = deadline

    def period(self, index: int) -> int:
        """Period of a task, in milliseconds."""
        return self._task(index).period

    def deadline(self, index: int) -> int:
        """Relative deadline of a task, in milliseconds."""
        return self._task(index).deadline

    def priority(self, index: int) -> int:
        """Priority a task was created with."""
        return self._task(index).priority

    def wait_for_end(self, index: int) -> None:
        """Join the thread of a task, if it was ever started."""
        thread = self._task(index).thread
        if thread is not None:
            thread.join()

    def clean(self, index: int) -> None:
        """Release the slot of a task that finished on its own."""
        self._task(index)
        with self._lock:
            self.activated -= 1
            self._used[index] = False