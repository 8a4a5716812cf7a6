"""Deferred and repeating task scheduler driven by a manual clock."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

TaskCallback = Callable[[], None]


@dataclass(slots=True)
class _Task:
    task_id: int
    due_seconds: float
    callback: TaskCallback
    interval_seconds: float | None = None
    cancelled: bool = False


class TaskHandle:
    """Cancellable reference to a scheduled callback."""

    __slots__ = ("_scheduler", "_task_id")

    def __init__(self, scheduler: Scheduler, task_id: int) -> None:
        self._scheduler = scheduler
        self._task_id = task_id

    @property
    def task_id(self) -> int:
        return self._task_id

    @property
    def active(self) -> bool:
        """Return whether the callback may still run."""
        return self._scheduler.is_active(self._task_id)

    def cancel(self) -> None:
        """Cancel the callback; safe to call more than once."""
        self._scheduler.cancel(self._task_id)

    def __repr__(self) -> str:
        return f"TaskHandle(task_id={self._task_id}, active={self.active})"


class Scheduler:
    """Time-based scheduler for game deferred actions.

    The host advances the clock explicitly, so callbacks run synchronously on
    the caller's thread and never interleave with engine operations.
    """

    def __init__(self) -> None:
        self._now_seconds = 0.0
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def queued_task_count(self) -> int:
        """Return count of active queued tasks."""
        return sum(1 for task in self._tasks.values() if not task.cancelled)

    def call_later(self, delay_seconds: float, callback: TaskCallback) -> TaskHandle:
        """Schedule a one-shot callback after delay."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        due_seconds = self._now_seconds + delay_seconds
        return self._schedule(due_seconds=due_seconds, callback=callback, interval_seconds=None)

    def call_every(self, interval_seconds: float, callback: TaskCallback) -> TaskHandle:
        """Schedule a recurring callback at fixed interval."""
        if interval_seconds <= 0.0:
            raise ValueError("interval_seconds must be > 0")
        due_seconds = self._now_seconds + interval_seconds
        return self._schedule(
            due_seconds=due_seconds,
            callback=callback,
            interval_seconds=interval_seconds,
        )

    def cancel(self, task_id: int) -> None:
        """Cancel a scheduled task if it exists."""
        task = self._tasks.get(task_id)
        if task is not None:
            task.cancelled = True

    def is_active(self, task_id: int) -> bool:
        task = self._tasks.get(task_id)
        return task is not None and not task.cancelled

    def advance(self, delta_seconds: float) -> int:
        """Advance scheduler clock and run due callbacks."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Run callbacks due at or before `now_seconds`."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            _, task_id = heappop(self._queue)
            task = self._tasks.get(task_id)
            if task is None or task.cancelled:
                self._tasks.pop(task_id, None)
                continue
            if task.interval_seconds is None:
                # One-shot tasks are retired before running so the callback
                # observes its own handle as inactive.
                self._tasks.pop(task_id, None)
                task.callback()
                executed += 1
                continue
            task.callback()
            executed += 1
            if task.cancelled:
                self._tasks.pop(task_id, None)
                continue
            task.due_seconds += task.interval_seconds
            heappush(self._queue, (task.due_seconds, task.task_id))
        return executed

    def cancel_all(self) -> None:
        """Drop every queued task."""
        self._tasks.clear()
        self._queue.clear()

    def _schedule(
        self,
        *,
        due_seconds: float,
        callback: TaskCallback,
        interval_seconds: float | None,
    ) -> TaskHandle:
        task_id = self._next_task_id
        self._next_task_id += 1
        task = _Task(
            task_id=task_id,
            due_seconds=due_seconds,
            callback=callback,
            interval_seconds=interval_seconds,
        )
        self._tasks[task_id] = task
        heappush(self._queue, (due_seconds, task_id))
        return TaskHandle(self, task_id)
