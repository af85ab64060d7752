"""Deferred callbacks driven by frame time, used for timed scene transitions."""

from __future__ import annotations

import itertools
from typing import Callable, List


class ScheduledTask:
    """Handle for a callback registered with :class:`Scheduler`."""

    def __init__(self, due: float, order: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.order = order
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler:
    """Runs callbacks once their delay has elapsed.

    Time only moves when :meth:`update` is called with the frame delta, so the
    scheduler never looks at the wall clock and tests can step it by hand.
    """

    def __init__(self) -> None:
        self.elapsed = 0.0
        self._tasks: List[ScheduledTask] = []
        self._counter = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        if delay < 0:
            raise ValueError("delay must not be negative")
        task = ScheduledTask(self.elapsed + delay, next(self._counter), callback)
        self._tasks.append(task)
        return task

    def cancel_all(self) -> None:
        for task in self._tasks:
            task.cancel()
        self._tasks = []

    @property
    def pending(self) -> int:
        return sum(1 for task in self._tasks if task.active)

    def update(self, delta_time: float) -> None:
        self.elapsed += delta_time
        while True:
            due = [task for task in self._tasks if task.active and task.due <= self.elapsed]
            if not due:
                break
            task = min(due, key=lambda item: (item.due, item.order))
            task.fired = True
            task.callback()
        self._tasks = [task for task in self._tasks if task.active]


__all__ = ["ScheduledTask", "Scheduler"]
