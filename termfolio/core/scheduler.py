"""Periodic task scheduler driven by an event loop's timers.

Works with anything exposing ``call_later(delay, callback, *args)`` that
returns a handle with ``cancel()``: an asyncio event loop, or the tkinter
adapter used by the terminal window. Every task re-arms itself after it
fires, and ``stop()`` cancels all pending handles so nothing fires after
teardown.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerLoop(Protocol):
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class _Task:
    """Internal representation of a registered periodic task."""

    __slots__ = (
        "name",
        "callback",
        "interval",
        "handle",
    )

    def __init__(self, name: str, callback: Callable[[], None], interval: float):
        self.name = name
        self.callback = callback
        self.interval = interval
        self.handle: Optional[TimerHandle] = None


class Scheduler:
    """Runs registered callbacks at fixed intervals on a timer loop.

    Usage::

        scheduler = Scheduler(loop)
        scheduler.register("animation", sequencer.tick, interval=0.36)
        scheduler.start()
        ...
        scheduler.stop()
    """

    def __init__(self, loop: TimerLoop):
        self._loop = loop
        self._tasks: dict[str, _Task] = {}
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str, callback: Callable[[], None], interval: float) -> None:
        """Register a periodic task.

        Args:
            name: Unique task name.
            callback: Callable invoked every *interval* seconds.
            interval: Seconds between invocations. Must be positive.
        """
        if name in self._tasks:
            raise ValueError(f"Task '{name}' already registered")
        if interval <= 0:
            raise ValueError(f"Task '{name}' interval must be positive, got {interval}")
        task = _Task(name, callback, interval)
        self._tasks[name] = task
        if self._running:
            self._schedule(task)

    def unregister(self, name: str) -> None:
        """Remove a task and cancel its pending timer, if any."""
        task = self._tasks.pop(name, None)
        if task is not None and task.handle is not None:
            task.handle.cancel()
            task.handle = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Arm every registered task. Must be called on the loop's thread."""
        if self._running:
            return
        self._running = True
        for task in self._tasks.values():
            self._schedule(task)
        logger.info("Scheduler started with %d tasks", len(self._tasks))

    def stop(self) -> None:
        """Cancel all scheduled tasks."""
        if not self._running:
            return
        self._running = False
        for task in self._tasks.values():
            if task.handle is not None:
                task.handle.cancel()
                task.handle = None
        logger.info("Scheduler stopped")

    # ------------------------------------------------------------------
    # Internal scheduling
    # ------------------------------------------------------------------

    def _schedule(self, task: _Task) -> None:
        """Schedule the next invocation of *task*."""
        task.handle = self._loop.call_later(task.interval, self._fire, task)

    def _fire(self, task: _Task) -> None:
        """Timer callback: run the task and reschedule."""
        task.handle = None
        if not self._running or self._tasks.get(task.name) is not task:
            return

        try:
            task.callback()
        except Exception:
            logger.exception("Scheduler task '%s' failed", task.name)

        # The callback may have stopped the scheduler or removed the task
        if self._running and self._tasks.get(task.name) is task:
            self._schedule(task)
