"""
Cancellable single-shot schedulers for the playback clock.

The clock never sleeps; it asks a Scheduler to run a callback after a delay
and keeps the returned task so it can cancel it. Two implementations are
provided:

- AsyncioScheduler: runs callbacks on an asyncio event loop.
- ManualScheduler: a simulated clock advanced explicitly, for tests and
  offline simulation.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol


class ScheduledTask(Protocol):
    """Handle for a pending callback. Cancelling twice is a no-op."""

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Schedule a callback to run once after ``delay_ms`` milliseconds."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledTask:
        ...


class AsyncioScheduler:
    """Scheduler backed by ``loop.call_later``.

    ``asyncio.TimerHandle.cancel`` is already idempotent, so handles are
    returned directly.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay_ms) / 1000.0, callback)


@dataclass(order=True)
class ManualTask:
    """A callback queued on a ManualScheduler."""

    due_ms: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualScheduler:
    """
    Deterministic scheduler driven by explicit time advancement.

    Example usage:
        >>> scheduler = ManualScheduler()
        >>> fired = []
        >>> task = scheduler.call_later(200, lambda: fired.append(scheduler.now_ms))
        >>> scheduler.advance(199)
        0
        >>> scheduler.advance(1)
        1
        >>> fired
        [200.0]
    """

    def __init__(self) -> None:
        self.now_ms: float = 0.0
        self._queue: list[ManualTask] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualTask:
        task = ManualTask(
            due_ms=self.now_ms + max(0.0, delay_ms),
            seq=next(self._counter),
            callback=callback,
        )
        heapq.heappush(self._queue, task)
        return task

    @property
    def pending(self) -> int:
        """Number of tasks that have neither fired nor been cancelled."""
        return sum(1 for task in self._queue if task.pending)

    def next_due_ms(self) -> Optional[float]:
        """Due time of the earliest pending task, if any."""
        self._drop_dead()
        return self._queue[0].due_ms if self._queue else None

    def advance(self, delta_ms: float) -> int:
        """
        Move the clock forward, firing every task that comes due.

        Callbacks run with ``now_ms`` set to their due time, so tasks they
        schedule are timed from the moment they fired.

        Returns:
            Number of callbacks fired.
        """
        if delta_ms < 0:
            raise ValueError(f"Cannot advance by a negative delta: {delta_ms}")

        target = self.now_ms + delta_ms
        fired = 0
        while True:
            self._drop_dead()
            if not self._queue or self._queue[0].due_ms > target:
                break
            self._fire(heapq.heappop(self._queue))
            fired += 1

        self.now_ms = target
        return fired

    def run_next(self) -> bool:
        """Jump to the earliest pending task and fire it. Returns False if none."""
        self._drop_dead()
        if not self._queue:
            return False
        self._fire(heapq.heappop(self._queue))
        return True

    def run_all(self, limit: int = 100_000) -> int:
        """Fire tasks until none are pending, up to ``limit`` callbacks."""
        fired = 0
        while fired < limit and self.run_next():
            fired += 1
        return fired

    def _fire(self, task: ManualTask) -> None:
        self.now_ms = max(self.now_ms, task.due_ms)
        task.fired = True
        task.callback()

    def _drop_dead(self) -> None:
        while self._queue and not self._queue[0].pending:
            heapq.heappop(self._queue)
