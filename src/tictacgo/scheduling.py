"""
Single-threaded delayed calls with cancellation.

Works like a GUI toolkit's ``after``/``after_cancel`` pair on top of
``sched.scheduler``: callbacks only ever run from ``run_once``/``run_until_idle``
on the caller's thread, and a cancelled call is removed from the queue.
"""
from __future__ import annotations

import itertools
import logging
import sched
import time
from typing import Callable, Optional


class ScheduledCall:
    """Handle for one queued callback."""

    def __init__(self, scheduler: sched.scheduler, seq: int, callback: Callable[[], None]) -> None:
        self._scheduler = scheduler
        self.seq = seq
        self.callback = callback
        self.event: Optional[sched.Event] = None
        self.cancelled = False
        self.done = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.done)

    def cancel(self) -> None:
        # An active call is still in the scheduler's queue.
        if self.active:
            self._scheduler.cancel(self.event)
        self.cancelled = True


class EventLoop:
    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._scheduler = sched.scheduler(clock, sleep)
        self._counter = itertools.count()
        self._ran = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        call = ScheduledCall(self._scheduler, next(self._counter), callback)
        # The sequence number doubles as priority so equal due times run FIFO.
        call.event = self._scheduler.enter(delay, call.seq, self._fire, (call,))
        logging.debug("scheduled call #%d in %.3fs", call.seq, delay)
        return call

    def _fire(self, call: ScheduledCall) -> None:
        call.done = True
        self._ran += 1
        call.callback()

    @property
    def pending(self) -> int:
        return len(self._scheduler.queue)

    def next_due(self) -> Optional[float]:
        queue = self._scheduler.queue
        return queue[0].time if queue else None

    def run_once(self, block: bool = True) -> bool:
        """Run the calls that are due.

        With ``block`` the loop first sleeps until the earliest call is due;
        without it only calls that are already due run. Returns True if a
        callback ran.
        """
        due = self.next_due()
        if due is None:
            return False
        wait = due - self._clock()
        if wait > 0:
            if not block:
                return False
            self._sleep(wait)
        before = self._ran
        self._scheduler.run(blocking=False)
        return self._ran > before

    def run_until_idle(self) -> int:
        before = self._ran
        while not self._scheduler.empty():
            self.run_once()
        return self._ran - before
