"""
Cancellable deferred actions.

The session uses a scheduler to reset the selection a short while after a
non-terminal submission. Two implementations are provided:

- ThreadingScheduler: real wall-clock delay on a daemon timer thread
- ManualScheduler: deterministic, callbacks run only when the owner advances it
  (tests and the terminal CLI)
"""

import threading
from typing import Callable, List, Protocol


class ScheduledAction:
    """Handle for a deferred callback."""

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if not self.active:
            return
        self.fired = True
        self.callback()


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledAction:
        ...


class _TimerAction(ScheduledAction):
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        super().__init__(delay, callback)
        self._timer = threading.Timer(delay, self.fire)
        self._timer.daemon = True

    def start(self) -> None:
        self._timer.start()

    def cancel(self) -> None:
        super().cancel()
        self._timer.cancel()


class ThreadingScheduler:
    """Runs callbacks on a timer thread after ``delay`` seconds."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledAction:
        action = _TimerAction(delay, callback)
        action.start()
        return action


class ManualScheduler:
    """
    Scheduler driven by an explicit clock.

    Nothing runs until advance() or run_pending() is called, which makes the
    deferred reset observable step by step.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: List[tuple] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledAction:
        action = ScheduledAction(delay, callback)
        self._queue.append((self.now + delay, action))
        return action

    @property
    def pending(self) -> List[ScheduledAction]:
        return [action for _, action in self._queue if action.active]

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run every action that became due.

        Returns:
            Number of callbacks that ran
        """
        self.now += seconds
        due = [(t, a) for t, a in self._queue if t <= self.now]
        self._queue = [(t, a) for t, a in self._queue if t > self.now]
        ran = 0
        for _, action in sorted(due, key=lambda item: item[0]):
            if action.active:
                action.fire()
                ran += 1
        return ran

    def run_pending(self) -> int:
        """Run every queued action regardless of its due time."""
        if not self._queue:
            return 0
        latest = max(t for t, _ in self._queue)
        return self.advance(max(0.0, latest - self.now))
