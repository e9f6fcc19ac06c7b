from abc import ABC, abstractmethod
from collections.abc import Callable


class ScheduledHandle:
    """A deferred callback that can be cancelled until it has run."""

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self._callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def is_pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        if not self.fired:
            self.cancelled = True

    def fire(self) -> bool:
        """Runs the callback once. Returns False if cancelled or already run."""
        if not self.is_pending:
            return False
        self.fired = True
        self._callback()
        return True


class IScheduler(ABC):
    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        pass


class ManualScheduler(IScheduler):
    """
    Queues callbacks instead of arming a clock.
    The host (test or UI loop) decides when time has passed and calls
    `run_pending()`.
    """

    def __init__(self) -> None:
        self._queue: list[ScheduledHandle] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        handle = ScheduledHandle(delay, callback)
        self._queue.append(handle)
        return handle

    @property
    def pending(self) -> list[ScheduledHandle]:
        return [h for h in self._queue if h.is_pending]

    @property
    def next_delay(self) -> float | None:
        pending = self.pending
        return pending[0].delay if pending else None

    def run_pending(self) -> int:
        """Fires every pending callback in scheduling order. Returns how many ran."""
        queue, self._queue = self._queue, []
        return sum(1 for handle in queue if handle.fire())
