"""Signal-based single-slot rendezvous between a producer and a consumer."""

import threading
from typing import Any, Optional

from .errors import GeneratorCancelled


class Signal:
    """
    One-shot signal that can be reused across many set/wait cycles.

    A set() that happens before the matching wait() is remembered, so there
    is no missed-wakeup window. wait() clears the flag as it returns.
    """

    def __init__(self, name: str = "signal"):
        self.name = name
        self._cond = threading.Condition()
        self._is_set = False
        self._interrupted = False

    def set(self) -> None:
        """Raise the flag and wake one waiter."""
        with self._cond:
            self._is_set = True
            self._cond.notify()

    def wait(self) -> None:
        """
        Block until the flag is raised, then clear it.

        Raises:
            GeneratorCancelled: If the signal has been interrupted, whether
                before or during the wait. Interruption wins over a pending
                flag.
        """
        with self._cond:
            while not (self._is_set or self._interrupted):
                self._cond.wait()
            if self._interrupted:
                raise GeneratorCancelled(f"{self.name} interrupted")
            self._is_set = False

    def interrupt(self) -> None:
        """Wake every waiter; current and future waits raise GeneratorCancelled."""
        with self._cond:
            self._interrupted = True
            self._cond.notify_all()

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def interrupted(self) -> bool:
        return self._interrupted

    def __repr__(self) -> str:
        return (
            f"Signal(name={self.name!r}, is_set={self._is_set}, "
            f"interrupted={self._interrupted})"
        )


class HandoffChannel:
    """
    Pair of signals plus the single pending value shared by both threads.

    ``item_requested`` is raised by the consumer when it wants the next item.
    ``item_available`` is raised by the producer when it has published an
    item or has finished, successfully or not.
    """

    def __init__(self):
        self.item_requested = Signal("item_requested")
        self.item_available = Signal("item_available")
        self.value: Any = None
        self.has_value = False
        self.finished = False
        self.failure: Optional[BaseException] = None

    def put(self, value: Any) -> None:
        """Store a value in the slot and announce it."""
        self.value = value
        self.has_value = True
        self.item_available.set()

    def pop(self) -> Any:
        """Remove and return the pending value."""
        value = self.value
        self.value = None
        self.has_value = False
        return value

    def finish(self, failure: Optional[BaseException] = None) -> None:
        """Record the end of production and wake the consumer."""
        self.failure = failure
        self.finished = True
        self.item_available.set()

    def interrupt(self) -> None:
        """Interrupt both signals."""
        self.item_requested.interrupt()
        self.item_available.interrupt()

    @property
    def cancelled(self) -> bool:
        return self.item_requested.interrupted
