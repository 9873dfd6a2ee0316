"""Pull-based cursor over the values published by a producer routine."""

import logging
import threading
import time
import weakref
from typing import Any, Callable, Optional

from .capability import YieldCapability
from .config import GeneratorConfig
from .errors import EndOfSequence, GeneratorCancelled, UnsupportedMutationError
from .handoff import HandoffChannel
from .models import CursorStatistics, GeneratorState
from .producer import ProducerExecutionContext
from .protocols import LoggerProtocol


class GeneratorCursor:
    """
    Drives one producer routine in its own thread, one item at a time.

    The producer does not run ahead of the consumer: it is suspended inside
    ``publish`` until the next has_more() or take_next() call asks for more.
    A failure raised by the routine is re-raised by every later poll.

    Close cursors that are abandoned early, with ``with`` or close(). A
    cursor that is discarded unclosed cancels and joins its producer when it
    is garbage collected.
    """

    def __init__(
        self,
        routine: Callable[[YieldCapability], None],
        config: Optional[GeneratorConfig] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize cursor. No thread is started here.

        Args:
            routine: Producer routine invoked with a YieldCapability
            config: Generator configuration
            logger: Logger instance
        """
        if not callable(routine):
            raise TypeError(f"producer routine must be callable, got {type(routine).__name__}")
        self._logger = logger or logging.getLogger(__name__)
        self._channel = HandoffChannel()
        self._context = ProducerExecutionContext(routine, self._channel, config, self._logger)
        self._state = GeneratorState.NOT_STARTED
        self._next_item: Any = None
        self._failure: Optional[BaseException] = None
        self._items_taken = 0
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None
        self._closed = False
        self._lock = threading.Lock()

        # The producer thread never references the cursor, so it can be
        # collected while the thread is suspended in publish().
        self._finalizer = weakref.finalize(self, self._context.cancel)
        self._finalizer.atexit = False

    @property
    def state(self) -> GeneratorState:
        return self._state

    @property
    def producer(self) -> ProducerExecutionContext:
        return self._context

    @property
    def producer_alive(self) -> bool:
        return self._context.is_alive()

    @property
    def closed(self) -> bool:
        return self._closed

    def has_more(self) -> bool:
        """
        Report whether another item exists, without consuming it.

        Returns:
            True if take_next() will return an item

        Raises:
            Exception: The exception raised by the producer routine, if any
        """
        return self._wait_for_next()

    def take_next(self) -> Any:
        """
        Return the next item.

        Raises:
            EndOfSequence: If the sequence is exhausted
            Exception: The exception raised by the producer routine, if any
        """
        if not self._wait_for_next():
            raise EndOfSequence("No more items in generator")
        with self._lock:
            if self._state is not GeneratorState.ITEM_READY:
                # closed by another thread since the poll
                raise EndOfSequence("No more items in generator")
            item = self._next_item
            self._next_item = None
            self._state = GeneratorState.RUNNING
            self._items_taken += 1
        return item

    def remove(self) -> None:
        raise UnsupportedMutationError("Generator cursors do not support removal")

    def close(self) -> None:
        """Cancel the producer and join its thread. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if not self._state.is_terminal:
                self._next_item = None
                self._terminate(GeneratorState.EXHAUSTED)
        self._finalizer.detach()
        self._context.cancel()

    def statistics(self) -> CursorStatistics:
        """Return statistics for this cursor."""
        if self._start_time is None:
            elapsed = 0.0
        else:
            elapsed = (self._end_time or time.time()) - self._start_time
        return CursorStatistics(
            items_taken=self._items_taken,
            started=self._context.started,
            state=self._state,
            elapsed_time=elapsed,
        )

    def _wait_for_next(self) -> bool:
        state = self._state
        if state is GeneratorState.ITEM_READY:
            return True
        if state is GeneratorState.EXHAUSTED:
            return False
        if state is GeneratorState.FAILED:
            raise self._failure

        channel = self._channel
        with self._lock:
            if self._closed:
                return False
            if self._state is GeneratorState.NOT_STARTED:
                self._start_time = time.time()
                self._context.start()
                self._state = GeneratorState.RUNNING

        channel.item_requested.set()
        try:
            channel.item_available.wait()
        except GeneratorCancelled:
            # closed from another thread while waiting
            with self._lock:
                if not self._state.is_terminal:
                    self._terminate(GeneratorState.EXHAUSTED)
            return False

        with self._lock:
            if self._closed:
                return False
            if channel.failure is not None:
                self._failure = channel.failure
                self._terminate(GeneratorState.FAILED)
            elif channel.has_value:
                self._next_item = channel.pop()
                self._state = GeneratorState.ITEM_READY
                return True
            else:
                self._terminate(GeneratorState.EXHAUSTED)

        self._context.cancel()
        if self._failure is not None:
            raise self._failure
        return False

    def _terminate(self, state: GeneratorState) -> None:
        self._state = state
        self._end_time = time.time()
        if self._logger:
            self._logger.debug(f"Cursor reached {state.value} after {self._items_taken} items")

    def __iter__(self) -> "GeneratorCursor":
        return self

    def __next__(self) -> Any:
        try:
            return self.take_next()
        except EndOfSequence:
            self.close()
            raise StopIteration from None

    def __enter__(self) -> "GeneratorCursor":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"GeneratorCursor(state={self._state.value}, items_taken={self._items_taken})"
