"""Generator handles: the object a producer routine is wrapped in."""

import functools
import logging
import threading
from typing import Any, Callable, Iterator, Optional

from .capability import YieldCapability
from .config import GeneratorConfig
from .cursor import GeneratorCursor
from .protocols import LoggerProtocol, ProducerRoutine


class Generator:
    """
    Lazily evaluated sequence defined by a producer routine.

    Constructing a Generator starts nothing. Each cursor() call returns an
    independent cursor with its own producer thread. The handle also keeps
    one current cursor of its own, consumed through get() and discarded by
    reset(), which suits stateless routines that should be replayed.
    """

    def __init__(
        self,
        routine: ProducerRoutine,
        config: Optional[GeneratorConfig] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize generator.

        Args:
            routine: Callable receiving a YieldCapability
            config: Generator configuration (defaults to GeneratorConfig())
            logger: Logger instance
        """
        if not callable(routine):
            raise TypeError(f"producer routine must be callable, got {type(routine).__name__}")
        self.routine = routine
        self.config = config or GeneratorConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._current: Optional[GeneratorCursor] = None
        self._lock = threading.Lock()

    def cursor(self) -> GeneratorCursor:
        """Return a new, unstarted cursor over this generator."""
        return GeneratorCursor(self.routine, self.config, self._logger)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over a fresh cursor that is closed when iteration stops."""
        return self.stream()

    def stream(self, limit: Optional[int] = None) -> Iterator[Any]:
        """
        Iterate over a fresh cursor, closing it when the iteration ends.

        Closing the returned iterator early (or letting it be garbage
        collected) also closes the cursor.

        Args:
            limit: Maximum number of items to yield
        """
        with self.cursor() as cursor:
            count = 0
            while (limit is None or count < limit) and cursor.has_more():
                yield cursor.take_next()
                count += 1

    def get(self) -> Any:
        """
        Return the next value of the handle's own cursor.

        Raises:
            EndOfSequence: If the current cursor is exhausted
        """
        with self._lock:
            if self._current is None:
                self._current = self.cursor()
            current = self._current
        return current.take_next()

    def reset(self) -> None:
        """
        Discard the handle's own cursor so that get() starts over.

        Only meaningful for routines without side effects; the next get()
        runs the routine again from the beginning in a new thread.
        """
        with self._lock:
            current, self._current = self._current, None
        if current is not None:
            current.close()
            if self._logger:
                self._logger.debug(f"Reset generator after {current.statistics().items_taken} items")

    def close(self) -> None:
        """Close the handle's own cursor, if any."""
        self.reset()

    def __enter__(self) -> "Generator":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        name = getattr(self.routine, "__qualname__", type(self.routine).__name__)
        return f"Generator({name})"


def generator(func: Callable[..., None]) -> Callable[..., Generator]:
    """
    Turn ``func(yield_, *args, **kwargs)`` into a factory of Generator objects.

    Example:
        @generator
        def count_up(yield_, start):
            n = start
            while True:
                yield_(n)
                n += 1

        with count_up(10).cursor() as cursor:
            first = cursor.take_next()  # 10
    """

    @functools.wraps(func)
    def factory(*args: Any, **kwargs: Any) -> Generator:
        def routine(yield_: YieldCapability) -> None:
            func(yield_, *args, **kwargs)

        routine.__qualname__ = func.__qualname__
        return Generator(routine)

    return factory
