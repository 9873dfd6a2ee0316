"""Protocol definitions for dependency inversion."""

from typing import Any, Protocol

from .capability import YieldCapability


class ProducerRoutine(Protocol):
    """
    Protocol for producer routines.

    A producer routine is handed a yield capability and publishes values
    through it until it returns or raises.
    """

    def __call__(self, yield_: YieldCapability) -> None:
        """Produce values by calling ``yield_.publish``."""
        ...


class SequenceCursor(Protocol):
    """Protocol for pull-based cursors."""

    def has_more(self) -> bool:
        """Report whether another item is available."""
        ...

    def take_next(self) -> Any:
        """Return the next item."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...
