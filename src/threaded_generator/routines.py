"""Producer routine shapes built on the single ``routine(yield_)`` capability."""

from typing import Any, Callable, Iterable

from .capability import YieldCapability
from .errors import EndOfSequence
from .protocols import ProducerRoutine

_MISSING = object()


def from_iterable(items: Iterable[Any]) -> ProducerRoutine:
    """
    Build a routine that replays a collection.

    The collection is iterated afresh for every cursor, so lists and other
    re-iterable containers replay after a reset; one-shot iterators do not.

    Args:
        items: Values to publish, in order

    Returns:
        Producer routine
    """

    def replay(yield_: YieldCapability) -> None:
        for item in items:
            yield_.publish(item)

    return replay


def from_supplier(supplier: Callable[[], Any], sentinel: Any = _MISSING) -> ProducerRoutine:
    """
    Build a routine that calls ``supplier()`` in a loop and publishes each result.

    Production stops when the supplier returns ``sentinel`` (compared with
    ``==``) or raises EndOfSequence. Without a sentinel the sequence is
    unbounded unless the supplier ends it.

    Args:
        supplier: Zero-argument callable producing one value per call
        sentinel: Optional value marking the end of the sequence

    Returns:
        Producer routine
    """

    def repeat(yield_: YieldCapability) -> None:
        while True:
            try:
                value = supplier()
            except EndOfSequence:
                return
            if sentinel is not _MISSING and value == sentinel:
                return
            yield_.publish(value)

    return repeat


def chain(*routines: ProducerRoutine) -> ProducerRoutine:
    """Build a routine running each of ``routines`` in turn on the same capability."""

    def chained(yield_: YieldCapability) -> None:
        for routine in routines:
            routine(yield_)

    return chained
