"""The producer-facing publish operation."""

import threading
from typing import Any, Optional

from .errors import GeneratorCancelled
from .handoff import HandoffChannel


class YieldCapability:
    """
    Handle a producer routine uses to hand values to its consumer.

    It carries no state of its own beyond the channel it is bound to and the
    thread allowed to use it.
    """

    __slots__ = ("_channel", "_owner")

    def __init__(self, channel: HandoffChannel, owner: Optional[int] = None):
        self._channel = channel
        self._owner = owner

    def publish(self, value: Any) -> None:
        """
        Publish one value and suspend until the consumer asks for another.

        Args:
            value: The value to hand over

        Raises:
            GeneratorCancelled: If the consumer closed the cursor. The routine
                should let this propagate.
            RuntimeError: If called from a thread other than the producer's
        """
        if self._owner is not None and threading.get_ident() != self._owner:
            raise RuntimeError("publish() may only be called from the producer thread")

        channel = self._channel
        if channel.cancelled:
            raise GeneratorCancelled("cursor closed")
        channel.put(value)
        channel.item_requested.wait()

    __call__ = publish
