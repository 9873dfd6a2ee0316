"""Background thread running one producer routine against a handoff channel."""

import itertools
import logging
import threading
from typing import Callable, Optional

from .capability import YieldCapability
from .config import GeneratorConfig
from .errors import GeneratorCancelled, IllegalReuseError
from .handoff import HandoffChannel
from .protocols import LoggerProtocol

_thread_ids = itertools.count(1)


class ProducerExecutionContext:
    """
    Owns the producer thread of exactly one cursor.

    The thread is created on start() and does no work before the first item
    is requested. cancel() interrupts the channel and joins the thread.
    """

    def __init__(
        self,
        routine: Callable[[YieldCapability], None],
        channel: HandoffChannel,
        config: Optional[GeneratorConfig] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize the execution context.

        Args:
            routine: Producer routine invoked with a YieldCapability
            channel: Channel shared with the cursor
            config: Thread naming and daemon settings
            logger: Logger instance (defaults to module logger)
        """
        self.routine = routine
        self.channel = channel
        self.config = config or GeneratorConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._thread: Optional[threading.Thread] = None
        self._cancelled = False

    @property
    def thread(self) -> Optional[threading.Thread]:
        return self._thread

    @property
    def started(self) -> bool:
        return self._thread is not None

    def is_alive(self) -> bool:
        """Whether the producer thread is currently running."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """
        Start the producer thread.

        Raises:
            IllegalReuseError: If already started or cancelled
        """
        if self._thread is not None:
            raise IllegalReuseError("Can't start the same producer execution context twice")
        if self._cancelled:
            raise IllegalReuseError("Can't start a cancelled producer execution context")

        name = f"{self.config.thread_name_prefix}-{next(_thread_ids)}"
        self._thread = threading.Thread(target=self._run, name=name, daemon=self.config.daemon)
        self._thread.start()
        if self._logger:
            self._logger.debug(f"Started producer thread {name}")

    def cancel(self) -> None:
        """
        Interrupt the producer and wait for its thread to terminate.

        Safe to call before start, while the producer is suspended in
        publish(), or after it finished. Calling it from the producer thread
        itself only interrupts.
        """
        self._cancelled = True
        self.channel.interrupt()

        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join()
        if self._logger:
            self._logger.debug(f"Joined producer thread {thread.name}")

    def _run(self) -> None:
        channel = self.channel
        failure = None
        try:
            channel.item_requested.wait()
            self.routine(YieldCapability(channel, threading.get_ident()))
        except GeneratorCancelled:
            if self._logger:
                self._logger.debug(f"Producer {threading.current_thread().name} cancelled")
        except Exception as e:
            failure = e
            if self._logger:
                self._logger.debug(
                    f"Producer {threading.current_thread().name} raised {type(e).__name__}: {e}"
                )
        finally:
            channel.finish(failure)
