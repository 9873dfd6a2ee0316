"""Exceptions raised by generators and their cursors."""


class GeneratorError(Exception):
    """Base class for errors raised by this package."""


class EndOfSequence(GeneratorError, LookupError):
    """Raised by take_next() when the sequence has no further items."""


class IllegalReuseError(GeneratorError, RuntimeError):
    """Raised when a producer execution context is started a second time."""


class UnsupportedMutationError(GeneratorError, NotImplementedError):
    """Raised when a cursor is asked to mutate the underlying sequence."""


class GeneratorCancelled(BaseException):
    """
    Raised inside the producer thread once its cursor has been closed.

    Derives from BaseException so that ``except Exception`` blocks in a
    producer routine do not intercept it. It never reaches the consumer.
    """
