"""Threaded generator - lazily pulled sequences from imperative producer routines."""

__version__ = "0.1.0"

from .adapters import batched, take, to_dataframe
from .capability import YieldCapability
from .config import GeneratorConfig, get_config
from .cursor import GeneratorCursor
from .errors import (
    EndOfSequence,
    GeneratorCancelled,
    GeneratorError,
    IllegalReuseError,
    UnsupportedMutationError,
)
from .generator import Generator, generator
from .handoff import HandoffChannel, Signal
from .models import CursorStatistics, GeneratorState
from .producer import ProducerExecutionContext
from .protocols import LoggerProtocol, ProducerRoutine, SequenceCursor
from .routines import chain, from_iterable, from_supplier

__all__ = [
    # Generators
    "Generator",
    "generator",
    "GeneratorCursor",
    # Routines
    "ProducerRoutine",
    "from_iterable",
    "from_supplier",
    "chain",
    # Primitives
    "Signal",
    "HandoffChannel",
    "YieldCapability",
    "ProducerExecutionContext",
    # Models
    "GeneratorState",
    "CursorStatistics",
    # Errors
    "GeneratorError",
    "EndOfSequence",
    "IllegalReuseError",
    "UnsupportedMutationError",
    "GeneratorCancelled",
    # Adapters
    "take",
    "batched",
    "to_dataframe",
    # Config
    "GeneratorConfig",
    "get_config",
    # Protocols
    "LoggerProtocol",
    "SequenceCursor",
]
