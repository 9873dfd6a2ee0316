"""Data models for cursor state and statistics."""

from dataclasses import dataclass
from enum import Enum


class GeneratorState(str, Enum):
    """Cursor state enumeration."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    ITEM_READY = "item_ready"
    EXHAUSTED = "exhausted"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition can leave this state."""
        return self in (GeneratorState.EXHAUSTED, GeneratorState.FAILED)


@dataclass
class CursorStatistics:
    """Statistics for a single cursor."""

    items_taken: int = 0
    started: bool = False
    state: GeneratorState = GeneratorState.NOT_STARTED
    elapsed_time: float = 0.0
