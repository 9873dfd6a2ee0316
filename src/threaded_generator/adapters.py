"""Adapters from cursors to ordinary Python and pandas collections.

Everything here relies only on ``has_more()`` and ``take_next()``.
Unbounded sequences must be given a limit.
"""

from collections.abc import Mapping
from typing import Any, Iterator, List, Optional, Sequence

import pandas as pd

from .protocols import SequenceCursor


def take(cursor: SequenceCursor, n: Optional[int] = None) -> List[Any]:
    """
    Collect up to ``n`` items from a cursor.

    Args:
        cursor: Cursor to pull from
        n: Maximum number of items; None drains the cursor

    Returns:
        List of items in order
    """
    if n is not None and n < 0:
        raise ValueError("n must not be negative")
    items: List[Any] = []
    while (n is None or len(items) < n) and cursor.has_more():
        items.append(cursor.take_next())
    return items


def batched(cursor: SequenceCursor, size: int) -> Iterator[List[Any]]:
    """
    Batch cursor items into lists.

    Args:
        cursor: Cursor to pull from
        size: Number of items per batch

    Yields:
        Lists of at most ``size`` items; only the last may be shorter
    """
    if size <= 0:
        raise ValueError("size must be positive")
    batch: List[Any] = []
    while cursor.has_more():
        batch.append(cursor.take_next())
        if len(batch) >= size:
            yield batch
            batch = []

    # Yield remaining items
    if batch:
        yield batch


def to_dataframe(
    cursor: SequenceCursor,
    limit: Optional[int] = None,
    columns: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Collect cursor items into a DataFrame.

    Mappings become rows keyed by column name, tuples and lists become
    positional rows, and any other value goes into a single column
    (``value`` unless ``columns`` names it).

    Args:
        cursor: Cursor to pull from
        limit: Maximum number of items; None drains the cursor
        columns: Column names

    Returns:
        DataFrame with one row per item
    """
    items = take(cursor, limit)
    if not items:
        return pd.DataFrame(columns=list(columns) if columns else ["value"])

    if all(isinstance(item, (Mapping, tuple, list)) for item in items):
        return pd.DataFrame(items, columns=list(columns) if columns else None)

    name = columns[0] if columns else "value"
    return pd.DataFrame({name: items})
