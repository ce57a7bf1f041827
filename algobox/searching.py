"""Linear search and maximum element."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first item equal to *target*, or None if absent."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return None


def largest(items: Iterable[Any]) -> Any:
    """Return the largest item; raise ValueError when *items* is empty."""
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("largest() of an empty sequence") from None
    for item in iterator:
        if item > best:
            best = item
    return best