"""Array analyses: stock span and element frequencies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


def stock_span(prices: Sequence[Any]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price not above it."""
    spans: list[int] = []
    for day, price in enumerate(prices):
        span = 1
        for earlier in reversed(prices[:day]):
            if price < earlier:
                break
            span += 1
        spans.append(span)
    return spans


def frequencies(items: Iterable[Hashable]) -> dict[Hashable, int]:
    """Return each distinct item's count, in order of first appearance."""
    return dict(Counter(items))