"""Greedy algorithms: activity selection, fractional knapsack, Huffman codes."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from itertools import count
from typing import Any


@dataclass(frozen=True)
class Activity:
    """An activity with an identifying index and a start and finish time."""

    index: int
    start: Any
    finish: Any


def select_activities(starts: Sequence[Any], finishes: Sequence[Any]) -> list[int]:
    """Pick a maximal set of compatible activities, already ordered by finish time.

    The first activity is always chosen. Each later one is chosen when it starts
    no earlier than the last chosen one finishes. Return the chosen positions.
    """
    starts, finishes = list(starts), list(finishes)
    if len(starts) != len(finishes):
        raise ValueError("starts and finishes must have the same length")
    if not starts:
        return []
    selected = [0]
    last_finish = finishes[0]
    for position, (start, finish) in enumerate(zip(starts[1:], finishes[1:]), start=1):
        if start >= last_finish:
            selected.append(position)
            last_finish = finish
    return selected


def schedule_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Sort *activities* by finish time and return the greedily selected ones."""
    ordered = sorted(activities, key=lambda activity: activity.finish)
    chosen = select_activities(
        [activity.start for activity in ordered],
        [activity.finish for activity in ordered],
    )
    return [ordered[position] for position in chosen]


@dataclass(frozen=True)
class KnapsackStep:
    """One item placed in the knapsack: which, how much of it, and space left after."""

    item: int
    weight: Any
    value: Any
    fraction: float
    remaining: Any


@dataclass(frozen=True)
class KnapsackResult:
    """The items placed, in order, and the total value carried."""

    steps: tuple[KnapsackStep, ...]
    total: float


def fractional_knapsack(
    capacity: float, weights: Sequence[float], values: Sequence[float]
) -> KnapsackResult:
    """Fill a knapsack of *capacity* by best value per weight, splitting the last item.

    Items are indexed from 0. Ties in value per weight go to the lower index.
    """
    weights, values = list(weights), list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight <= 0 for weight in weights):
        raise ValueError("every weight must be positive")

    remaining = capacity
    total = 0.0
    used: set[int] = set()
    steps: list[KnapsackStep] = []
    while remaining > 0 and len(used) < len(weights):
        candidates = [i for i in range(len(weights)) if i not in used]
        best = max(candidates, key=lambda i: values[i] / weights[i])
        used.add(best)
        weight, value = weights[best], values[best]
        remaining -= weight
        if remaining >= 0:
            fraction = 1.0
            total += value
        else:
            fraction = 1 + remaining / weight
            total += fraction * value
            remaining = 0
        steps.append(KnapsackStep(best, weight, value, fraction, remaining))
    return KnapsackResult(tuple(steps), total)


@dataclass(eq=False)
class _HuffmanNode:
    freq: Any
    symbol: Hashable = None
    left: _HuffmanNode | None = field(default=None, repr=False)
    right: _HuffmanNode | None = field(default=None, repr=False)


def huffman_codes(symbols: Sequence[Hashable], freqs: Sequence[Any]) -> dict[Hashable, str]:
    """Return a prefix-free binary code for each symbol, built from its frequency.

    A lone symbol gets the empty code.
    """
    symbols, freqs = list(symbols), list(freqs)
    if len(symbols) != len(freqs):
        raise ValueError("symbols and freqs must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is required")
    if len(set(symbols)) != len(symbols):
        raise ValueError("symbols must be distinct")

    order = count()
    heap = [(freq, next(order), _HuffmanNode(freq, symbol)) for symbol, freq in zip(symbols, freqs)]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        merged = _HuffmanNode(left_freq + right_freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, next(order), merged))

    codes: dict[Hashable, str] = {}
    pending: list[tuple[_HuffmanNode, str]] = [(heap[0][2], "")]
    while pending:
        node, prefix = pending.pop()
        if node.left is None or node.right is None:
            codes[node.symbol] = prefix
        else:
            pending.append((node.right, prefix + "1"))
            pending.append((node.left, prefix + "0"))
    return {symbol: codes[symbol] for symbol in symbols}