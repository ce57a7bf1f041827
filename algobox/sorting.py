"""Comparison sorts: bubble sort, heap sort and merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort_counting(items: Iterable[Any]) -> tuple[list[Any], int]:
    """Bubble-sort *items* into a new list.

    Return the sorted list and the number of comparisons made.
    """
    result = list(items)
    comparisons = 0
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            comparisons += 1
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result, comparisons


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding *items* in ascending order, by bubble sort."""
    result, _ = bubble_sort_counting(items)
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding *items* in ascending order, by heap sort."""
    heap = list(items)
    n = len(heap)
    for root in reversed(range(n // 2)):
        _sift_down(heap, n, root)
    for end in reversed(range(n)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding *items* in ascending order, by stable merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))