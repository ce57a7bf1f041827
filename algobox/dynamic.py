"""Dynamic programming: boolean parenthesization, LCS length, word subsets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import lru_cache


def _and(lt: int, lf: int, rt: int, rf: int) -> tuple[int, int]:
    return lt * rt, lf * rf + lt * rf + lf * rt


def _or(lt: int, lf: int, rt: int, rf: int) -> tuple[int, int]:
    return lt * rt + lt * rf + lf * rt, lf * rf


def _xor(lt: int, lf: int, rt: int, rf: int) -> tuple[int, int]:
    return lf * rt + lt * rf, lt * rt + lf * rf


_OPERATORS = {"&": _and, "|": _or, "^": _xor}


def count_parenthesizations(expression: str, want: bool = True) -> int:
    """Count the ways to parenthesize *expression* so that it evaluates to *want*.

    The expression alternates the symbols T and F with the operators &, | and ^,
    for example "T|T&F^T". An empty expression has no ways.
    """
    if not expression:
        return 0
    operands = expression[0::2]
    operators = expression[1::2]
    if len(expression) % 2 == 0:
        raise ValueError("expression must end with a symbol")
    if any(symbol not in "TF" for symbol in operands):
        raise ValueError("symbols must be T or F")
    if any(op not in _OPERATORS for op in operators):
        raise ValueError("operators must be &, | or ^")

    @lru_cache(maxsize=None)
    def counts(first: int, last: int) -> tuple[int, int]:
        if first == last:
            return int(operands[first] == "T"), int(operands[first] == "F")
        true_ways = false_ways = 0
        for split in range(first, last):
            lt, lf = counts(first, split)
            rt, rf = counts(split + 1, last)
            t, f = _OPERATORS[operators[split]](lt, lf, rt, rf)
            true_ways += t
            false_ways += f
        return true_ways, false_ways

    true_ways, false_ways = counts(0, len(operands) - 1)
    return true_ways if want else false_ways


def lcs_length(x: str, y: str) -> int:
    """Return the length of the longest common subsequence of *x* and *y*."""
    previous = [0] * (len(y) + 1)
    for a in x:
        current = [0]
        for position, b in enumerate(y, start=1):
            if a == b:
                current.append(previous[position - 1] + 1)
            else:
                current.append(max(previous[position], current[-1]))
        previous = current
    return previous[-1]


def word_subsets(words1: Iterable[str], words2: Iterable[str]) -> list[str]:
    """Return the words of *words1* that contain every word of *words2* as a multiset."""
    needed: Counter[str] = Counter()
    for word in words2:
        needed |= Counter(word)
    return [word for word in words1 if not needed - Counter(word)]