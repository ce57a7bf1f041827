"""Small number and character exercises: primality, square root, vowels, pyramid."""

from __future__ import annotations

from dataclasses import dataclass

_VOWELS = frozenset("aeiouAEIOU")


@dataclass(frozen=True)
class PrimeCheck:
    """Outcome of a step-counted primality check."""

    is_prime: bool
    steps: int


def prime_check_steps(n: int) -> PrimeCheck:
    """Trial-divide *n* by 2 up to (not including) n // 2, counting the divisions made."""
    steps = 0
    for divisor in range(2, n // 2 if n >= 0 else 0):
        steps += 1
        if n % divisor == 0:
            return PrimeCheck(is_prime=False, steps=steps)
    return PrimeCheck(is_prime=True, steps=steps)


def is_prime_trial(n: int) -> bool:
    """Return False if any of 2 .. n-1 divides *n*, otherwise True."""
    return all(n % divisor for divisor in range(2, n))


def square_root(n: float) -> float:
    """Approximate the square root of *n* using only arithmetic, to four decimals."""
    if n < 0:
        raise ValueError("square root of a negative number")
    root = 0.0
    low, high = 0.0, float(n)
    while low <= high:
        mid = (low + high) / 2.0
        if mid * mid < n:
            root = mid
            low = mid + 1.0
        else:
            high = mid - 1.0
        if mid * mid == n:
            root = mid
            break
    step = 0.1
    for _ in range(4):
        while root * root <= n:
            root += step
        root -= step
        step /= 10
    return root


def is_vowel(ch: str) -> bool:
    """Return True if the single character *ch* is an English vowel of either case."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    return ch in _VOWELS


def pyramid(rows: int) -> list[str]:
    """Return the lines of a star pyramid: rows + 1 lines, each 2 * rows wide."""
    lines = []
    for i in range(rows + 1):
        lo, hi = rows - (i - 1), rows + (i - 1)
        lines.append("".join("*" if lo <= j <= hi else " " for j in range(2 * rows)))
    return lines