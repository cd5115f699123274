"""Small numeric and sequence utilities."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import cycle, islice
from typing import Protocol, TypeVar

_DECIMAL_DIGITS = "0123456789"


class _Ordered(Protocol):
    def __le__(self, other: object, /) -> bool: ...


T = TypeVar("T", bound=_Ordered)


def collatz_length(n: int) -> int:
    """Return the length of the Collatz sequence that starts at ``n``."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, where ``fib(0) == 0``."""
    if n < 0:
        raise ValueError("fib is defined for non-negative integers only")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def transpose(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix given as rows."""
    return [list(column) for column in zip(*matrix)]


def magnitude(vector: Iterable[float]) -> float:
    """Return the Euclidean length of ``vector``."""
    return math.sqrt(sum(coord * coord for coord in vector))


def normalize(vector: Sequence[float]) -> list[float]:
    """Return ``vector`` scaled to length 1.0, keeping its direction."""
    length = magnitude(vector)
    return [coord / length for coord in vector]


def smallest(left: T, right: T) -> T:
    """Return the lesser of two values, preferring ``left`` when they are equal."""
    return left if left <= right else right


def offset_differences(offset: int, values: Sequence[int]) -> list[int]:
    """Return ``values[(n + offset) % len] - values[n]`` for every ``n``.

    The offset wraps around from the end of ``values`` to the beginning.
    """
    shifted = islice(cycle(values), offset, None)
    return [later - earlier for earlier, later in zip(values, shifted)]


def luhn(cc_number: str) -> bool:
    """Check a number with the Luhn algorithm.

    Whitespace is ignored; any other non-digit character makes the number
    invalid, as does having fewer than two digits.
    """
    total = 0
    digits = 0
    double = False
    for char in reversed(cc_number):
        if char in _DECIMAL_DIGITS:
            digit = int(char)
            digits += 1
            if double:
                digit *= 2
                if digit > 9:
                    digit -= 9
            total += digit
            double = not double
        elif not char.isspace():
            return False
    return digits >= 2 and total % 10 == 0