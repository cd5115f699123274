"""Counting how often each value has been seen."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)


class Counter(Generic[K]):
    """Counts the number of times each value has been seen."""

    def __init__(self) -> None:
        self._values: dict[K, int] = {}

    def count(self, value: K) -> None:
        """Record one occurrence of ``value``."""
        self._values[value] = self._values.get(value, 0) + 1

    def times_seen(self, value: K) -> int:
        """Return how many times ``value`` has been counted."""
        return self._values.get(value, 0)

    def __repr__(self) -> str:
        return f"Counter({self._values!r})"