"""Dining philosophers sharing chopsticks between threads."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from collections.abc import Iterable, Iterator
from contextlib import ExitStack
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_DONE = object()


@dataclass
class Philosopher:
    """A philosopher who alternates between eating and having ideas."""

    name: str
    left_chopstick: threading.Lock
    right_chopstick: threading.Lock
    thoughts: queue.Queue
    eat_seconds: float = 0.01

    def think(self) -> None:
        """Send a new idea to the shared thoughts queue."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both chopsticks, eat for a moment, then put them down."""
        print(f"{self.name} is trying to eat")
        with ExitStack() as stack:
            stack.enter_context(self.left_chopstick)
            if self.right_chopstick is not self.left_chopstick:
                stack.enter_context(self.right_chopstick)
            print(f"{self.name} is eating...")
            time.sleep(self.eat_seconds)


def _live(philosopher: Philosopher, rounds: int) -> None:
    try:
        for _ in range(rounds):
            philosopher.eat()
            philosopher.think()
    finally:
        philosopher.thoughts.put(_DONE)


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Seat the philosophers around a table and yield their thoughts.

    Each philosopher eats and thinks ``rounds`` times in its own thread. The
    last philosopher picks up the chopsticks in the opposite order, which
    breaks the symmetry that would otherwise allow a deadlock.
    """
    names = list(names)
    thoughts: queue.Queue = queue.Queue(maxsize=10)
    chopsticks = [threading.Lock() for _ in names]
    threads = []
    for index, name in enumerate(names):
        left = chopsticks[index]
        right = chopsticks[(index + 1) % len(chopsticks)]
        if index == len(names) - 1:
            left, right = right, left
        philosopher = Philosopher(name, left, right, thoughts)
        thread = threading.Thread(target=_live, args=(philosopher, rounds), daemon=True)
        threads.append(thread)

    for thread in threads:
        thread.start()

    finished = 0
    while finished < len(threads):
        item = thoughts.get()
        if item is _DONE:
            finished += 1
        else:
            yield item


def main(argv: list[str] | None = None) -> int:
    """Run the dinner and print every thought as it arrives."""
    parser = argparse.ArgumentParser(description="Dining philosophers with threads.")
    parser.add_argument("names", nargs="*", default=list(PHILOSOPHERS))
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    for thought in dine(args.names, args.rounds):
        print(thought)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())