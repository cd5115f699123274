"""Dining philosophers sharing chopsticks between asyncio tasks."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import AsyncIterator, Iterable
from contextlib import AsyncExitStack
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Hypatia")

_DONE = object()


@dataclass
class AsyncPhilosopher:
    """A philosopher task that alternates between having ideas and eating."""

    name: str
    left_chopstick: asyncio.Lock
    right_chopstick: asyncio.Lock
    thoughts: asyncio.Queue
    eat_seconds: float = 0.005

    async def think(self) -> None:
        """Send a new idea to the shared thoughts queue."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Pick up both chopsticks, eat for a moment, then put them down."""
        async with AsyncExitStack() as stack:
            await stack.enter_async_context(self.left_chopstick)
            if self.right_chopstick is not self.left_chopstick:
                await stack.enter_async_context(self.right_chopstick)
            print(f"{self.name} is eating...")
            await asyncio.sleep(self.eat_seconds)


async def _live(philosopher: AsyncPhilosopher, rounds: int) -> None:
    for _ in range(rounds):
        await philosopher.think()
        await philosopher.eat()
    await philosopher.thoughts.put(_DONE)


async def dine(
    names: Iterable[str] = PHILOSOPHERS, rounds: int = 100
) -> AsyncIterator[str]:
    """Run one task per philosopher and yield their thoughts as they come.

    The last philosopher picks up the chopsticks in the opposite order to
    avoid a deadlock.
    """
    names = list(names)
    thoughts: asyncio.Queue = asyncio.Queue(maxsize=10)
    chopsticks = [asyncio.Lock() for _ in names]
    tasks = []
    for index, name in enumerate(names):
        left = chopsticks[index]
        right = chopsticks[(index + 1) % len(chopsticks)]
        if index == len(names) - 1:
            left, right = right, left
        philosopher = AsyncPhilosopher(name, left, right, thoughts)
        tasks.append(asyncio.create_task(_live(philosopher, rounds)))

    try:
        finished = 0
        while finished < len(tasks):
            item = await thoughts.get()
            if item is _DONE:
                finished += 1
            else:
                yield item
    finally:
        for task in tasks:
            task.cancel()


async def _print_thoughts(names: Iterable[str], rounds: int) -> None:
    async for thought in dine(names, rounds):
        print(f"Here is a thought: {thought}")


def main(argv: list[str] | None = None) -> int:
    """Run the dinner and print every thought as it arrives."""
    parser = argparse.ArgumentParser(description="Dining philosophers with asyncio.")
    parser.add_argument("names", nargs="*", default=list(PHILOSOPHERS))
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    asyncio.run(_print_thoughts(args.names, args.rounds))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())