"""A websocket chat client that sends lines and prints what arrives."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from typing import Optional, Union

from websockets.asyncio.client import connect
from websockets.exceptions import ConnectionClosedOK, WebSocketException

DEFAULT_URI = "ws://127.0.0.1:2000"

Lines = Union[Iterable[str], AsyncIterable[str]]


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            return
        yield line.rstrip("\n")


async def _from_sync(lines: Iterable[str]) -> AsyncIterator[str]:
    for line in lines:
        yield line


def _as_async(lines: Lines) -> AsyncIterator[str]:
    if hasattr(lines, "__aiter__"):
        return lines.__aiter__()
    return _from_sync(lines).__aiter__()


async def _next_line(source: AsyncIterator[str]) -> str:
    return await source.__anext__()


async def run_client(uri: str = DEFAULT_URI, lines: Optional[Lines] = None) -> list[str]:
    """Chat with the server at ``uri``.

    Each line from ``lines`` (standard input by default) is sent as a text
    message; every text message received is printed. Returns the received
    texts once the lines run out or the server closes the connection.
    """
    source = _as_async(_stdin_lines() if lines is None else lines)
    received: list[str] = []
    async with connect(uri) as websocket:
        incoming = asyncio.ensure_future(websocket.recv())
        outgoing = asyncio.ensure_future(_next_line(source))
        try:
            while True:
                done, _ = await asyncio.wait(
                    {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    try:
                        message = incoming.result()
                    except ConnectionClosedOK:
                        return received
                    if isinstance(message, str):
                        print(f"From server: {message}")
                        received.append(message)
                    incoming = asyncio.ensure_future(websocket.recv())
                if outgoing in done:
                    try:
                        line = outgoing.result()
                    except StopAsyncIteration:
                        return received
                    await websocket.send(line)
                    outgoing = asyncio.ensure_future(_next_line(source))
        finally:
            incoming.cancel()
            outgoing.cancel()


def main(argv: list[str] | None = None) -> int:
    """Connect to a chat server and relay standard input to it."""
    parser = argparse.ArgumentParser(description="Websocket chat client.")
    parser.add_argument("uri", nargs="?", default=DEFAULT_URI)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri))
    except (OSError, WebSocketException) as err:
        print(err, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())