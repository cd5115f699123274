"""A websocket chat server that broadcasts every message to all clients."""

from __future__ import annotations

import argparse
import asyncio

from websockets.asyncio.server import ServerConnection, serve
from websockets.exceptions import ConnectionClosedOK

WELCOME = "Welcome to chat! Type a message"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000


class _Subscription:
    """A bounded queue of broadcast messages for one client.

    When the queue overflows the oldest message is dropped and the next read
    reports how many messages were missed.
    """

    def __init__(self, capacity: int) -> None:
        self._queue: asyncio.Queue[str] = asyncio.Queue(maxsize=capacity)
        self._missed = 0

    def offer(self, message: str) -> None:
        if self._queue.full():
            self._queue.get_nowait()
            self._missed += 1
        self._queue.put_nowait(message)

    async def get(self) -> str:
        if self._missed:
            missed, self._missed = self._missed, 0
            raise RuntimeError(f"receiver lagged by {missed} messages")
        return await self._queue.get()


class ChatServer:
    """Relays every text message from any client to all connected clients."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("broadcast capacity must be at least 1")
        self.capacity = capacity
        self._subscribers: set[_Subscription] = set()

    def _broadcast(self, message: str) -> None:
        for subscriber in list(self._subscribers):
            subscriber.offer(message)

    async def handle(self, websocket: ServerConnection) -> None:
        """Serve one client until it disconnects."""
        address = websocket.remote_address
        print(f"New connection from {address!r}")
        subscription = _Subscription(self.capacity)
        self._subscribers.add(subscription)
        receive = deliver = None
        try:
            await websocket.send(WELCOME)
            receive = asyncio.ensure_future(websocket.recv())
            deliver = asyncio.ensure_future(subscription.get())
            while True:
                done, _ = await asyncio.wait(
                    {receive, deliver}, return_when=asyncio.FIRST_COMPLETED
                )
                if receive in done:
                    try:
                        message = receive.result()
                    except ConnectionClosedOK:
                        return
                    if isinstance(message, str):
                        print(f"From client {address!r} {message!r}")
                        self._broadcast(message)
                    receive = asyncio.ensure_future(websocket.recv())
                if deliver in done:
                    await websocket.send(deliver.result())
                    deliver = asyncio.ensure_future(subscription.get())
        finally:
            self._subscribers.discard(subscription)
            for task in (receive, deliver):
                if task is not None:
                    task.cancel()

    async def serve(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        """Accept connections on ``host``:``port`` until cancelled."""
        async with serve(self.handle, host, port) as server:
            print(f"listening on port {port}")
            await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    """Run the chat server."""
    parser = argparse.ArgumentParser(description="Websocket chat server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(ChatServer().serve(args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())