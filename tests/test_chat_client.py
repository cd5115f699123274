import asyncio
import contextlib
import socket

import pytest
from websockets.asyncio.server import serve

from rustcraft.chat_client import main, run_client


@contextlib.asynccontextmanager
async def running(handler):
    async with serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        yield f"ws://127.0.0.1:{port}"


async def echo_once(websocket):
    await websocket.send("hello")
    message = await websocket.recv()
    await websocket.send(f"echo: {message}")


async def lines_then_wait(lines):
    for line in lines:
        yield line
    await asyncio.Event().wait()


@pytest.mark.asyncio
async def test_sends_lines_and_collects_replies(capsys):
    async with running(echo_once) as uri:
        received = await asyncio.wait_for(
            run_client(uri, lines_then_wait(["ping"])), 5
        )
    assert received == ["hello", "echo: ping"]
    out = capsys.readouterr().out
    assert "From server: hello" in out
    assert "From server: echo: ping" in out


@pytest.mark.asyncio
async def test_binary_messages_are_ignored():
    async def handler(websocket):
        await websocket.send(b"\x00\x01")
        await websocket.send("text")

    async with running(handler) as uri:
        received = await asyncio.wait_for(run_client(uri, lines_then_wait([])), 5)
    assert received == ["text"]


@pytest.mark.asyncio
async def test_returns_when_lines_run_out():
    async def handler(websocket):
        await websocket.wait_closed()

    async with running(handler) as uri:
        received = await asyncio.wait_for(run_client(uri, []), 5)
    assert received == []


def test_main_reports_connection_failure(capsys):
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    assert main([f"ws://127.0.0.1:{port}"]) == 1
    assert capsys.readouterr().err.strip()