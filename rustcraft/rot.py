"""A readable stream that applies a rotation cipher to ASCII letters."""

from __future__ import annotations

import io
from typing import BinaryIO

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")


def _rotation_table(rot: int) -> bytes:
    table = bytearray(range(256))
    for base, last in ((_UPPER_A, _UPPER_Z), (_LOWER_A, _LOWER_Z)):
        for code in range(base, last + 1):
            table[code] = (code - base + rot) % 26 + base
    return bytes(table)


def rotate(data: bytes, rot: int) -> bytes:
    """Rotate every ASCII letter in ``data`` by ``rot`` places, keeping case."""
    return bytes(data).translate(_rotation_table(rot))


class RotDecoder(io.RawIOBase):
    """Reads from a binary stream, rotating ASCII letters by ``rot`` places."""

    def __init__(self, source: BinaryIO, rot: int) -> None:
        super().__init__()
        self._source = source
        self._table = _rotation_table(rot)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        view = memoryview(buffer).cast("B")
        data = self._source.read(len(view))
        if not data:
            return 0
        size = len(data)
        view[:size] = bytes(data).translate(self._table)
        return size