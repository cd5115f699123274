"""Iteration over the names in a directory."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Union

PathName = Union[str, bytes]


class DirectoryIterator:
    """Yields the entry names of a directory, including ``.`` and ``..``.

    The directory stays open until the iterator is exhausted or closed; use it
    as a context manager to close it promptly.
    """

    def __init__(self, path: Union[PathName, "os.PathLike[str]"]) -> None:
        path = os.fspath(path)
        null = b"\0" if isinstance(path, bytes) else "\0"
        if null in path:
            raise ValueError(f"Invalid path: {path!r} contains a NUL character")
        self.path = path
        try:
            self._scan = os.scandir(path)
        except OSError as err:
            raise OSError(err.errno, f"Could not open {path!r}", path) from err
        dots: tuple[PathName, ...] = (b".", b"..") if isinstance(path, bytes) else (".", "..")
        self._special: Iterator[PathName] = iter(dots)

    def __iter__(self) -> DirectoryIterator:
        return self

    def __next__(self) -> PathName:
        for name in self._special:
            return name
        entry = next(self._scan)
        return entry.name

    def close(self) -> None:
        """Close the directory; further iteration yields nothing."""
        self._special = iter(())
        self._scan.close()

    def __enter__(self) -> DirectoryIterator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        scan = getattr(self, "_scan", None)
        if scan is not None:
            scan.close()


def main(argv: list[str] | None = None) -> int:
    """List the entries of a directory (the current one by default)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "."
    try:
        with DirectoryIterator(path) as entries:
            names = list(entries)
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    print("files:")
    for name in names:
        print(f"    {name!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())