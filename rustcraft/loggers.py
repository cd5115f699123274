"""Loggers that write at a verbosity level, with filtering wrappers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO


class Logger(ABC):
    """Something that accepts messages at a verbosity level."""

    @abstractmethod
    def log(self, verbosity: int, message: str) -> None:
        """Log ``message`` at the given verbosity level."""


class StderrLogger(Logger):
    """Writes every message to standard error, or to a given stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def log(self, verbosity: int, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"verbosity={verbosity}: {message}", file=stream)


@dataclass
class VerbosityFilter(Logger):
    """Passes on only messages up to ``max_verbosity``."""

    max_verbosity: int
    inner: Logger = field(default_factory=StderrLogger)

    def log(self, verbosity: int, message: str) -> None:
        if verbosity <= self.max_verbosity:
            self.inner.log(verbosity, message)


@dataclass
class Filter(Logger):
    """Passes on only messages for which ``predicate(verbosity, message)`` holds."""

    inner: Logger
    predicate: Callable[[int, str], bool]

    def log(self, verbosity: int, message: str) -> None:
        if self.predicate(verbosity, message):
            self.inner.log(verbosity, message)