"""Progress writers that do nothing or print one plain line per event."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TextIO

from dockcompose.event import Event

__all__ = ["Writer", "NoopWriter", "PlainWriter"]


class Writer(ABC):
    """Receives progress events while a task runs."""

    @abstractmethod
    def start(self) -> None:
        """Run until the writer is stopped."""

    @abstractmethod
    def stop(self) -> None:
        """Ask a running ``start`` to finish."""

    @abstractmethod
    def event(self, e: Event) -> None:
        """Record a progress event."""

    @abstractmethod
    def tail_msgf(self, msg: str, *args: Any) -> None:
        """Record a message to show after the progress output."""


@dataclass
class NoopWriter(Writer):
    """A writer that discards everything."""

    def start(self) -> None:
        return None

    def stop(self) -> None:
        return None

    def event(self, e: Event) -> None:
        return None

    def tail_msgf(self, msg: str, *args: Any) -> None:
        return None


class PlainWriter(Writer):
    """Prints each event as one line of space separated fields."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stderr
        self._done = threading.Event()

    def start(self) -> None:
        self._done.wait()

    def stop(self) -> None:
        self._done.set()

    def event(self, e: Event) -> None:
        print(e.id, e.text, e.status_text, file=self.out)

    def tail_msgf(self, msg: str, *args: Any) -> None:
        print(msg, *args, file=self.out)