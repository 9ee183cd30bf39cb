"""A text spinner for progress lines."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field

__all__ = ["Spinner"]

_FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
_DONE = "⠿"


def _default_chars() -> list[str]:
    if sys.platform == "win32":
        return ["-"]
    return list(_FRAMES)


def _default_done() -> str:
    return "-" if sys.platform == "win32" else _DONE


@dataclass
class Spinner:
    """Cycles through frames once it has been alive for more than 100ms."""

    chars: list[str] = field(default_factory=_default_chars)
    done: str = field(default_factory=_default_done)
    index: int = 0
    started: float = field(default_factory=time.monotonic)
    stopped: bool = False

    def __str__(self) -> str:
        if self.stopped:
            return self.done
        if (time.monotonic() - self.started) * 1000 > 100:
            self.index = (self.index + 1) % len(self.chars)
        return self.chars[self.index]

    def stop(self) -> None:
        """Freeze the spinner on its done frame."""
        self.stopped = True