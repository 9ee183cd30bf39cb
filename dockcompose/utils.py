"""Small string and line-splitting helpers."""

from __future__ import annotations

from typing import Callable, Iterable

__all__ = ["string_contains", "SplitWriter", "get_writer"]


def string_contains(array: Iterable[str], needle: str) -> bool:
    """Return True if ``needle`` is one of the strings in ``array``."""
    return needle in array


class SplitWriter:
    """A writable sink that joins all input and hands each complete line to a consumer."""

    def __init__(self, consumer: Callable[[str], None]) -> None:
        self._buffer = bytearray()
        self._consumer = consumer

    def write(self, data: bytes | bytearray | str) -> int:
        """Append ``data``, emit every complete line, and return the number of bytes taken."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer.extend(data)
        while (index := self._buffer.find(b"\n")) >= 0:
            line = bytes(self._buffer[:index])
            del self._buffer[: index + 1]
            self._consumer(line.decode("utf-8", errors="replace"))
        return len(data)

    def close(self) -> None:
        """Emit whatever is left in the buffer as a final, unterminated line."""
        if not self._buffer:
            return
        rest = bytes(self._buffer)
        self._buffer.clear()
        self._consumer(rest.decode("utf-8", errors="replace"))

    def __enter__(self) -> "SplitWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def get_writer(consumer: Callable[[str], None]) -> SplitWriter:
    """Create a writer that splits its input by line and passes each line to ``consumer``."""
    return SplitWriter(consumer)