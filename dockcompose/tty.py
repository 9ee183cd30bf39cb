"""A progress writer that redraws a block of status lines on a terminal."""

from __future__ import annotations

import dataclasses
import shutil
import sys
import threading
import time
from typing import Any, Iterable, Mapping, TextIO

from dockcompose.event import Event, EventStatus
from dockcompose.plain import Writer
from dockcompose.spinner import Spinner

__all__ = ["TTYWriter", "line_text", "num_done", "align"]

_ESC = "\x1b["
_HIDE = _ESC + "?25l"
_SHOW = _ESC + "?25h"
_RESET = _ESC + "0m"
_WHITE = _ESC + "37m"
_BLUE = _ESC + "34m"
_RED = _ESC + "31m"


def _apply(text: str, color: str) -> str:
    return color + text + _RESET


class TTYWriter(Writer):
    """Keeps the latest state of every event and redraws them every tick."""

    def __init__(
        self,
        out: TextIO | None = None,
        width: int | None = None,
        interval: float = 0.1,
    ) -> None:
        self.out = out if out is not None else sys.stderr
        self.events: dict[str, Event] = {}
        self.event_ids: list[str] = []
        self.tail_events: list[str] = []
        self._width = width
        self._interval = interval
        self._repeated = False
        self._num_lines = 0
        self._done = threading.Event()
        self._lock = threading.Lock()

    def start(self) -> None:
        while True:
            if self._done.wait(self._interval):
                self._print()
                self._print_tail_events()
                return
            self._print()

    def stop(self) -> None:
        self._done.set()

    def event(self, e: Event) -> None:
        with self._lock:
            if e.id not in self.event_ids:
                self.event_ids.append(e.id)
            last = self.events.get(e.id)
            if last is not None:
                if e.status in (EventStatus.DONE, EventStatus.ERROR) and last.status != e.status:
                    last.stop()
                last.status = e.status
                last.text = e.text
                last.status_text = e.status_text
                last.parent_id = e.parent_id
            else:
                stored = dataclasses.replace(
                    e, start_time=time.monotonic(), end_time=None, spinner=Spinner()
                )
                if stored.status in (EventStatus.DONE, EventStatus.ERROR):
                    stored.stop()
                self.events[e.id] = stored

    def tail_msgf(self, msg: str, *args: Any) -> None:
        with self._lock:
            self.tail_events.append(msg % args if args else msg)

    def _terminal_width(self) -> int:
        if self._width is not None:
            return self._width
        return shutil.get_terminal_size().columns

    def _print_tail_events(self) -> None:
        with self._lock:
            for msg in self.tail_events:
                self.out.write(msg + "\n")
            self.out.flush()

    def _print(self) -> None:
        with self._lock:
            if not self.event_ids:
                return
            terminal_width = self._terminal_width()
            parts = [f"{_ESC}1A" * (self._num_lines + 1)]
            if not self._repeated:
                parts.append(f"{_ESC}1B")
            self._repeated = True
            parts.append(f"{_ESC}0G")
            parts.append(_HIDE)

            done = num_done(self.events.values())
            first_line = f"[+] Running {done}/{self._num_lines}"
            if self._num_lines != 0 and done == self._num_lines:
                first_line = _apply(first_line, _BLUE)
            parts.append(first_line + "\n")

            status_padding = 0
            for event_id in self.event_ids:
                event = self.events[event_id]
                status_padding = max(status_padding, len(f"{event.id} {event.text}"))
                if event.parent_id:
                    status_padding -= 2

            color = sys.platform != "win32"
            count = 0
            for event_id in self.event_ids:
                event = self.events[event_id]
                if event.parent_id:
                    continue
                parts.append(line_text(event, "", terminal_width, status_padding, color))
                count += 1
                for child_id in self.event_ids:
                    child = self.events[child_id]
                    if child.parent_id == event.id:
                        parts.append(
                            line_text(child, "  ", terminal_width, status_padding, color)
                        )
                        count += 1
            parts.append(_SHOW)
            self._num_lines = count
            self.out.write("".join(parts))
            self.out.flush()


def line_text(
    event: Event, pad: str, terminal_width: int, status_padding: int, color: bool
) -> str:
    """Render one event as a full-width line with its elapsed time on the right."""
    start = event.start_time
    if start is None:
        elapsed = 0.0
    else:
        if event.status != EventStatus.WORKING:
            end = event.end_time if event.end_time is not None else start
        else:
            end = time.monotonic()
        elapsed = end - start

    text_len = len(f"{event.id} {event.text}")
    padding = max(status_padding - text_len, 0)
    # Long status texts (errors) would otherwise wrap and break the layout.
    max_status_len = terminal_width - text_len - status_padding - 15
    status = event.status_text
    if max_status_len > 0 and len(status) > max_status_len:
        status = status[:max_status_len] + "..."
    spinner = str(event.spinner) if event.spinner is not None else ""
    text = f"{pad} {spinner} {event.id} {event.text}{' ' * padding} {status}"
    timer = f"{elapsed:.1f}s\n"
    line = align(text, timer, terminal_width)

    if not color:
        return line
    if event.status == EventStatus.DONE:
        return _apply(line, _BLUE)
    if event.status == EventStatus.ERROR:
        return _apply(line, _RED)
    return _apply(line, _WHITE)


def num_done(events: Iterable[Event] | Mapping[str, Event]) -> int:
    """Count the events whose status is done."""
    if isinstance(events, Mapping):
        events = events.values()
    return sum(1 for e in events if e.status == EventStatus.DONE)


def align(left: str, right: str, width: int) -> str:
    """Left-justify ``left`` so that ``right`` ends at column ``width``."""
    field = abs(width - len(right) - 1)
    return f"{left:<{field}} {right}"