"""Run a task while a progress writer reports its events."""

from __future__ import annotations

import contextlib
import contextvars
import sys
import threading
from typing import Callable, Iterator, TextIO

from dockcompose.plain import NoopWriter, PlainWriter, Writer
from dockcompose.tty import TTYWriter

__all__ = [
    "with_context_writer",
    "context_writer",
    "new_writer",
    "run",
    "run_with_status",
]

_current_writer: contextvars.ContextVar[Writer | None] = contextvars.ContextVar(
    "progress_writer", default=None
)


@contextlib.contextmanager
def with_context_writer(writer: Writer) -> Iterator[Writer]:
    """Make ``writer`` the current progress writer inside the block."""
    token = _current_writer.set(writer)
    try:
        yield writer
    finally:
        _current_writer.reset(token)


def context_writer() -> Writer:
    """Return the current progress writer, or one that discards everything."""
    writer = _current_writer.get()
    return writer if writer is not None else NoopWriter()


def new_writer(out: TextIO) -> Writer:
    """Pick a redrawing writer for a terminal and a plain one otherwise."""
    isatty = getattr(out, "isatty", None)
    try:
        terminal = bool(isatty()) if isatty is not None else False
    except (OSError, ValueError):
        terminal = False
    if terminal:
        return TTYWriter(out=out)
    return PlainWriter(out=out)


def run(func: Callable[[], object], out: TextIO | None = None) -> None:
    """Run ``func`` while a progress writer runs alongside it."""
    run_with_status(lambda: (func(), "")[1], out)


def run_with_status(func: Callable[[], str], out: TextIO | None = None) -> str:
    """Run ``func`` while a progress writer runs alongside it; return its status."""
    writer = new_writer(out if out is not None else sys.stderr)
    writer_error: list[BaseException] = []

    def _drive() -> None:
        try:
            writer.start()
        except BaseException as exc:  # reported after the task finishes
            writer_error.append(exc)

    thread = threading.Thread(target=_drive, daemon=True)
    thread.start()
    try:
        with with_context_writer(writer):
            result = func()
    finally:
        writer.stop()
        thread.join()
    if writer_error:
        raise writer_error[0]
    return result