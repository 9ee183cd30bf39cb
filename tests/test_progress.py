import io
import threading

import pytest

from dockcompose.event import Event, EventStatus
from dockcompose.plain import NoopWriter, PlainWriter
from dockcompose.progress import (
    context_writer,
    new_writer,
    run,
    run_with_status,
    with_context_writer,
)
from dockcompose.tty import TTYWriter


class _FakeTerminal(io.StringIO):
    def isatty(self):
        return True


def test_noop_writer():
    assert context_writer() == NoopWriter()


def test_with_context_writer_sets_and_restores():
    writer = PlainWriter(out=io.StringIO())
    with with_context_writer(writer):
        assert context_writer() is writer
    assert context_writer() == NoopWriter()


def test_new_writer_plain_for_non_terminal():
    out = io.StringIO()
    writer = new_writer(out)
    assert isinstance(writer, PlainWriter)
    assert writer.out is out


def test_new_writer_tty_for_terminal():
    term = _FakeTerminal()
    writer = new_writer(term)
    assert isinstance(writer, TTYWriter)
    writer.tail_msgf("done %s", "x")
    t = threading.Thread(target=writer.start)
    t.start()
    writer.stop()
    t.join(timeout=2)
    assert not t.is_alive()
    assert "done x\n" in term.getvalue()


def test_run_with_status_returns_status_and_reports_events():
    out = io.StringIO()

    def task():
        context_writer().event(
            Event(id="svc", text="Pulled", status=EventStatus.DONE, status_text="done")
        )
        return "ok"

    assert run_with_status(task, out) == "ok"
    assert out.getvalue() == "svc Pulled done\n"


def test_run_propagates_errors():
    def task():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run(task, io.StringIO())
    assert context_writer() == NoopWriter()


def test_run_returns_none_and_writes_tail():
    out = io.StringIO()
    result = run(lambda: context_writer().tail_msgf("Pulling", "svc"), out)
    assert result is None
    assert out.getvalue() == "Pulling svc\n"