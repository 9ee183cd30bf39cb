import io
import threading

import pytest

from dockcompose.event import Event, EventStatus, started_event
from dockcompose.plain import NoopWriter, PlainWriter, Writer


def test_writer_is_abstract():
    with pytest.raises(TypeError):
        Writer()


def test_noop_writer_does_nothing():
    w = NoopWriter()
    results = (
        w.start(),
        w.event(started_event("x")),
        w.tail_msgf("msg %s", "x"),
        w.stop(),
    )
    assert results == (None, None, None, None)
    assert w == NoopWriter()


def test_noop_start_returns_at_once():
    w = NoopWriter()
    t = threading.Thread(target=w.start)
    t.start()
    t.join(timeout=2)
    assert not t.is_alive()


def test_plain_event_line():
    out = io.StringIO()
    w = PlainWriter(out)
    w.event(Event(id="web", text="Pulling", status=EventStatus.WORKING, status_text="50%"))
    assert out.getvalue() == "web Pulling 50%\n"


def test_plain_event_with_empty_text():
    out = io.StringIO()
    PlainWriter(out).event(started_event("db"))
    assert out.getvalue() == "db  Started\n"


def test_plain_tail_message_is_printed_with_args():
    out = io.StringIO()
    PlainWriter(out).tail_msgf("Pulling", "web", "boom")
    assert out.getvalue() == "Pulling web boom\n"


def test_plain_start_blocks_until_stop():
    w = PlainWriter(io.StringIO())
    t = threading.Thread(target=w.start)
    t.start()
    t.join(timeout=0.1)
    assert t.is_alive()
    w.stop()
    t.join(timeout=2)
    assert not t.is_alive()