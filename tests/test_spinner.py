import time

from dockcompose.spinner import Spinner


def test_fresh_spinner_shows_first_frame():
    s = Spinner(chars=["a", "b", "c"])
    assert str(s) == "a"
    assert str(s) == "a"


def test_spinner_advances_after_delay_and_wraps():
    s = Spinner(chars=["a", "b", "c"])
    s.started = time.monotonic() - 1
    assert [str(s) for _ in range(4)] == ["b", "c", "a", "b"]


def test_stopped_spinner_shows_done():
    s = Spinner(chars=["a", "b"], done="z")
    s.stop()
    assert s.stopped is True
    assert str(s) == "z"


def test_default_frames_contain_done_distinct_from_frames():
    s = Spinner()
    assert len(s.chars) >= 1
    assert str(s) in s.chars
    s.stop()
    assert str(s) == s.done