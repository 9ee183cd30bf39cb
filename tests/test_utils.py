from dockcompose.utils import SplitWriter, get_writer, string_contains


def test_split_writer():
    lines = []
    w = get_writer(lines.append)
    for chunk in [b"h", b"e", b"l", b"l", b"o", b"\n", b"world!\n"]:
        w.write(chunk)
    assert lines == ["hello", "world!"]


def test_write_returns_length():
    w = get_writer(lambda line: None)
    assert w.write(b"abc\nde") == 6


def test_multiple_lines_in_one_write():
    lines = []
    w = SplitWriter(lines.append)
    w.write(b"a\nb\nc")
    assert lines == ["a", "b"]


def test_close_flushes_remainder():
    lines = []
    w = get_writer(lines.append)
    w.write(b"partial")
    assert lines == []
    w.close()
    assert lines == ["partial"]


def test_close_with_empty_buffer_emits_nothing():
    lines = []
    w = get_writer(lines.append)
    w.write(b"done\n")
    w.close()
    assert lines == ["done"]


def test_context_manager_closes():
    lines = []
    with get_writer(lines.append) as w:
        w.write("x\ny")
    assert lines == ["x", "y"]


def test_empty_lines_are_kept():
    lines = []
    w = get_writer(lines.append)
    w.write(b"\n\n")
    assert lines == ["", ""]


def test_string_contains():
    assert string_contains(["a", "b"], "b")
    assert not string_contains(["a", "b"], "c")
    assert not string_contains([], "a")