import io

import pytest

from dockcompose.prompt import UI, User


def _user(answers: str) -> tuple[User, io.StringIO]:
    out = io.StringIO()
    return User(stdin=io.StringIO(answers), stdout=out), out


def test_select_returns_index_of_chosen_option():
    options = ["a", "b", "c"]
    user, out = _user("2\n")
    assert user.select("Pick one", options) == options.index("b")
    assert "Pick one" in out.getvalue()
    assert "c" in out.getvalue()


def test_select_asks_again_after_invalid_choice():
    options = ["a", "b"]
    user, out = _user("9\nnope\n1\n")
    assert user.select("Pick", options) == options.index("a")
    assert out.getvalue().count("invalid choice") == 2


def test_select_without_options_raises():
    user, _ = _user("1\n")
    with pytest.raises(ValueError):
        user.select("Pick", [])


def test_input_returns_typed_text():
    user, out = _user("hello world\n")
    assert user.input("Name?", "default") == "hello world"
    assert "(default)" in out.getvalue()


def test_input_empty_answer_gives_default():
    user, _ = _user("\n")
    assert user.input("Name?", "fallback") == "fallback"


@pytest.mark.parametrize(
    "answer, default, expected",
    [
        ("y\n", False, True),
        ("YES\n", False, True),
        ("n\n", True, False),
        ("\n", False, False),
        ("\n", True, True),
    ],
)
def test_confirm(answer, default, expected):
    user, _ = _user(answer)
    assert user.confirm("Continue?", default) is expected


def test_confirm_reprompts_on_garbage():
    user, out = _user("maybe\ny\n")
    assert user.confirm("Continue?", False) is True
    assert "invalid answer" in out.getvalue()


def test_confirm_hint_reflects_default():
    user, out = _user("\n")
    user.confirm("Remove?", False)
    assert "(y/N)" in out.getvalue()


def test_password_reads_line_from_given_stream():
    user, _ = _user("password\n")
    assert user.password("Password:") == "password"


def test_end_of_input_raises_eof():
    user, _ = _user("")
    with pytest.raises(EOFError):
        user.input("Name?", "x")


def test_user_is_a_ui():
    user, _ = _user("y\n")
    assert isinstance(user, UI)
    assert user.confirm("ok?", False) is True