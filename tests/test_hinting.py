import pytest

from lineedit.hinting import get_first_token, is_whitespace_str


@pytest.mark.parametrize("text", ["", " ", " \t\n", "\u3000"])
def test_whitespace_strings(text):
    assert is_whitespace_str(text) is True


@pytest.mark.parametrize("text", [" a", "x", "\x1c", "a b"])
def test_non_whitespace_strings(text):
    assert is_whitespace_str(text) is False


def test_first_token_of_empty_is_empty():
    assert get_first_token("") == ""


def test_first_token_of_whitespace_is_everything():
    assert get_first_token("   ") == "   "


def test_first_token_keeps_leading_space():
    assert get_first_token(" foo bar") == " foo"


def test_first_token_single_word():
    assert get_first_token("foo") == "foo"


def test_first_token_stops_at_punctuation():
    assert get_first_token("hello, world") == "hello"


@pytest.mark.parametrize(
    "text", ["ls -la", "  git commit -m", "a/b/c", "échelle du", "\tx"]
)
def test_first_token_is_prefix_with_single_content_piece(text):
    token = get_first_token(text)
    assert text.startswith(token)
    stripped = token.lstrip()
    assert stripped
    assert not any(c.isspace() for c in stripped)
    assert is_whitespace_str(token[: len(token) - len(stripped)])