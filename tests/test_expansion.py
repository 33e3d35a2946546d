import pytest

from pokeshell.expansion import expand, expand_dollar, find_value
from pokeshell.quotes import UnclosedQuoteError

ENV = ["HOME=/home/user", "USER=bob", "PATH=/bin:/usr/bin"]


def test_find_value_known():
    assert find_value(ENV, "HOME") == "/home/user"
    assert find_value(ENV, "PATH") == "/bin:/usr/bin"


def test_find_value_matches_by_prefix():
    assert find_value(ENV, "HO") == "/home/user"


def test_find_value_empty_name_is_dollar():
    assert find_value(ENV, "") == "$"


def test_find_value_unknown_is_empty():
    assert find_value(ENV, "NOPE") == ""
    assert find_value([], "HOME") == ""


def test_expand_dollar_exit_status():
    assert expand_dollar("$?", 0, ENV, 42) == (str(42), len("$?"))


def test_expand_dollar_variable():
    text = "$USER rest"
    assert expand_dollar(text, 0, ENV, 0) == ("bob", len("$USER"))


def test_expand_dollar_stops_at_non_alnum():
    text = "x$USER_x"
    assert expand_dollar(text, 1, ENV, 0) == ("bob", len("x$USER"))


def test_expand_dollar_bare():
    assert expand_dollar("$ ", 0, ENV, 0) == ("$", 1)


def test_expand_plain_variable():
    assert expand("echo $USER", ENV, 0) == "echo bob"


def test_expand_exit_status():
    assert expand("echo $?", ENV, 7) == "echo " + str(7)


def test_expand_single_quotes_untouched():
    assert expand("echo '$USER'", ENV, 0) == "echo '$USER'"


def test_expand_inside_double_quotes():
    assert expand('echo "$USER x"', ENV, 0) == 'echo "bob x"'


def test_expand_bare_dollar_kept():
    assert expand("a $ b", ENV, 0) == "a $ b"


def test_expand_unknown_variable_vanishes():
    assert expand("a$NOPE.b", ENV, 0) == "a.b"


def test_expand_two_variables_unquoted():
    assert expand("$USER$HOME", ENV, 0) == "bob/home/user"


def test_expand_char_after_quoted_expansion_is_literal():
    assert expand('"$A$B"', ["A=1", "B=2"], 0) == '"1$B"'


@pytest.mark.parametrize(
    "text", ["ls -la", "cat < in | wc > out", "echo 'a b' \"c d\"", "x"]
)
def test_expand_without_dollar_is_identity(text):
    assert expand(text, ENV, 0) == text


def test_expand_empty():
    assert expand("", ENV, 0) == ""


def test_expand_unclosed_quote_raises():
    with pytest.raises(UnclosedQuoteError):
        expand('echo "$USER', ENV, 0)