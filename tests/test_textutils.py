import io

import pytest

from tokshell.textutils import print_error, str_is_empty, str_join_char, str_join_free


def test_join_char_appends():
    assert str_join_char("ab", "c") == "abc"


def test_join_char_on_missing_text():
    assert str_join_char(None, "x") == "x"


def test_join_char_rejects_long_string():
    with pytest.raises(ValueError):
        str_join_char("ab", "cd")


def test_join_free_concatenates():
    assert str_join_free("ab", "cd") == "abcd"


def test_join_free_with_one_missing():
    assert str_join_free(None, "cd") == "cd"
    assert str_join_free("ab", None) == "ab"


def test_join_free_both_missing():
    with pytest.raises(TypeError):
        str_join_free(None, None)


@pytest.mark.parametrize("text", [None, "", " \t\n\v\f\r"])
def test_empty_strings(text):
    assert str_is_empty(text) is True


@pytest.mark.parametrize("text", [" a ", "x", "\t|"])
def test_non_empty_strings(text):
    assert str_is_empty(text) is False


def test_print_error_format():
    buf = io.StringIO()
    print_error("malloc failed", buf)
    assert buf.getvalue() == "Error: malloc failed\n"


def test_print_error_defaults_to_stderr(capsys):
    print_error("boom")
    captured = capsys.readouterr()
    assert captured.err == "Error: boom\n"
    assert captured.out == ""