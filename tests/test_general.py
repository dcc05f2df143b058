import io

import pytest

from marketkeeper.general import (
    ask_positive_float,
    ask_positive_int,
    ask_string,
    count_char,
    is_blank,
    print_message,
    read_line,
    split_words,
)


def test_split_words_drops_empty_tokens():
    assert split_words("  alpha  beta gamma ", " ") == ["alpha", "beta", "gamma"]


def test_split_words_several_delimiters():
    assert split_words("a#b c", "# ") == ["a", "b", "c"]


def test_split_words_only_delimiters():
    assert split_words("###", "#") == []


def test_count_char_matches_split_pieces():
    text = "street#12#city"
    assert count_char(text, "#") + 1 == len(split_words(text, "#"))


def test_count_char_absent():
    assert count_char("no separators", "#") == 0


@pytest.mark.parametrize("text", ["", " ", "\t\n  "])
def test_is_blank_true(text):
    assert is_blank(text) is True


@pytest.mark.parametrize("text", ["x", "  y  ", "\tz"])
def test_is_blank_false(text):
    assert is_blank(text) is False


def test_read_line_strips_newline_and_hits_eof():
    source = io.StringIO("hello\nworld\n")
    assert read_line(source) == "hello"
    assert read_line(source) == "world"
    with pytest.raises(EOFError):
        read_line(source)


def test_ask_string_prints_prompt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("answer\n"))
    assert ask_string("Question?") == "answer"
    assert "Question?" in capsys.readouterr().out


def test_ask_positive_float_retries(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("-1\nabc\n\n2.5\n"))
    assert ask_positive_float("price") == 2.5


def test_ask_positive_int_retries(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("-3\n1.5\n7\n"))
    assert ask_positive_int("count") == 7


def test_ask_positive_int_eof(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("-3\n"))
    with pytest.raises(EOFError):
        ask_positive_int("count")


def test_print_message(capsys):
    print_message("Thank", "you")
    assert capsys.readouterr().out == "Thank you "