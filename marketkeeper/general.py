"""Console input helpers and small string utilities."""

import re
import sys

MAX_STR_LEN = 255


def read_line(source):
    """Read one line from a text stream, without its line break.

    Raises EOFError when the stream is exhausted.
    """
    line = source.readline()
    if not line:
        raise EOFError("end of input")
    return line.split("\n", 1)[0]


def ask_string(msg):
    """Show a prompt and return the line the user types."""
    print(msg)
    return read_line(sys.stdin)


def split_words(text, delimiters):
    """Split text on any of the delimiter characters, dropping empty pieces."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [word for word in re.split(pattern, text) if word]


def count_char(text, ch):
    """Count how many times a character occurs in text."""
    return text.count(ch)


def is_blank(text):
    """True when text is empty or holds only whitespace."""
    return not text or text.isspace()


def _ask_non_negative(msg, convert):
    while True:
        print(msg)
        tokens = read_line(sys.stdin).split()
        if not tokens:
            continue
        try:
            value = convert(tokens[0])
        except ValueError:
            continue
        if value >= 0:
            return value


def ask_positive_float(msg):
    """Prompt until a non-negative number is entered."""
    return _ask_non_negative(msg, float)


def ask_positive_int(msg):
    """Prompt until a non-negative whole number is entered."""
    return _ask_non_negative(msg, int)


def print_message(*args):
    """Print every argument followed by a single space."""
    print("".join(f"{arg} " for arg in args), end="")