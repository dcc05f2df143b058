"""Reading and writing the binary primitives used by the market files."""

import struct

_INT = struct.Struct("<i")


class FileFormatError(Exception):
    """Raised when a data file is truncated or malformed."""


def _read_exact(fp, length):
    if length < 0:
        raise FileFormatError(f"negative length {length}")
    data = fp.read(length)
    if len(data) != length:
        raise FileFormatError(f"expected {length} bytes, got {len(data)}")
    return data


def write_int(fp, value):
    """Write a 32-bit little-endian signed integer."""
    fp.write(_INT.pack(value))


def write_string(fp, text):
    """Write a length-prefixed, NUL-terminated string."""
    data = text.encode("utf-8") + b"\0"
    write_int(fp, len(data))
    fp.write(data)


def read_int(fp):
    """Read a 32-bit little-endian signed integer."""
    return _INT.unpack(_read_exact(fp, _INT.size))[0]


def read_string(fp):
    """Read a string written by write_string."""
    length = read_int(fp)
    data = _read_exact(fp, length)
    return data.split(b"\0", 1)[0].decode("utf-8")


def read_chars(fp, length):
    """Read exactly length bytes and decode them as text."""
    return _read_exact(fp, length).decode("utf-8")


def read_text_line(fp):
    """Read one line from a text file without its line break; empty at end."""
    return fp.readline().split("\n", 1)[0]