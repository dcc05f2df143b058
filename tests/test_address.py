import io

import pytest

from marketkeeper.address import (
    Address,
    check_elements,
    fix_address_param,
    load_address,
    load_address_compressed,
    parse_address,
    prompt_address,
)
from marketkeeper.filehelper import FileFormatError


def test_fix_single_word_is_capitalised():
    assert fix_address_param("herzl") == "Herzl"


def test_fix_several_words():
    assert fix_address_param("ben  yehuda Street") == "Ben  Yehuda  street"


def test_fix_blank_raises():
    with pytest.raises(ValueError):
        fix_address_param("   ")


@pytest.mark.parametrize(
    "elements, expected",
    [
        (["herzl", "12", "haifa"], True),
        (["herzl", "1x", "haifa"], False),
        (["herzl", "12"], False),
        ([" ", "12", "haifa"], False),
        (["herzl", "12", "\t"], False),
    ],
)
def test_check_elements(elements, expected):
    assert check_elements(elements) is expected


def test_parse_address():
    address = parse_address("rothschild blvd#12#tel aviv")
    assert address.num == 12
    assert address.street == fix_address_param("rothschild blvd")
    assert address.city == fix_address_param("tel aviv")


def test_parse_address_too_many_separators():
    with pytest.raises(ValueError, match="Too many separators"):
        parse_address("a#1#b#c")


def test_parse_address_bad_number():
    with pytest.raises(ValueError, match="incorrect address format"):
        parse_address("a#x1#b")


def test_str_format():
    assert str(Address(7, "Herzl", "Haifa")) == "Herzl 7, Haifa"


def test_prompt_address_retries(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bad input\nherzl#5#haifa\n"))
    address = prompt_address()
    assert address == Address(5, "Herzl", "Haifa")
    assert "!!!incorrect address format!!!" in capsys.readouterr().out


def test_save_load_round_trip():
    original = Address(1234, "Ben  Yehuda  street", "Tel  aviv")
    buf = io.BytesIO()
    original.save(buf)
    buf.seek(0)
    assert load_address(buf) == original


def test_compressed_round_trip():
    original = Address(42, "Herzl", "Haifa")
    buf = io.BytesIO()
    original.save_compressed(buf)
    assert buf.getvalue()[:1] == bytes([42])
    buf.seek(0)
    assert load_address_compressed(buf) == original


def test_compressed_number_too_large():
    with pytest.raises(ValueError):
        Address(300, "Herzl", "Haifa").save_compressed(io.BytesIO())


def test_load_truncated_raises():
    buf = io.BytesIO()
    Address(3, "Herzl", "Haifa").save(buf)
    with pytest.raises(FileFormatError):
        load_address(io.BytesIO(buf.getvalue()[:-2]))


def test_load_compressed_empty_raises():
    with pytest.raises(FileFormatError):
        load_address_compressed(io.BytesIO(b""))