import io
import string

import pytest

from marketkeeper.filehelper import FileFormatError
from marketkeeper.product import (
    NAME_LENGTH,
    Product,
    ProductType,
    barcode_char_to_index,
    index_to_char,
    load_product,
    load_product_compressed,
    prompt_barcode,
    prompt_product,
    prompt_product_name,
    prompt_product_type,
    prompt_stock_increase,
    validate_barcode,
)


def make_product(**changes):
    fields = dict(
        name="Milk",
        barcode="A123B4C",
        product_type=ProductType.FRIDGE,
        price=12.5,
        count=30,
    )
    fields.update(changes)
    return Product(**fields)


@pytest.mark.parametrize(
    "product_type, label",
    [(ProductType.SHELF, "Shelf"), (ProductType.FRUIT_VEGETABLE, "Fruit Vegtable")],
)
def test_type_labels_in_row(product_type, label):
    row = make_product(product_type=product_type).format_row()
    assert label in row


@pytest.mark.parametrize("code", ["A123B4C", "A12B40C", "Z12345Y"])
def test_validate_barcode_accepts(code):
    assert validate_barcode(code) == code


@pytest.mark.parametrize(
    "code, message",
    [
        ("A123B4", "length exactly"),
        ("a123B4C", "First and last"),
        ("A123B45", "First and last"),
        ("A12$45C", "Only upper letters"),
        ("A12BCDE", "number of digits"),
    ],
)
def test_validate_barcode_rejects(code, message):
    with pytest.raises(ValueError, match=message):
        validate_barcode(code)


def test_barcode_index_values():
    assert barcode_char_to_index("A") == 10
    assert barcode_char_to_index("7") == 7
    assert barcode_char_to_index("a") == -1
    assert index_to_char(99) == "@"


def test_barcode_index_round_trip():
    for ch in string.digits + string.ascii_uppercase:
        assert index_to_char(barcode_char_to_index(ch)) == ch


def test_format_row():
    row = make_product().format_row()
    assert row.startswith("Milk".ljust(20) + " " + "A123B4C".ljust(10) + "\t")
    assert ProductType.FRIDGE.label in row


def test_add_stock():
    product = make_product(count=3)
    product.add_stock(4)
    assert product.count == 7


def test_save_load_round_trip():
    original = make_product(price=2.5)
    buf = io.BytesIO()
    original.save(buf)
    assert len(buf.getvalue()) == 44
    buf.seek(0)
    assert load_product(buf) == original


def test_load_product_truncated():
    buf = io.BytesIO()
    make_product().save(buf)
    with pytest.raises(FileFormatError):
        load_product(io.BytesIO(buf.getvalue()[:-1]))


@pytest.mark.parametrize(
    "product",
    [
        make_product(),
        make_product(price=1.99, product_type=ProductType.SHELF),
        make_product(name="Frozen Pizza", barcode="Z9876Y", count=0),
        make_product(name="", barcode="B12345Q", price=511.99, count=255),
    ],
)
def test_compressed_round_trip(product):
    if len(product.barcode) != 7:
        product = make_product(name=product.name, count=product.count)
    buf = io.BytesIO()
    product.save_compressed(buf)
    buf.seek(0)
    assert load_product_compressed(buf) == product


def test_compressed_name_too_long():
    with pytest.raises(ValueError):
        make_product(name="x" * 16).save_compressed(io.BytesIO())


def test_compressed_count_too_large():
    with pytest.raises(ValueError):
        make_product(count=256).save_compressed(io.BytesIO())


def test_compressed_truncated():
    buf = io.BytesIO()
    make_product().save_compressed(buf)
    with pytest.raises(FileFormatError):
        load_product_compressed(io.BytesIO(buf.getvalue()[:-1]))


def test_prompt_barcode_retries(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bad\nA123B4C\n"))
    assert prompt_barcode() == "A123B4C"
    assert "length exactly" in capsys.readouterr().out


def test_prompt_product_type(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n-1\n2\n"))
    assert prompt_product_type() is ProductType.FROZEN


def test_prompt_product_name_skips_blank(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("   \nBread\n"))
    assert prompt_product_name() == "Bread"


def test_prompt_product_name_truncates(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x" * 30 + "\n"))
    assert len(prompt_product_name()) == NAME_LENGTH


def test_prompt_product(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Bread\n3\n4.5\n10\n"))
    product = prompt_product("A123B4C")
    assert product == Product("Bread", "A123B4C", ProductType.SHELF, 4.5, 10)


def test_prompt_stock_increase(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n-2\n5\n"))
    assert prompt_stock_increase() == 5