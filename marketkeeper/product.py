"""Products on the market shelves: validation, prompts and file storage."""

import enum
import struct
import sys
from dataclasses import dataclass

from .filehelper import FileFormatError, read_chars, read_int, write_int
from .general import ask_positive_float, ask_positive_int, ask_string, is_blank, read_line

NAME_LENGTH = 20
BARCODE_LENGTH = 7
MIN_DIG = 3
MAX_DIG = 5
_COMPRESSED_NAME_MAX = 15

_RECORD = struct.Struct(f"<{NAME_LENGTH + 1}s{BARCODE_LENGTH + 1}s3xifi")
_FLOAT = struct.Struct("<f")

_BARCODE_RULES = (
    f"Code should be of {BARCODE_LENGTH} length exactly\n"
    "UPPER CASE letter and digits\n"
    f"Must have {MIN_DIG} to {MAX_DIG} digits\n"
    "First and last chars must be UPPER CASE letter\n"
    "For example A12B40C\n"
)
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"


class ProductType(enum.IntEnum):
    """Where a product is stored."""

    FRUIT_VEGETABLE = 0
    FRIDGE = 1
    FROZEN = 2
    SHELF = 3

    @property
    def label(self):
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    ProductType.FRUIT_VEGETABLE: "Fruit Vegtable",
    ProductType.FRIDGE: "Fridge",
    ProductType.FROZEN: "Frozen",
    ProductType.SHELF: "Shelf",
}


def _f32(value):
    return _FLOAT.unpack(_FLOAT.pack(value))[0]


def _read_exact(fp, length):
    data = fp.read(length)
    if len(data) != length:
        raise FileFormatError(f"expected {length} bytes, got {len(data)}")
    return data


@dataclass
class Product:
    """A product in stock."""

    name: str
    barcode: str
    product_type: ProductType
    price: float
    count: int

    def format_row(self):
        """One table row describing the product."""
        return (
            f"{self.name:<20} {self.barcode:<10}\t"
            f"{self.product_type.label:<20} {self.price:5.2f} {self.count:10d}"
        )

    def add_stock(self, amount):
        """Add items to the stock count."""
        self.count += amount

    def save(self, fp):
        """Write the product as a fixed-size binary record."""
        name = self.name.encode("utf-8")
        barcode = self.barcode.encode("utf-8")
        if len(name) > NAME_LENGTH:
            raise ValueError(f"name longer than {NAME_LENGTH} bytes")
        if len(barcode) > BARCODE_LENGTH:
            raise ValueError(f"barcode longer than {BARCODE_LENGTH} bytes")
        fp.write(
            _RECORD.pack(name, barcode, int(self.product_type), self.price, self.count)
        )

    def save_compressed(self, fp):
        """Write the product in the bit-packed compressed format."""
        indexes = [barcode_char_to_index(ch) for ch in self.barcode]
        if len(indexes) != BARCODE_LENGTH or min(indexes) < 0:
            raise ValueError(f"barcode {self.barcode!r} cannot be compressed")
        name = self.name.encode("utf-8")
        if len(name) > _COMPRESSED_NAME_MAX:
            raise ValueError(f"name longer than {_COMPRESSED_NAME_MAX} bytes")
        if not 0 <= self.count <= 0xFF:
            raise ValueError(f"count {self.count} does not fit in one byte")
        price = _f32(self.price)
        whole = int(price)
        if price < 0 or whole > 0x1FF:
            raise ValueError(f"price {self.price} out of range")
        cents = int(_f32(price * 100)) % 100

        a = indexes
        header = bytes(
            value & 0xFF
            for value in (
                a[0] << 2 | a[1] >> 4,
                a[1] << 4 | a[2] >> 2,
                a[2] << 6 | a[3],
                a[4] << 2 | a[5] >> 4,
                a[5] << 4 | a[6] >> 2,
                a[6] << 6 | len(name) << 2 | int(self.product_type),
            )
        )
        fp.write(header)
        write_int(fp, len(name))
        fp.write(name)
        fp.write(bytes([self.count, (cents << 1 | whole >> 8) & 0xFF, whole & 0xFF]))


def validate_barcode(code):
    """Return code if it is a valid barcode, else raise ValueError."""
    if len(code) != BARCODE_LENGTH:
        raise ValueError(_BARCODE_RULES)
    if code[0] not in _UPPER or code[-1] not in _UPPER:
        raise ValueError("First and last must be upper case letters\n")
    middle = code[1:-1]
    if any(ch not in _UPPER and ch not in _DIGITS for ch in middle):
        raise ValueError("Only upper letters and digits\n")
    digits = sum(ch in _DIGITS for ch in middle)
    if not MIN_DIG <= digits <= MAX_DIG:
        raise ValueError("Incorrect number of digits\n")
    return code


def prompt_barcode():
    """Ask for a barcode until a valid one is entered."""
    while True:
        print("Enter product barcode ", end="")
        try:
            return validate_barcode(ask_string(_BARCODE_RULES))
        except ValueError as err:
            print(err)


def _ask_int(msg):
    while True:
        print(msg, end="")
        tokens = read_line(sys.stdin).split()
        if not tokens:
            continue
        try:
            return int(tokens[0])
        except ValueError:
            continue


def prompt_product_type():
    """Ask for a product type by number."""
    print("\n")
    menu = "Please enter one of the following types\n" + "".join(
        f"{kind.value} for {kind.label}\n" for kind in ProductType
    )
    while True:
        option = _ask_int(menu)
        if 0 <= option < len(ProductType):
            return ProductType(option)


def prompt_product_name():
    """Ask for a non-blank product name, cut to the maximum length."""
    while True:
        print(f"enter product name up to {NAME_LENGTH} chars")
        name = read_line(sys.stdin)[:NAME_LENGTH]
        if not is_blank(name):
            return name


def prompt_product(barcode):
    """Ask for every field of a product that has the given barcode."""
    name = prompt_product_name()
    product_type = prompt_product_type()
    price = ask_positive_float("Enter product price\t")
    count = ask_positive_int("Enter product number of items\t")
    return Product(name, barcode, product_type, price, count)


def prompt_stock_increase():
    """Ask how many items to add to stock; at least one."""
    while True:
        amount = _ask_int("How many items to add to stock?")
        if amount >= 1:
            return amount


def barcode_char_to_index(ch):
    """Map 0-9 to 0-9 and A-Z to 10-35; any other character gives -1."""
    if ch in _UPPER:
        return ord(ch) - ord("A") + 10
    if ch in _DIGITS:
        return ord(ch) - ord("0")
    return -1


def index_to_char(index):
    """Inverse of barcode_char_to_index; out-of-range indexes give '@'."""
    if 0 <= index <= 9:
        return chr(index + ord("0"))
    if 10 <= index <= 35:
        return chr(index - 10 + ord("A"))
    return "@"


def load_product(fp):
    """Read a product written by Product.save."""
    name, barcode, kind, price, count = _RECORD.unpack(_read_exact(fp, _RECORD.size))
    try:
        product_type = ProductType(kind)
    except ValueError:
        raise FileFormatError(f"unknown product type {kind}") from None
    return Product(
        name.split(b"\0", 1)[0].decode("utf-8"),
        barcode.split(b"\0", 1)[0].decode("utf-8"),
        product_type,
        price,
        count,
    )


def load_product_compressed(fp):
    """Read a product written by Product.save_compressed."""
    d = _read_exact(fp, 6)
    indexes = (
        d[0] >> 2,
        (d[0] & 0x3) << 4 | d[1] >> 4,
        (d[1] & 0xF) << 2 | d[2] >> 6,
        d[2] & 0x3F,
        d[3] >> 2,
        (d[3] & 0x3) << 4 | d[4] >> 4,
        (d[4] & 0xF) << 2 | d[5] >> 6,
    )
    barcode = "".join(index_to_char(i) for i in indexes)
    name_length = (d[5] & 0x3C) >> 2
    product_type = ProductType(d[5] & 0x3)
    stored_length = read_int(fp)
    if stored_length != name_length:
        raise FileFormatError("name length mismatch")
    name = read_chars(fp, name_length)
    count, packed, low = _read_exact(fp, 3)
    cents = packed >> 1
    whole = (packed & 0x1) << 8 | low
    return Product(name, barcode, product_type, (whole * 100 + cents) / 100.0, count)