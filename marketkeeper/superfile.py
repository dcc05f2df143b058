"""Saving and loading a whole supermarket to and from its data files."""

from .address import load_address, load_address_compressed, prompt_address
from .customer import load_customers, save_customers
from .filehelper import (
    FileFormatError,
    read_chars,
    read_int,
    read_string,
    read_text_line,
    write_int,
    write_string,
)
from .general import ask_string
from .product import (
    BARCODE_LENGTH,
    NAME_LENGTH,
    Product,
    ProductType,
    load_product,
    load_product_compressed,
)
from .supermarket import SuperMarket

_MAX_COMPRESSED_PRODUCTS = 0x3FF
_MAX_COMPRESSED_NAME = 0x3F


def _insert_loaded(market, product):
    try:
        market.insert_product(product)
    except ValueError:
        raise FileFormatError(f"duplicate barcode {product.barcode!r}") from None


def save_market_compressed(market, fp):
    """Write the market and its products in the bit-packed format."""
    name = market.name.encode("utf-8")
    count = len(market.products)
    if count > _MAX_COMPRESSED_PRODUCTS:
        raise ValueError(f"too many products to compress: {count}")
    if len(name) > _MAX_COMPRESSED_NAME:
        raise ValueError(f"market name longer than {_MAX_COMPRESSED_NAME} bytes")
    fp.write(bytes([count >> 2, (count & 0x3) << 6 | len(name)]))
    fp.write(name)
    market.location.save_compressed(fp)
    for product in market.products:
        product.save_compressed(fp)


def save_market(market, path, customers_path, compressed):
    """Write the market to path and its customers to customers_path."""
    with open(path, "wb") as fp:
        if compressed:
            save_market_compressed(market, fp)
        else:
            write_string(fp, market.name)
            market.location.save(fp)
            write_int(fp, len(market.products))
            for product in market.products:
                product.save(fp)
    save_customers(market.customers, customers_path)


def load_market(path, customers_path):
    """Read a market written by save_market in the plain format."""
    with open(path, "rb") as fp:
        name = read_string(fp)
        market = SuperMarket(name, load_address(fp))
        count = read_int(fp)
        for _ in range(max(count, 0)):
            _insert_loaded(market, load_product(fp))
    market.customers = load_customers(customers_path)
    return market


def load_market_compressed(path, customers_path):
    """Read a market written by save_market in the compressed format."""
    with open(path, "rb") as fp:
        header = fp.read(2)
        if len(header) != 2:
            raise FileFormatError("missing market header")
        product_count = header[0] << 2 | header[1] >> 6
        name = read_chars(fp, header[1] & 0x3F)
        market = SuperMarket(name, load_address_compressed(fp))
        for _ in range(product_count):
            _insert_loaded(market, load_product_compressed(fp))
    market.customers = load_customers(customers_path)
    return market


def load_products_from_text(market, path):
    """Add the products listed in a text file; return how many were added.

    Each product takes three lines: name, barcode and 'type price count'.
    A barcode already in the market is reported and skipped.
    """
    added = 0
    with open(path, encoding="utf-8") as fp:
        try:
            count = int(read_text_line(fp).strip())
        except ValueError:
            raise FileFormatError("bad product count") from None
        for _ in range(max(count, 0)):
            name = read_text_line(fp)[:NAME_LENGTH]
            barcode = read_text_line(fp)[:BARCODE_LENGTH]
            fields = read_text_line(fp).split()
            if len(fields) < 3:
                raise FileFormatError(f"missing data for product {barcode!r}")
            try:
                product = Product(
                    name, barcode, ProductType(int(fields[0])), float(fields[1]), int(fields[2])
                )
            except ValueError:
                raise FileFormatError(f"bad data for product {barcode!r}") from None
            try:
                market.insert_product(product)
            except ValueError as err:
                print(err)
                continue
            added += 1
    return added


def open_market(path, customers_path, compressed):
    """Load the market from its files, or ask the user for a new one."""
    loader = load_market_compressed if compressed else load_market
    try:
        market = loader(path, customers_path)
    except (OSError, FileFormatError, ValueError):
        name = ask_string("Enter market name")
        return SuperMarket(name, prompt_address())
    print("Supermarket successfully loaded from files")
    return market