# marketkeeper

A console manager for a single supermarket. It keeps a stock of products
ordered by barcode, a list of customers with their shopping history, and an
open shopping cart for each customer who is shopping at the moment. The market
is stored in a binary file, in either a plain layout or a compact bit-packed
layout. The customers are stored in a text file named `Customers.txt` in the
current working directory.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
marketkeeper <mode> <market-file>
```

- `mode` is `1` to read and write the market in the compressed binary layout;
  any other value selects the plain binary layout.
- `market-file` is the path of the market file.

If the market file or `Customers.txt` cannot be read, or is malformed, you are
asked for a market name and an address in the form `street#house number#city`
(for example `main street#12#haifa`) and a new, empty market is started.
Street and city are stored with their words joined by two spaces.

The menu then offers:

| Option | Action |
|-------:|--------|
| 0 | Show the supermarket |
| 1 | Add a product, or add stock to an existing one |
| 2 | Add a customer |
| 3 | Let a customer shop |
| 4 | Print a customer's shopping cart |
| 5 | Let a customer pay |
| 6 | Sort the customers by name, times shopped or money spent |
| 7 | Search the sorted customer list |
| 8 | Print the products of one type |
| -1 | Quit |

Any other entry prints `Wrong option`. On quitting (or when standard input
ends), every customer who still holds a cart pays for it, and the market and
its customers are written back to their files. Called with the wrong number
of arguments, the command prints a usage line and exits with status 2.

## Barcodes

A barcode is exactly seven characters of upper-case letters and digits. The
first and last characters are letters, and it holds three to five digits, for
example `A12B40C`. `marketkeeper.product.validate_barcode` checks one and
raises `ValueError` with the reason when it is invalid.

## Product types

`ProductType` has four members: `FRUIT_VEGETABLE`, `FRIDGE`, `FROZEN` and
`SHELF`, numbered 0 to 3.

## File layouts

Plain layout: the market name and address as length-prefixed strings and
little-endian 32-bit integers, the product count, then one fixed-size record
per product (names up to 20 bytes).

Compressed layout: the product count and name length packed into two bytes,
barcodes packed at six bits per character, and prices as whole units plus
cents. It has tighter limits, and saving raises `ValueError` when they are
exceeded:

- market name up to 63 bytes, at most 1023 products;
- house number 0 to 255;
- product names up to 15 bytes, stock count 0 to 255, price below 512.

Shopping carts are not stored; they are paid off before saving.

## Using it from Python

```python
from marketkeeper.address import Address, parse_address
from marketkeeper.product import Product, ProductType
from marketkeeper.customer import Customer
from marketkeeper.supermarket import SuperMarket, SortOption
from marketkeeper.superfile import save_market, load_market_compressed

market = SuperMarket(name="Corner", location=parse_address("main street#12#haifa"))
market.insert_product(Product("Milk", "A123B4C", ProductType.FRIDGE, 5.9, 30))
dana = market.add_customer(Customer("Dana"))

market.buy(dana, "A123B4C", 2)   # moves stock into Dana's cart
dana.pay()                        # prints the bill, returns the amount paid

market.sort_customers(SortOption.SPEND)
market.search_customer(dana.total_spend)   # binary search on the sort field

save_market(market, "market.bin", "Customers.txt", compressed=True)
copy = load_market_compressed("market.bin", "Customers.txt")
```

Useful entry points:

- `SuperMarket.insert_product`, `get_product`, `products_of_type`,
  `add_customer`, `find_customer`, `buy`, `sort_customers`,
  `search_customer`, `close_open_carts` and `describe` work without any
  prompts. `insert_product` and `add_customer` raise `ValueError` for a
  barcode or name that is already present; `buy` raises `LookupError` for an
  unknown barcode and `ValueError` for an invalid count.
- `SuperMarket.add_product`, `do_shopping`, `print_cart` and `pay_customer`
  ask their questions on standard input.
- `marketkeeper.superfile` has `save_market`, `load_market`,
  `load_market_compressed`, `open_market` and `load_products_from_text`, which
  adds products listed in a text file (name, barcode and `type price count`
  lines, after a first line holding the count).
- `marketkeeper.customer` has `save_customers` and `load_customers` for the
  customers text file.
- `marketkeeper.filehelper` holds the low-level readers and writers for the
  length-prefixed binary layout, and raises `FileFormatError` when a file is
  short or malformed.