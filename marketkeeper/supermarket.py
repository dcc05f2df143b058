"""The supermarket: its products, customers and the shopping workflow."""

import bisect
import enum
import sys
from dataclasses import dataclass, field
from typing import Optional

from .address import Address
from .customer import Customer, by_name, by_shop_times, by_spent
from .general import ask_string, read_line
from .product import Product, prompt_barcode, prompt_product, prompt_stock_increase
from .shopping import ShoppingCart


class SortOption(enum.IntEnum):
    """The field the customer list is sorted by."""

    NONE = 0
    NAME = 1
    TIME = 2
    SPEND = 3

    @property
    def label(self):
        return _SORT_LABELS[self]

    @property
    def key(self):
        """Sort key function for this option, or None when unsorted."""
        return _SORT_KEYS.get(self)


_SORT_LABELS = {
    SortOption.NONE: "None",
    SortOption.NAME: "Name",
    SortOption.TIME: "Shope Times",
    SortOption.SPEND: "Money Spent",
}

_SORT_KEYS = {
    SortOption.NAME: by_name,
    SortOption.TIME: by_shop_times,
    SortOption.SPEND: by_spent,
}


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


def _ask_char():
    while True:
        line = read_line(sys.stdin).strip()
        if line:
            return line[0]


@dataclass
class SuperMarket:
    """A market with products kept in barcode order and a customer list."""

    name: str
    location: Address
    customers: list = field(default_factory=list)
    products: list = field(default_factory=list)
    sort_option: SortOption = SortOption.NONE

    # products

    def insert_product(self, product):
        """Insert a product keeping barcode order; a known barcode raises ValueError."""
        barcodes = [p.barcode for p in self.products]
        position = bisect.bisect_left(barcodes, product.barcode)
        if position < len(barcodes) and barcodes[position] == product.barcode:
            raise ValueError("Not new product")
        self.products.insert(position, product)
        return product

    def get_product(self, barcode) -> Optional[Product]:
        """Return the product with this barcode, or None."""
        return next((p for p in self.products if p.barcode == barcode), None)

    def add_product(self):
        """Ask for a barcode; restock a known product or create a new one."""
        barcode = prompt_barcode()
        product = self.get_product(barcode)
        if product is not None:
            product.add_stock(prompt_stock_increase())
            return product
        return self.insert_product(prompt_product(barcode))

    def products_of_type(self, product_type):
        """All products of the given type, in barcode order."""
        return [p for p in self.products if p.product_type == product_type]

    # customers

    def add_customer(self, customer):
        """Register a customer; a name already listed raises ValueError."""
        if self.find_customer(customer.name) is not None:
            raise ValueError("This customer already in market")
        self.customers.append(customer)
        self.sort_option = SortOption.NONE
        return customer

    def find_customer(self, name) -> Optional[Customer]:
        """Return the customer with exactly this name, or None."""
        return next((c for c in self.customers if c.is_named(name)), None)

    def sort_customers(self, option):
        """Sort customers by the chosen field; NONE raises ValueError."""
        self.sort_option = SortOption(option)
        key = self.sort_option.key
        if key is None:
            raise ValueError("Error in sorting")
        self.customers.sort(key=key)

    def search_customer(self, value):
        """Binary-search the sorted customers for one whose sort field equals value."""
        key = self.sort_option.key
        if key is None:
            raise ValueError("The search cannot be performed, array not sorted")
        keys = [key(c) for c in self.customers]
        position = bisect.bisect_left(keys, value)
        if position < len(keys) and keys[position] == value:
            return self.customers[position]
        return None

    # shopping

    def buy(self, customer, barcode, count):
        """Move count items of a product from stock into the customer's cart."""
        product = self.get_product(barcode)
        if product is None:
            raise LookupError("No such product")
        if product.count == 0:
            raise ValueError("This product out of stock")
        if not 0 < count <= product.count:
            raise ValueError(f"count must be between 1 and {product.count}")
        if customer.cart is None:
            customer.cart = ShoppingCart()
        item = customer.cart.add_item(product.barcode, product.price, count)
        product.count -= count
        return item

    def _customer_who_shops(self):
        if not self.customers:
            print("No customer listed to market")
            return None
        if not self.products:
            print("No products in market - cannot shop")
            return None
        print(self._customers_table(), end="")
        name = ask_string("Who is shopping? Enter cutomer name\n")
        customer = self.find_customer(name)
        if customer is None:
            print("this customer not listed")
        return customer

    def _choose_product_and_count(self):
        product = self.get_product(prompt_barcode())
        if product is None:
            print("No such product")
            return None
        if product.count == 0:
            print("This product out of stock")
            return None
        while True:
            count = _ask_int(f"How many items do you want? max {product.count}\n")
            if 0 < count <= product.count:
                return product, count

    def _fill_cart(self, customer):
        print(self._products_table(), end="")
        while True:
            print("Do you want to shop for a product? y/Y, anything else to exit!!\t", end="")
            if _ask_char() not in ("y", "Y"):
                break
            choice = self._choose_product_and_count()
            if choice is not None:
                product, count = choice
                self.buy(customer, product.barcode, count)

    def do_shopping(self):
        """Let a listed customer fill a cart; False when nobody can shop."""
        customer = self._customer_who_shops()
        if customer is None:
            return False
        if customer.cart is None:
            customer.cart = ShoppingCart()
        self._fill_cart(customer)
        if not customer.cart:
            customer.cart = None
        print("---------- Shopping ended ----------")
        return True

    def print_cart(self):
        """Print a chosen customer's cart and return that customer, or None."""
        customer = self._customer_who_shops()
        if customer is None:
            return None
        if customer.cart is None:
            print("Customer cart is empty")
            return None
        customer.cart.print_cart()
        return customer

    def pay_customer(self):
        """Show a chosen customer's cart and take the payment."""
        customer = self.print_cart()
        if customer is None:
            return False
        customer.pay()
        return True

    def close_open_carts(self):
        """Make every customer still holding a cart pay; return those customers."""
        paid = []
        for customer in self.customers:
            if customer.cart is not None:
                print("Market is closing must pay!!!")
                customer.pay()
                paid.append(customer)
        return paid

    # reports

    def _products_table(self):
        lines = [
            f"There are {len(self.products)} products",
            f"{'Name':<20} {'Barcode':<10}\t{'Type':<20} {'Price':<10} Count In Stoke",
            "-" * 80,
            "",
        ]
        lines.extend(p.format_row() for p in self.products)
        lines.append("")
        return "\n".join(lines) + "\n"

    def _customers_table(self):
        lines = [f"There are {len(self.customers)} listed customers"]
        lines.extend(str(c) for c in self.customers)
        return "\n".join(lines) + "\n"

    def describe(self):
        """The full market report: name, address, products and customers."""
        return (
            f"Super Market Name: {self.name}\tAddress: {self.location}\n\n"
            + self._products_table()
            + "\n"
            + self._customers_table()
            + "\n"
        )