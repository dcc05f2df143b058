"""Market customers, their payments and the customers text file."""

from dataclasses import dataclass
from typing import Optional

from .filehelper import FileFormatError, read_text_line
from .general import ask_string, is_blank
from .shopping import ShoppingCart


@dataclass
class Customer:
    """A customer with shopping history and possibly an open cart."""

    name: str
    shop_times: int = 0
    total_spend: float = 0.0
    cart: Optional[ShoppingCart] = None

    def __str__(self):
        state = "Shopping cart is empty!" if self.cart is None else "Doing shopping now!!!"
        return (
            f"Name: {self.name}\t"
            f"has shoped {self.shop_times} times spent:{self.total_spend:.2f} IS\t"
            f"{state}"
        )

    def pay(self):
        """Print the bill, record the purchase and empty the cart.

        Returns the amount paid, or 0.0 when there is no open cart.
        """
        if self.cart is None:
            return 0.0
        print(f"---------- Cart info and bill for {self.name} ----------")
        amount = self.cart.print_cart()
        print("!!! --- Payment was recived!!!! --- ")
        self.shop_times += 1
        self.total_spend += amount
        self.cart = None
        return amount

    def is_named(self, name):
        """True when the customer has exactly this name."""
        return self.name == name


def by_name(customer):
    """Sort key: the customer's name."""
    return customer.name


def by_shop_times(customer):
    """Sort key: how many times the customer has shopped."""
    return customer.shop_times


def by_spent(customer):
    """Sort key: how much the customer has spent."""
    return customer.total_spend


def prompt_customer():
    """Ask for a customer name until a non-blank one is entered."""
    while True:
        name = ask_string("Enter customer name\n")
        if not is_blank(name):
            return Customer(name)


def save_customers(customers, path):
    """Write the customers to a text file."""
    customers = list(customers)
    with open(path, "w", encoding="utf-8") as fp:
        fp.write(f"{len(customers)}\n")
        for customer in customers:
            fp.write(f"{customer.name}\n{customer.shop_times} {customer.total_spend:.2f}\n")


def _parse_int(text, what):
    try:
        return int(text)
    except ValueError:
        raise FileFormatError(f"bad {what}: {text!r}") from None


def load_customers(path):
    """Read customers written by save_customers; their carts are empty."""
    with open(path, encoding="utf-8") as fp:
        count = _parse_int(read_text_line(fp).strip(), "customer count")
        customers = []
        for _ in range(max(count, 0)):
            name = read_text_line(fp)
            fields = read_text_line(fp).split()
            if len(fields) < 2:
                raise FileFormatError(f"missing shopping data for {name!r}")
            shop_times = _parse_int(fields[0], "shop times")
            try:
                spent = float(fields[1])
            except ValueError:
                raise FileFormatError(f"bad amount spent: {fields[1]!r}") from None
            customers.append(Customer(name, shop_times, spent))
    return customers