"""Interactive menu for running the supermarket."""

import enum
import sys

from .customer import prompt_customer
from .general import ask_string, print_message, read_line
from .product import prompt_product_type
from .superfile import open_market, save_market
from .supermarket import SortOption

SUPER_FILE_NAME = "super_compress.bin"
CUSTOMER_FILE_NAME = "Customers.txt"


class MenuOption(enum.IntEnum):
    """Entries of the main menu."""

    EXIT = -1
    SHOW_SUPERMARKET = 0
    ADD_PRODUCT = 1
    ADD_CUSTOMER = 2
    CUSTOMER_SHOPPING = 3
    PRINT_CART = 4
    CUSTOMER_PAY = 5
    SORT_CUSTOMERS = 6
    SEARCH_CUSTOMER = 7
    PRINT_PRODUCT_BY_TYPE = 8

    @property
    def label(self):
        return _MENU_LABELS[self]


_MENU_LABELS = {
    MenuOption.EXIT: "Quit",
    MenuOption.SHOW_SUPERMARKET: "Show SuperMarket",
    MenuOption.ADD_PRODUCT: "Add Product",
    MenuOption.ADD_CUSTOMER: "Add Customer",
    MenuOption.CUSTOMER_SHOPPING: "Customer Shopping",
    MenuOption.PRINT_CART: "Print Shopping Cart",
    MenuOption.CUSTOMER_PAY: "Customer Pay",
    MenuOption.SORT_CUSTOMERS: "Sort Customers",
    MenuOption.SEARCH_CUSTOMER: "Search an Customer",
    MenuOption.PRINT_PRODUCT_BY_TYPE: "Print Product By Type",
}


def _parse_int(text):
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _ask_number(msg, convert):
    while True:
        print(msg, end="")
        tokens = read_line(sys.stdin).split()
        if not tokens:
            continue
        try:
            return convert(tokens[0])
        except ValueError:
            continue


def menu():
    """Show the menu and return the number entered, or None if it is not a number."""
    print("\n")
    print("Please choose one of the following options")
    for option in MenuOption:
        if option is not MenuOption.EXIT:
            print(f"{option.value} - {option.label}")
    print(f"{MenuOption.EXIT.value} - {MenuOption.EXIT.label}")
    return _parse_int(read_line(sys.stdin))


def _show(market):
    print(market.describe(), end="")


def _add_product(market):
    try:
        market.add_product()
    except ValueError as err:
        print(err)
        print("Error adding product")


def _add_customer(market):
    try:
        market.add_customer(prompt_customer())
    except ValueError as err:
        print(err)
        print("Error adding customer")


def _shopping(market):
    if not market.do_shopping():
        print("Error in shopping")


def _print_cart(market):
    market.print_cart()


def _pay(market):
    if not market.pay_customer():
        print("Error in payment")


def _sort(market):
    print("Base on what field do you want to sort?")
    prompt = "".join(
        f"Enter {option.value} for {option.label}\n"
        for option in SortOption
        if option is not SortOption.NONE
    )
    while True:
        choice = _ask_number(prompt, int)
        if 0 <= choice < len(SortOption):
            break
    try:
        market.sort_customers(choice)
    except ValueError as err:
        print(err)


def _search(market):
    option = market.sort_option
    if option is SortOption.NAME:
        value = ask_string("Enter customer name\n")
    elif option is SortOption.TIME:
        value = _ask_number("Enter time in matket\n", int)
    elif option is SortOption.SPEND:
        value = _ask_number("Enter spent amount\n", float)
    else:
        print("The search cannot be performed, array not sorted")
        return
    customer = market.search_customer(value)
    if customer is None:
        print("Customer was not found")
    else:
        print(f"Customer found, {customer}")


def _print_by_type(market):
    if not market.products:
        print("No products in market")
        return
    product_type = prompt_product_type()
    products = market.products_of_type(product_type)
    for product in products:
        print(product.format_row())
    if not products:
        print(f"There are no product of type {product_type.label} in market {market.name}")


_HANDLERS = {
    MenuOption.SHOW_SUPERMARKET: _show,
    MenuOption.ADD_PRODUCT: _add_product,
    MenuOption.ADD_CUSTOMER: _add_customer,
    MenuOption.CUSTOMER_SHOPPING: _shopping,
    MenuOption.PRINT_CART: _print_cart,
    MenuOption.CUSTOMER_PAY: _pay,
    MenuOption.SORT_CUSTOMERS: _sort,
    MenuOption.SEARCH_CUSTOMER: _search,
    MenuOption.PRINT_PRODUCT_BY_TYPE: _print_by_type,
}


def main(argv=None):
    """Run the market: main <choice> <file>; choice 1 selects the compressed format."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: marketkeeper <choice> <file>", file=sys.stderr)
        return 2
    choice = _parse_int(args[0])
    compressed = choice == 1
    path = args[1]

    try:
        market = open_market(path, CUSTOMER_FILE_NAME, compressed)
    except EOFError:
        print("error init  Super Market")
        return 1

    while True:
        try:
            option = menu()
            if option == MenuOption.EXIT:
                print_message("Thank", "you", "for", "Shopping", "with", "us")
                print()
                break
            handler = _HANDLERS.get(option)
            if handler is None:
                print("Wrong option")
            else:
                handler(market)
        except EOFError:
            break

    market.close_open_carts()
    try:
        save_market(market, path, CUSTOMER_FILE_NAME, compressed)
    except (OSError, ValueError) as err:
        print(err)
        print("Error saving supermarket to file")
    return 0


if __name__ == "__main__":
    sys.exit(main())