"""Shopping carts and the items in them."""

from dataclasses import dataclass, field


@dataclass
class ShoppingItem:
    """A quantity of one product at the price it was bought for."""

    barcode: str
    price: float
    count: int

    def __str__(self):
        return f"Item {self.barcode} count {self.count} price per item {self.price:.2f}"

    @property
    def subtotal(self):
        """Price of all the items of this kind."""
        return self.price * self.count


@dataclass
class ShoppingCart:
    """The items a customer is about to buy, in the order first added."""

    items: list = field(default_factory=list)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def find(self, barcode):
        """Return the item with this barcode, or None."""
        return next((item for item in self.items if item.barcode == barcode), None)

    def add_item(self, barcode, price, count):
        """Add items; a barcode already in the cart has its count raised."""
        item = self.find(barcode)
        if item is None:
            item = ShoppingItem(barcode, price, count)
            self.items.append(item)
        else:
            item.count += count
        return item

    def total(self):
        """Total price of everything in the cart."""
        return sum((item.subtotal for item in self.items), 0.0)

    def print_cart(self):
        """Print every item and return the total price."""
        for item in self.items:
            print(item)
        return self.total()