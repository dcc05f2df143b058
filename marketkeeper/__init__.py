"""Supermarket management: stock, customers, carts, file storage and a console menu."""

__version__ = "1.0.0"

__all__ = [
    "general",
    "filehelper",
    "address",
    "product",
    "shopping",
    "customer",
    "supermarket",
    "superfile",
    "cli",
]