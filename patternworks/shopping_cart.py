"""A shopping cart with separate invoice printing and persistence back ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Product:
    """An item that can be put in a cart."""

    name: str
    price: float


class ShoppingCart:
    """Holds products and knows their total price."""

    def __init__(self) -> None:
        self._products: List[Product] = []

    def add_product(self, product: Product) -> None:
        self._products.append(product)

    @property
    def products(self) -> Tuple[Product, ...]:
        """The products in the order they were added."""
        return tuple(self._products)

    def calculate_total(self) -> float:
        return sum(product.price for product in self._products)


class ShoppingCartPrinter:
    """Formats and prints an invoice for a cart."""

    def __init__(self, cart: ShoppingCart) -> None:
        self.cart = cart

    def invoice(self) -> str:
        """Return the invoice text, one line per product and a total line."""
        lines = ["Shopping Cart Invoice:"]
        lines.extend(f"{product.name} - Rs {product.price:g}" for product in self.cart.products)
        lines.append(f"Total: Rs {self.cart.calculate_total():g}")
        return "\n".join(lines)

    def print_invoice(self) -> str:
        text = self.invoice()
        print(text)
        return text


class Persistence(ABC):
    """A place a cart can be saved to."""

    @abstractmethod
    def save(self, cart: ShoppingCart) -> str:
        """Save the cart and return the message describing it."""


class _MessagePersistence(Persistence):
    message = ""

    def save(self, cart: ShoppingCart) -> str:
        print(self.message)
        return self.message


class SQLPersistence(_MessagePersistence):
    """Saves carts to an SQL database."""

    message = "Saving shopping cart to SQL DB..."

    def save(self, cart: ShoppingCart) -> str:
        return super().save(cart)


class MongoPersistence(_MessagePersistence):
    """Saves carts to MongoDB."""

    message = "Saving shopping cart to MongoDB..."

    def save(self, cart: ShoppingCart) -> str:
        return super().save(cart)


class FilePersistence(_MessagePersistence):
    """Saves carts to a file."""

    message = "Saving shopping cart to a file..."

    def save(self, cart: ShoppingCart) -> str:
        return super().save(cart)