"""The product list and the movement history, with their stock rules."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterator

from .models import Movement, Product


class InventoryError(Exception):
    """Base class for inventory errors."""


class ProductNotFoundError(InventoryError, LookupError):
    """No product has the requested code."""

    def __init__(self, code: int) -> None:
        super().__init__(f"product with code {code} not found")
        self.code = code


class InsufficientStockError(InventoryError):
    """An exit asks for more than is in stock."""

    def __init__(self, code: int, available: float, requested: float) -> None:
        super().__init__(
            f"insufficient stock for product {code}: "
            f"{available:.2f} available, {requested:.2f} requested"
        )
        self.code = code
        self.available = available
        self.requested = requested


class InvalidPositionError(InventoryError, ValueError):
    """A position for a middle insertion is out of range."""


class Placement(Enum):
    """Where a new product goes in the list."""

    START = 1
    MIDDLE = 2
    END = 3


class Inventory:
    """Ordered products, recorded movements and the next product code."""

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.movements: list[Movement] = []
        self.next_code = 1

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def new_product(self, name: str, unit: str, expiry: str) -> Product:
        """Build a product with the next code and an empty stock position."""
        return Product(code=self.next_code, name=name, unit=unit, expiry=expiry)

    def add_product(
        self,
        product: Product,
        placement: Placement = Placement.END,
        position: int | None = None,
    ) -> Product:
        """Insert a product and advance the next code.

        A middle placement puts the product after the product at the given
        1-based position, which must lie between 2 and the list length.
        """
        placement = Placement(placement)
        if not self.products or placement is Placement.END:
            self.products.append(product)
        elif placement is Placement.START:
            self.products.insert(0, product)
        else:
            size = len(self.products)
            if position is None or position <= 1 or position > size:
                raise InvalidPositionError(
                    f"position must be between 2 and {size}, got {position}"
                )
            self.products.insert(position, product)
        self.next_code += 1
        return product

    def find(self, code: int) -> Product:
        """Return the product with the given code."""
        for product in self.products:
            if product.code == code:
                return product
        raise ProductNotFoundError(code)

    def remove(self, code: int) -> Product:
        """Remove the product with the given code and return it."""
        product = self.find(code)
        self.products.remove(product)
        return product

    def sort_by_code(self) -> None:
        """Order products by code, keeping equal codes in their order."""
        self.products.sort(key=lambda product: product.code)

    def sort_by_name(self) -> None:
        """Order products by name, keeping equal names in their order."""
        self.products.sort(key=lambda product: product.name)

    def register_movement(self, movement: Movement) -> Product:
        """Apply a movement to its product's stock, record it and return the product."""
        product = self.find(movement.product_code)
        if movement.is_exit():
            if product.quantity < movement.quantity:
                raise InsufficientStockError(
                    product.code, product.quantity, movement.quantity
                )
            movement = dataclasses.replace(movement, unit_price=0.0)
            product.quantity -= movement.quantity
        else:
            new_quantity = product.quantity + movement.quantity
            if new_quantity > 0:
                product.average_cost = (
                    product.average_cost * product.quantity
                    + movement.unit_price * movement.quantity
                ) / new_quantity
            product.quantity = new_quantity
        product.total_value = product.quantity * product.average_cost
        self.movements.append(movement)
        return product