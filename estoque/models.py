"""Records kept by the stock control system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NAME_SIZE = 50
UNIT_SIZE = 10
DATE_SIZE = 11


class MovementKind(str, Enum):
    """Direction of a stock movement."""

    ENTRY = "E"
    EXIT = "S"

    @classmethod
    def parse(cls, value: str) -> "MovementKind":
        """Read a kind from user input: 'S' or 's' is an exit, anything else an entry."""
        if isinstance(value, MovementKind):
            return value
        text = (value or "").strip()
        if text[:1] in ("S", "s"):
            return cls.EXIT
        return cls.ENTRY


@dataclass
class Product:
    """A product with its current stock position."""

    code: int
    name: str
    unit: str
    expiry: str
    quantity: float = 0.0
    average_cost: float = 0.0
    total_value: float = 0.0


@dataclass
class Movement:
    """One entry into or exit from stock of a product."""

    date: str
    product_code: int
    kind: MovementKind
    quantity: float
    unit_price: float = 0.0
    total: float = 0.0

    def __post_init__(self) -> None:
        self.kind = MovementKind.parse(self.kind)

    def is_exit(self) -> bool:
        """True when the movement takes goods out of stock."""
        return self.kind is MovementKind.EXIT