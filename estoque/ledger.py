"""Stock movement report, replayed from the movement history."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable, Iterator, TypeVar

from .inventory import ProductNotFoundError
from .models import Movement, MovementKind, Product

HEADER = "Data      |Cd|T|Qtd.Mov| Vlr Unit| Vlr Mov| Qtd Fim|C. Medio|Vlr Total"
SEPARATOR = "----------+--+-+-------+---------+--------+--------+--------+---------"
PAGE_SIZE = 8

T = TypeVar("T")


@dataclass(frozen=True)
class LedgerRow:
    """One movement with the stock position of its product right after it."""

    date: str
    product_code: int
    kind: MovementKind
    quantity: float
    unit_price: float
    movement_value: float
    stock_after: float
    average_cost: float
    total_value: float

    def format(self) -> str:
        """Render the row in the report's fixed column layout."""
        return (
            f"{self.date:<10}|{self.product_code:<2d}|{self.kind.value}|"
            f"{self.quantity:7.2f}|{self.unit_price:9.2f}|{self.movement_value:8.2f}|"
            f"{self.stock_after:8.2f}|{self.average_cost:8.2f}|{self.total_value:9.2f}"
        )


def ledger_rows(
    products: Iterable[Product],
    movements: Iterable[Movement],
    product_code: int | None = None,
) -> Iterator[LedgerRow]:
    """Replay movements from empty stock and yield a report row for each.

    Movements of products no longer listed are skipped. With a product code
    only that product's rows are yielded; an unknown code raises
    ProductNotFoundError.
    """
    replay: dict[int, Product] = {}
    for product in products:
        replay.setdefault(
            product.code,
            dataclasses.replace(product, quantity=0.0, average_cost=0.0, total_value=0.0),
        )
    if product_code is not None and product_code not in replay:
        raise ProductNotFoundError(product_code)

    for movement in movements:
        product = replay.get(movement.product_code)
        if product is None:
            continue
        if movement.is_exit():
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

        if product_code is not None and movement.product_code != product_code:
            continue
        unit_price = product.average_cost if movement.is_exit() else movement.unit_price
        yield LedgerRow(
            date=movement.date.split("\n", 1)[0],
            product_code=movement.product_code,
            kind=movement.kind,
            quantity=movement.quantity,
            unit_price=unit_price,
            movement_value=movement.quantity * unit_price,
            stock_after=product.quantity,
            average_cost=product.average_cost,
            total_value=product.total_value,
        )


def paginate(rows: Iterable[T], page_size: int = PAGE_SIZE) -> Iterator[list[T]]:
    """Split rows into pages; an empty report is a single empty page."""
    if page_size < 1:
        raise ValueError(f"page size must be positive, got {page_size}")
    page: list[T] = []
    produced = False
    for row in rows:
        page.append(row)
        if len(page) == page_size:
            yield page
            produced = True
            page = []
    if page or not produced:
        yield page