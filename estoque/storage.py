"""Binary files that keep products and movements between runs.

Products are stored as a little-endian 32-bit next-code counter followed by
fixed-size product records; movements as fixed-size movement records. A
trailing partial record is ignored when loading.
"""

from __future__ import annotations

import os
import struct
from typing import Iterator, Union

from .inventory import Inventory
from .models import DATE_SIZE, NAME_SIZE, UNIT_SIZE, Movement, MovementKind, Product

PathLike = Union[str, "os.PathLike[str]"]

PRODUCTS_FILE = "produtos.dat"
MOVEMENTS_FILE = "Movimentacoes.dat"

_COUNTER = struct.Struct("<i")
PRODUCT_RECORD = struct.Struct(f"<i{NAME_SIZE}s{UNIT_SIZE}s{DATE_SIZE}sxff4xd")
MOVEMENT_RECORD = struct.Struct(f"<{DATE_SIZE}sxic3xfff")

_ENCODING = "utf-8"


def _encode(text: str, size: int) -> bytes:
    """Encode text into a NUL-terminated field of the given size."""
    data = text.encode(_ENCODING)[: size - 1]
    return data.decode(_ENCODING, errors="ignore").encode(_ENCODING)


def _decode(field: bytes) -> str:
    text = field.split(b"\0", 1)[0].decode(_ENCODING, errors="replace")
    return text.split("\n", 1)[0]


def _records(data: bytes, record: struct.Struct) -> Iterator[tuple]:
    whole = len(data) - len(data) % record.size
    return record.iter_unpack(data[:whole])


def save_products(inventory: Inventory, path: PathLike = PRODUCTS_FILE) -> None:
    """Write the next product code and every product to a file."""
    with open(path, "wb") as fp:
        fp.write(_COUNTER.pack(inventory.next_code))
        for product in inventory.products:
            fp.write(
                PRODUCT_RECORD.pack(
                    product.code,
                    _encode(product.name, NAME_SIZE),
                    _encode(product.unit, UNIT_SIZE),
                    _encode(product.expiry, DATE_SIZE),
                    product.quantity,
                    product.average_cost,
                    product.total_value,
                )
            )


def load_products(inventory: Inventory, path: PathLike = PRODUCTS_FILE) -> int:
    """Append the products stored in a file and return how many were read.

    A missing file leaves the inventory untouched.
    """
    try:
        with open(path, "rb") as fp:
            data = fp.read()
    except FileNotFoundError:
        return 0
    if len(data) >= _COUNTER.size:
        (inventory.next_code,) = _COUNTER.unpack_from(data)
    loaded = 0
    for code, name, unit, expiry, quantity, cost, total in _records(
        data[_COUNTER.size :], PRODUCT_RECORD
    ):
        inventory.products.append(
            Product(
                code=code,
                name=_decode(name),
                unit=_decode(unit),
                expiry=_decode(expiry),
                quantity=quantity,
                average_cost=cost,
                total_value=total,
            )
        )
        loaded += 1
    return loaded


def save_movements(inventory: Inventory, path: PathLike = MOVEMENTS_FILE) -> None:
    """Write every recorded movement to a file."""
    with open(path, "wb") as fp:
        for movement in inventory.movements:
            fp.write(
                MOVEMENT_RECORD.pack(
                    _encode(movement.date, DATE_SIZE),
                    movement.product_code,
                    movement.kind.value.encode("ascii"),
                    movement.quantity,
                    movement.unit_price,
                    movement.total,
                )
            )


def load_movements(inventory: Inventory, path: PathLike = MOVEMENTS_FILE) -> int:
    """Append the movements stored in a file and return how many were read.

    A missing file leaves the inventory untouched.
    """
    try:
        with open(path, "rb") as fp:
            data = fp.read()
    except FileNotFoundError:
        return 0
    loaded = 0
    for date, code, kind, quantity, price, total in _records(data, MOVEMENT_RECORD):
        inventory.movements.append(
            Movement(
                date=_decode(date),
                product_code=code,
                kind=MovementKind.parse(kind.decode("latin-1")),
                quantity=quantity,
                unit_price=price,
                total=total,
            )
        )
        loaded += 1
    return loaded


def load_inventory(
    products_path: PathLike = PRODUCTS_FILE,
    movements_path: PathLike = MOVEMENTS_FILE,
) -> Inventory:
    """Build an inventory from the product and movement files."""
    inventory = Inventory()
    load_products(inventory, products_path)
    load_movements(inventory, movements_path)
    return inventory


def save_inventory(
    inventory: Inventory,
    products_path: PathLike = PRODUCTS_FILE,
    movements_path: PathLike = MOVEMENTS_FILE,
) -> None:
    """Write both the product and the movement files."""
    save_products(inventory, products_path)
    save_movements(inventory, movements_path)