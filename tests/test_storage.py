import pytest

from estoque.inventory import Inventory
from estoque.models import Movement, MovementKind, Product
from estoque.storage import (
    MOVEMENT_RECORD,
    PRODUCT_RECORD,
    load_inventory,
    load_movements,
    load_products,
    save_inventory,
    save_movements,
    save_products,
)


def _stocked_inventory():
    inventory = Inventory()
    inventory.add_product(inventory.new_product("Arroz", "kg", "10/10/2026"))
    inventory.add_product(inventory.new_product("Feijao", "kg", "01/01/2027"))
    inventory.register_movement(Movement("17/06/2025", 1, "E", 10.0, 2.5))
    inventory.register_movement(Movement("18/06/2025", 1, "S", 4.0))
    inventory.register_movement(Movement("18/06/2025", 2, "E", 8.0, 0.5))
    return inventory


def test_written_records_follow_struct_layout(tmp_path):
    inventory = _stocked_inventory()
    products_path = tmp_path / "produtos.dat"
    movements_path = tmp_path / "Movimentacoes.dat"
    save_products(inventory, products_path)
    save_movements(inventory, movements_path)
    assert PRODUCT_RECORD.size == 96
    assert MOVEMENT_RECORD.size == 32
    assert products_path.stat().st_size == 4 + 2 * 96
    assert movements_path.stat().st_size == 3 * 32


def test_products_round_trip(tmp_path):
    original = _stocked_inventory()
    path = tmp_path / "produtos.dat"
    save_products(original, path)

    restored = Inventory()
    assert load_products(restored, path) == 2
    assert restored.products == original.products
    assert restored.next_code == original.next_code


def test_product_file_size(tmp_path):
    inventory = _stocked_inventory()
    path = tmp_path / "produtos.dat"
    save_products(inventory, path)
    assert path.stat().st_size == 4 + 2 * PRODUCT_RECORD.size


def test_empty_product_list_keeps_counter(tmp_path):
    inventory = Inventory()
    inventory.next_code = 7
    path = tmp_path / "produtos.dat"
    save_products(inventory, path)

    restored = Inventory()
    assert load_products(restored, path) == 0
    assert restored.products == []
    assert restored.next_code == 7


def test_movements_round_trip(tmp_path):
    original = _stocked_inventory()
    path = tmp_path / "mov.dat"
    save_movements(original, path)

    restored = Inventory()
    assert load_movements(restored, path) == 3
    assert restored.movements == original.movements
    assert [m.kind for m in restored.movements] == [
        MovementKind.ENTRY,
        MovementKind.EXIT,
        MovementKind.ENTRY,
    ]


def test_missing_files_leave_inventory_untouched(tmp_path):
    inventory = Inventory()
    assert load_products(inventory, tmp_path / "none.dat") == 0
    assert load_movements(inventory, tmp_path / "none2.dat") == 0
    assert inventory.products == []
    assert inventory.movements == []
    assert inventory.next_code == 1


def test_long_name_is_truncated(tmp_path):
    inventory = Inventory()
    inventory.add_product(inventory.new_product("x" * 80, "unidade-longa", "2025-01-01xyz"))
    path = tmp_path / "p.dat"
    save_products(inventory, path)

    restored = Inventory()
    load_products(restored, path)
    product = restored.products[0]
    assert product.name == "x" * 49
    assert product.unit == "unidade-l"
    assert product.expiry == "2025-01-01"


def test_trailing_partial_record_is_ignored(tmp_path):
    inventory = _stocked_inventory()
    path = tmp_path / "mov.dat"
    save_movements(inventory, path)
    with open(path, "ab") as fp:
        fp.write(b"\x01\x02\x03")

    restored = Inventory()
    assert load_movements(restored, path) == len(inventory.movements)


def test_newline_in_name_is_dropped(tmp_path):
    inventory = Inventory()
    inventory.products.append(Product(1, "Leite\n", "l", "01/02/2026"))
    path = tmp_path / "p.dat"
    save_products(inventory, path)

    restored = Inventory()
    load_products(restored, path)
    assert restored.products[0].name == "Leite"


def test_save_and_load_inventory(tmp_path):
    original = _stocked_inventory()
    products_path = tmp_path / "produtos.dat"
    movements_path = tmp_path / "Movimentacoes.dat"
    save_inventory(original, products_path, movements_path)

    restored = load_inventory(products_path, movements_path)
    assert restored.products == original.products
    assert restored.movements == original.movements
    assert restored.next_code == original.next_code


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_products(Inventory(), tmp_path / "missing" / "p.dat")