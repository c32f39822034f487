import io
import sys

import pytest

from estoque.app import App, main
from estoque.inventory import Inventory, ProductNotFoundError
from estoque.ledger import ledger_rows
from estoque.models import Movement
from estoque.screen import Screen
from estoque.storage import load_inventory


def make_app(tmp_path, text, names=()):
    inventory = Inventory()
    for name in names:
        inventory.add_product(inventory.new_product(name, "kg", "01/01/2026"))
    out = io.StringIO()
    app = App(
        inventory,
        Screen(out, io.StringIO(text)),
        tmp_path / "produtos.dat",
        tmp_path / "Movimentacoes.dat",
    )
    return app, out


def test_register_first_product_and_save(tmp_path):
    app, _ = make_app(tmp_path, "Arroz\nkg\n01/01/2026\n1\n2\n")
    app.register_product()
    product = app.inventory.find(1)
    assert (product.name, product.unit, product.expiry) == ("Arroz", "kg", "01/01/2026")
    assert app.inventory.next_code == 2
    loaded = load_inventory(tmp_path / "produtos.dat", tmp_path / "Movimentacoes.dat")
    assert [p.name for p in loaded] == ["Arroz"]
    assert loaded.next_code == 2


def test_register_product_at_start(tmp_path):
    app, _ = make_app(tmp_path, "Feijao\nkg\n02/02/2026\n1\n1\n2\n", ["Arroz"])
    app.register_product()
    assert [p.name for p in app.inventory] == ["Feijao", "Arroz"]
    assert app.inventory.products[0].code == 2


def test_register_product_in_middle_rejects_bad_position(tmp_path):
    app, out = make_app(tmp_path, "X\nu\nd\n1\n2\n1\n2\n2\n", ["A", "B", "C"])
    app.register_product()
    assert [p.name for p in app.inventory] == ["A", "B", "X", "C"]
    assert "Posicao invalida!" in out.getvalue()


def test_declined_product_is_not_added(tmp_path):
    app, _ = make_app(tmp_path, "Arroz\nkg\n01/01/2026\n2\n2\n")
    app.register_product()
    assert len(app.inventory) == 0
    assert app.inventory.next_code == 1


def test_entry_and_exit_movements(tmp_path):
    entry = "1\n10/06/2025\nE\n10\n2.5\n\n"
    exit_ = "1\n11/06/2025\nS\n4\n\n"
    app, _ = make_app(tmp_path, entry + exit_, ["Arroz"])
    app.register_movement()
    product = app.inventory.find(1)
    assert product.quantity == 10.0
    assert product.average_cost == 2.5
    app.register_movement()
    assert product.total_value == pytest.approx(product.quantity * product.average_cost)
    assert [m.kind.value for m in app.inventory.movements] == ["E", "S"]
    assert app.inventory.movements[-1].unit_price == 0.0
    loaded = load_inventory(tmp_path / "produtos.dat", tmp_path / "Movimentacoes.dat")
    assert len(loaded.movements) == 2
    assert loaded.find(1).quantity == pytest.approx(product.quantity)


def test_exit_beyond_stock_is_refused(tmp_path):
    app, out = make_app(tmp_path, "1\n10/06/2025\nS\n5\n", ["Arroz"])
    app.register_movement()
    assert app.inventory.movements == []
    assert app.inventory.find(1).quantity == 0.0
    assert "Erro: Estoque insuficiente para retirada!" in out.getvalue()


def test_movement_for_unknown_product(tmp_path):
    app, out = make_app(tmp_path, "7\n", ["Arroz"])
    app.register_movement()
    assert "Produto nao encontrado!" in out.getvalue()
    assert app.inventory.movements == []


def test_edit_product_name(tmp_path):
    app, _ = make_app(tmp_path, "1\n1\n1\nFeijao\n\n5\n", ["Arroz"])
    app.edit_product()
    assert app.inventory.find(1).name == "Feijao"
    loaded = load_inventory(tmp_path / "produtos.dat", tmp_path / "Movimentacoes.dat")
    assert loaded.find(1).name == "Feijao"


def test_edit_all_fields(tmp_path):
    app, _ = make_app(tmp_path, "1\n1\n4\nMilho\nsc\n03/03/2027\n\n5\n", ["Arroz"])
    app.edit_product()
    product = app.inventory.find(1)
    assert (product.name, product.unit, product.expiry) == ("Milho", "sc", "03/03/2027")


def test_delete_product(tmp_path):
    app, out = make_app(tmp_path, "\n1\n1\n\n", ["Arroz", "Feijao"])
    app.delete_product()
    assert [p.name for p in app.inventory] == ["Feijao"]
    with pytest.raises(ProductNotFoundError):
        app.inventory.find(1)
    assert "Produto excluido com sucesso!" in out.getvalue()


def test_delete_cancelled(tmp_path):
    app, out = make_app(tmp_path, "\n1\n2\n\n", ["Arroz"])
    app.delete_product()
    assert len(app.inventory) == 1
    assert "Operacao cancelada pelo usuario." in out.getvalue()


def test_query_sorted_by_name(tmp_path):
    app, out = make_app(tmp_path, "2\n\n", ["Milho", "Arroz", "Feijao"])
    app.query_products()
    assert [p.name for p in app.inventory] == ["Arroz", "Feijao", "Milho"]
    assert "|Codigo |Nome Produto" in out.getvalue()


def test_query_by_code_shows_details(tmp_path):
    app, out = make_app(tmp_path, "1\n2\n\n", ["Arroz", "Feijao"])
    app.query_products()
    assert "Nome..............: Feijao" in out.getvalue()


def test_query_empty_list(tmp_path):
    app, out = make_app(tmp_path, "\n")
    app.query_products()
    assert "A LISTA ESTA VAZIA" in out.getvalue()


def test_list_movements_shows_rows(tmp_path):
    app, out = make_app(tmp_path, "2\n\n", ["Arroz"])
    app.inventory.register_movement(Movement("10/06/2025", 1, "E", 3.0, 2.0))
    app.list_movements()
    expected = [row.format() for row in ledger_rows(app.inventory.products, app.inventory.movements)]
    assert expected and all(line in out.getvalue() for line in expected)
    assert "Fim do relatorio." in out.getvalue()


def test_list_movements_unknown_filter(tmp_path):
    app, out = make_app(tmp_path, "1\n99\n\n", ["Arroz"])
    app.inventory.register_movement(Movement("10/06/2025", 1, "E", 3.0, 2.0))
    app.list_movements()
    assert "ERRO: Produto com o codigo 99 nao foi encontrado." in out.getvalue()


def test_run_exits_and_saves(tmp_path):
    app, _ = make_app(tmp_path, "3\n", ["Arroz"])
    app.run()
    loaded = load_inventory(tmp_path / "produtos.dat", tmp_path / "Movimentacoes.dat")
    assert [p.name for p in loaded] == ["Arroz"]


def test_run_stops_at_end_of_input(tmp_path):
    app, _ = make_app(tmp_path, "")
    app.run()
    assert (tmp_path / "produtos.dat").exists()


def test_main_runs_with_files(tmp_path, monkeypatch, capsys):
    products = tmp_path / "p.dat"
    movements = tmp_path / "m.dat"
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n"))
    assert main(["--products", str(products), "--movements", str(movements)]) == 0
    assert "Sistema de Estoque" in capsys.readouterr().out
    assert products.exists() and movements.exists()