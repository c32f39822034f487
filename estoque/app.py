"""Interactive stock control menus."""

from __future__ import annotations

import argparse
import os
from typing import Sequence, Union

from .inventory import (
    Inventory,
    InsufficientStockError,
    Placement,
    ProductNotFoundError,
)
from .ledger import HEADER, PAGE_SIZE, SEPARATOR, ledger_rows, paginate
from .models import DATE_SIZE, NAME_SIZE, UNIT_SIZE, Movement, Product
from .screen import Screen
from .storage import MOVEMENTS_FILE, PRODUCTS_FILE, load_inventory, save_inventory, save_products

PathLike = Union[str, "os.PathLike[str]"]

TABLE_HEADER = "|Codigo |Nome Produto      |Data Valid|Qtde Est.|Custo Med |Vlr Total"


class App:
    """The menu-driven stock control program."""

    def __init__(
        self,
        inventory: Inventory | None = None,
        screen: Screen | None = None,
        products_path: PathLike = PRODUCTS_FILE,
        movements_path: PathLike = MOVEMENTS_FILE,
    ) -> None:
        self.inventory = inventory if inventory is not None else Inventory()
        self.screen = screen if screen is not None else Screen()
        self.products_path = products_path
        self.movements_path = movements_path

    def save(self) -> None:
        """Write products and movements to their files."""
        save_inventory(self.inventory, self.products_path, self.movements_path)

    def _save_products(self) -> None:
        save_products(self.inventory, self.products_path)

    def _message(self, x: int, y: int, text: str, wait: bool = False) -> None:
        self.screen.clear_body()
        self.screen.put(x, y, text)
        if wait:
            self.screen.wait_key()

    # menus

    def run(self) -> None:
        """Show the main menu until the user leaves, then save."""
        s = self.screen
        try:
            while True:
                s.draw_frame()
                choice = self._main_menu()
                if choice == 1:
                    self._product_menu()
                elif choice == 2:
                    self._movement_menu()
                elif choice == 3:
                    return
                s.put(1, 21, "Voltar ao menu (1-Sim 2-Nao)..:" + " " * 24)
                if s.read_int(33, 21) != 1:
                    return
        except EOFError:
            pass
        finally:
            self.save()
            s.move(1, 24)

    def _main_menu(self) -> int:
        s = self.screen
        s.clear_body()
        s.put(22, 8, "1- Menu Cadastro do Produto")
        s.put(22, 10, "2- Menu movimentacao de Estoque")
        s.put(22, 12, "3- Finalizar o programa")
        s.put(1, 21, "Digite sua resposta....")
        return s.read_int(24, 21)

    def _product_menu(self) -> None:
        s = self.screen
        s.clear_body()
        s.put(25, 8, "1- Cadastrar Produto.:")
        s.put(25, 10, "2- Consultar Produto.:")
        s.put(25, 12, "3- Editar Produto....:")
        s.put(25, 14, "4- Excluir Produto...:")
        s.put(25, 16, "5- Voltar ao Menu....:")
        s.put(1, 21, "Digite sua resposta..:" + " " * 29)
        actions = {
            1: self.register_product,
            2: self.query_products,
            3: self.edit_product,
            4: self.delete_product,
            5: self.save,
        }
        action = actions.get(s.read_int(24, 21))
        if action is None:
            s.put(25, 18, "Opcao Invalida!")
        else:
            action()

    def _movement_menu(self) -> None:
        s = self.screen
        s.clear_body()
        s.put(22, 8, "1- Cadastra Movimentacao de Estoque")
        s.put(22, 10, "2- Lista Movimentacao de Estoque")
        s.put(22, 12, "3- Retornar ao Menu Principal")
        s.put(1, 21, "Digite sua opcao..: ")
        choice = s.read_int(21, 21)
        if choice == 1:
            self.register_movement()
        elif choice == 2:
            self.list_movements()
        elif choice != 3:
            s.put(25, 12, "Opcao Invalida!")
            s.wait_key()

    # shared views

    def _show_totals(self, product: Product) -> None:
        s = self.screen
        s.put(18, 16, f"{product.quantity:.2f}")
        s.put(38, 16, f"{product.average_cost:.2f}")
        s.put(58, 16, f"{product.total_value:.2f}")

    def _show_product(self, product: Product) -> None:
        s = self.screen
        s.clear_body()
        s.put(25, 8, "--- DADOS DO PRODUTO ---")
        s.put(6, 11, f"Codigo............: {product.code}")
        s.put(6, 12, f"Nome..............: {product.name}")
        s.put(6, 13, f"Unidade de Medida.: {product.unit}")
        s.put(6, 14, f"Data de Validade..: {product.expiry}")
        s.put(6, 15, f"Quantidade Estoque: {product.quantity:.2f}")
        s.put(6, 16, f"Custo Medio.......: R$ {product.average_cost:.2f}")
        s.put(6, 17, f"Valor Total.......: R$ {product.total_value:.2f}")

    def _list_names(self, x: int, title: str) -> None:
        s = self.screen
        s.clear_body()
        s.put(x, 6, title)
        s.put(2, 8, "Produtos Cadastrados:")
        line = 10
        for product in self.inventory:
            s.put(4, line, f"Codigo: {product.code:<4d} | Nome: {product.name}")
            line += 1
            if line > 18:
                s.put(1, 22, "Pressione qualquer tecla para ver mais...")
                s.wait_key()
                s.clear_body()
                s.put(x, 6, title)
                s.put(2, 8, "Produtos Cadastrados (continuacao):")
                line = 10

    def _show_table(self) -> None:
        s = self.screen
        s.clear_body()
        s.put(1, 6, TABLE_HEADER)
        row = 1
        for p in self.inventory:
            s.put(
                1,
                6 + row,
                f"|{p.code:<7d}|{p.name:<18}|{p.expiry:<10}|{p.quantity:<9.2f}"
                f"|R$ {p.average_cost:<7.2f}|R$ {p.total_value:.2f}",
            )
            row += 1
            if row >= 14:
                s.put(1, 21, "Pressione ENTER para a proxima pagina")
                s.wait_key()
                row = 1
                s.clear_body()
                s.put(1, 6, TABLE_HEADER)
        s.put(1, 22, "Pressione qualquer tecla para continuar.")
        s.wait_key()

    # product operations

    def _read_placement(self) -> tuple[Placement, int | None] | None:
        s = self.screen
        s.clear_body()
        s.put(25, 8, "1- Cadastrar no inicio")
        s.put(25, 10, "2- Cadastrar no meio")
        s.put(25, 12, "3- Cadastrar no final")
        s.put(1, 21, "Insira onde deseja cadastrar o produto...")
        option = s.read_int(43, 21)
        if option not in (1, 2, 3):
            return None
        placement = Placement(option)
        if placement is not Placement.MIDDLE:
            return placement, None
        size = len(self.inventory)
        while True:
            s.put(1, 21, f"Em qual posicao deseja cadastrar? (Max {size})...")
            position = s.read_int(47, 21)
            if 1 < position <= size:
                return placement, position
            s.clear_body()
            s.put(24, 12, "Posicao invalida!")

    def register_product(self) -> None:
        """Ask for new products and add them to the list."""
        s = self.screen
        while True:
            s.draw_product_form()
            s.put(8, 6, f"Id produto......:{self.inventory.next_code}")
            name = s.read_line(34, 8, NAME_SIZE)
            unit = s.read_line(34, 10, UNIT_SIZE)
            expiry = s.read_line(34, 12, DATE_SIZE)
            product = self.inventory.new_product(name, unit, expiry)
            self._show_totals(product)
            s.put(1, 21, "Deseja cadastrar o produto (1-Sim 2-Nao)..:")
            if s.read_int(45, 21) == 1:
                if len(self.inventory) == 0:
                    choice: tuple[Placement, int | None] | None = (Placement.END, None)
                else:
                    choice = self._read_placement()
                if choice is None:
                    self._message(24, 12, "Opcao Invalida!")
                else:
                    self.inventory.add_product(product, *choice)
                    self._message(24, 12, "Cadastrado com sucesso!!")
                    self._save_products()
            s.put(1, 21, "Deseja cadastrar um novo produto? (1-Sim 2-Nao)..:")
            if s.read_int(52, 21) != 1:
                return

    def query_products(self) -> None:
        """Show one product by code, or the whole list by name or by code."""
        s = self.screen
        s.clear_body()
        if len(self.inventory) == 0:
            self._message(27, 12, "A LISTA ESTA VAZIA", wait=True)
            return
        s.put(25, 6, "*MENU CONSULTA*")
        s.put(22, 8, "1-Consultar por codigo")
        s.put(22, 10, "2-Ordem alfabetica")
        s.put(22, 12, "3-Ordem de codigo")
        s.put(1, 21, "Insira sua resposta....           ")
        choice = s.read_int(25, 21)
        if choice == 1:
            self._query_by_code()
        elif choice == 2:
            self.inventory.sort_by_name()
            self._show_table()
        elif choice == 3:
            self.inventory.sort_by_code()
            self._show_table()

    def _query_by_code(self) -> None:
        s = self.screen
        self._list_names(24, "** CONSULTA POR CODIGO **")
        s.put(1, 21, "Digite o codigo que deseja consultar em detalhes: ")
        code = s.read_int(51, 21)
        try:
            product = self.inventory.find(code)
        except ProductNotFoundError:
            self._message(24, 12, f"*PRODUTO COM CODIGO {code} NAO ENCONTRADO*", wait=True)
            return
        self._show_product(product)
        s.put(1, 21, "Pressione qualquer tecla para voltar ao menu...")
        s.wait_key()

    def edit_product(self) -> None:
        """Change the name, unit or expiry date of a product."""
        s = self.screen
        if len(self.inventory) == 0:
            self._message(20, 12, "A LISTA ESTA VAZIA. Nao ha produtos para editar.")
            return
        self._list_names(30, "** EDICAO DE PRODUTO **")
        s.put(1, 21, "Digite o codigo do produto que deseja editar: ")
        code = s.read_int(47, 21)
        try:
            product = self.inventory.find(code)
        except ProductNotFoundError:
            self._message(24, 12, f"* PRODUTO COM CODIGO {code} NAO ENCONTRADO *", wait=True)
            return
        self._show_product(product)
        s.put(1, 21, "Deseja editar este produto? (1-Sim / 2-Nao): ")
        if s.read_int(46, 21) != 1:
            return
        while True:
            s.clear_body()
            s.put(25, 6, f"* EDITANDO PRODUTO: {product.code} - {product.name} *")
            s.put(22, 9, "Qual campo deseja editar?")
            s.put(22, 11, "1- Nome do Produto")
            s.put(22, 12, "2- Unidade de Medida")
            s.put(22, 13, "3- Data de Validade")
            s.put(22, 14, "4- Editar Todos os Campos")
            s.put(22, 15, "5- Voltar")
            s.put(1, 21, "Digite sua opcao: ")
            option = s.read_int(19, 21)
            if option == 5:
                break
            if option == 1:
                s.clear_body()
                s.put(8, 10, "Digite o NOVO NOME: ")
                product.name = s.read_line(28, 10, NAME_SIZE)
                done = "Nome alterado com sucesso!"
            elif option == 2:
                s.clear_body()
                s.put(8, 10, "Digite a NOVA UNIDADE DE MEDIDA: ")
                product.unit = s.read_line(41, 10, UNIT_SIZE)
                done = "Unidade de medida alterada com sucesso!"
            elif option == 3:
                s.clear_body()
                s.put(8, 10, "Digite a NOVA DATA DE VALIDADE: ")
                product.expiry = s.read_line(40, 10, DATE_SIZE)
                done = "Data de validade alterada com sucesso!"
            elif option == 4:
                s.clear_body()
                s.put(8, 8, "Novo Nome........: ")
                product.name = s.read_line(27, 8, NAME_SIZE)
                s.put(8, 10, "Nova Un. Medida..: ")
                product.unit = s.read_line(27, 10, UNIT_SIZE)
                s.put(8, 12, "Nova Data Validade: ")
                product.expiry = s.read_line(28, 12, DATE_SIZE)
                done = "Todos os campos foram alterados!"
            else:
                s.put(20, 15, "Opcao invalida!")
                s.wait_key()
                continue
            s.put(1, 21, done)
            s.wait_key()
        self._save_products()

    def delete_product(self) -> None:
        """Remove a product after showing it and asking for confirmation."""
        s = self.screen
        if len(self.inventory) == 0:
            self._message(20, 12, "A lista esta vazia! Nao ha o que excluir.")
            return
        self._show_table()
        s.put(1, 22, "Insira qualquer tecla para continuar")
        while True:
            s.put(1, 21, "Digite o codigo do produto que deseja excluir:")
            code = s.read_int(49, 21)
            if code > 0:
                break
            self._message(24, 12, "Posicao invalida!")
        try:
            product = self.inventory.find(code)
        except ProductNotFoundError:
            s.put(24, 12, f"Produto com codigo {code} nao encontrado.")
            s.wait_key()
            return
        self._show_product(product)
        s.put(1, 21, "Deseja confirmar a exclusao (1-Sim 2-Nao)..:")
        if s.read_int(46, 21) != 1:
            self._message(24, 12, "Operacao cancelada pelo usuario.", wait=True)
            return
        self.inventory.remove(code)
        self._save_products()
        self._message(24, 12, "Produto excluido com sucesso!", wait=True)

    # movements

    def register_movement(self) -> None:
        """Record an entry or exit of stock for a product."""
        s = self.screen
        s.draw_movement_form()
        code = s.read_int(33, 6)
        try:
            product = self.inventory.find(code)
        except ProductNotFoundError:
            self._message(24, 18, "Produto nao encontrado!")
            return
        s.put(33, 7, product.name)
        self._show_totals(product)
        date = s.read_line(33, 8, DATE_SIZE)
        s.put(1, 21, "Digite S = Saida ou E = Entrada")
        kind = s.read_char(33, 9)
        s.put(1, 21, " " * 35)
        quantity = s.read_float(33, 10)
        movement = Movement(date=date, product_code=code, kind=kind, quantity=quantity)
        if not movement.is_exit():
            movement.unit_price = s.read_float(33, 11)
        try:
            self.inventory.register_movement(movement)
        except InsufficientStockError:
            self._message(24, 18, "Erro: Estoque insuficiente para retirada!")
            return
        s.put(33, 12, f"{product.total_value:.2f}")
        self._show_totals(product)
        self.save()
        s.put(1, 22, "Movimentacao registrada com sucesso! Pressione qualquer tecla...")
        s.wait_key()

    def list_movements(self) -> None:
        """Show the movement report, for all products or for one."""
        s = self.screen
        s.clear_body()
        if not self.inventory.movements:
            s.put(24, 12, "Nenhuma movimentacao registrada no sistema.")
            s.wait_key()
            return
        s.put(15, 8, "Deseja filtrar o relatorio por um produto?")
        s.put(15, 10, "1 - SIM, filtrar por codigo")
        s.put(15, 12, "2 - NAO, mostrar todas as movimentacoes")
        s.put(1, 21, "Digite sua opcao..: ")
        code: int | None = None
        title = "  SISTEMA DE CONTROLE DE ESTOQUE - CONSULTA DE MOVIMENTACAO GERAL"
        if s.read_int(21, 21) == 1:
            self._list_names(24, "** ESCOLHA UM PRODUTO ABAIXO **")
            s.put(1, 21, "Digite o codigo do produto a ser filtrado: ")
            code = s.read_int(44, 21)
            try:
                product = self.inventory.find(code)
            except ProductNotFoundError:
                self._message(
                    20, 12, f"ERRO: Produto com o codigo {code} nao foi encontrado.", wait=True
                )
                return
            title = f"  CONSULTA DE MOVIMENTACAO - PRODUTO: {code} ({product.name})"

        rows = ledger_rows(self.inventory.products, self.inventory.movements, code)
        pages = list(paginate(rows, PAGE_SIZE))
        for number, page in enumerate(pages, start=1):
            s.clear_body()
            s.put(1, 6, title)
            s.put(65, 7, f"Pagina {number}")
            s.put(1, 9, HEADER)
            s.put(1, 10, SEPARATOR)
            for offset, row in enumerate(page):
                s.put(1, 11 + offset, row.format())
            if number < len(pages):
                s.put(1, 22, "Pressione qualquer tecla para ir para a proxima pagina...")
            else:
                if not page:
                    s.put(15, 15, f"Nenhuma movimentacao encontrada para o produto {code or 0}.")
                s.put(1, 22, "Fim do relatorio. Pressione qualquer tecla para voltar ao menu.")
            s.wait_key()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the stock files, run the menus and save on the way out."""
    parser = argparse.ArgumentParser(prog="estoque", description="Stock control system.")
    parser.add_argument("--products", default=PRODUCTS_FILE, help="product file")
    parser.add_argument("--movements", default=MOVEMENTS_FILE, help="movement file")
    args = parser.parse_args(argv)
    inventory = load_inventory(args.products, args.movements)
    App(inventory, Screen(), args.products, args.movements).run()
    return 0