"""Fixed-layout text screen drawn with cursor positioning escapes."""

from __future__ import annotations

import sys
from typing import TextIO

WIDTH = 79
RULE = "=" * WIDTH
BLANK = " " * 74
TABLE_RULE = "+" + "-" * 64 + "+"
TABLE_HEAD = "|    QUANTIDADE     |      CUSTO MEDIO     |      VALOR TOTAL    |"
TABLE_ROW = "|                   |                      |                     |"

_CLEAR = "\x1b[2J\x1b[H"


class Screen:
    """A 79x24 console screen with a frame, a body area and input fields."""

    def __init__(self, out: TextIO | None = None, inp: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.inp = inp if inp is not None else sys.stdin

    def move(self, x: int, y: int) -> None:
        """Place the cursor at column x, row y (both counted from zero)."""
        self.out.write(f"\x1b[{y + 1};{x + 1}H")

    def put(self, x: int, y: int, text: str) -> None:
        """Write text starting at column x, row y."""
        self.move(x, y)
        self.out.write(text)
        self.out.flush()

    def draw_frame(self) -> None:
        """Clear the terminal and draw the border, title and separators."""
        self.out.write(_CLEAR)
        self.out.write(RULE + "\n")
        for _ in range(22):
            self.out.write("|" + " " * (WIDTH - 2) + "|\n")
        self.out.write(RULE + "\n")
        self.put(30, 2, "Sistema de Estoque")
        self.put(1, 1, "Autor.......Joao Carneiro")
        self.put(1, 2, "Autor.......Luan Araujo")
        self.put(1, 3, "Ano.........2025")
        self.put(0, 4, RULE)
        self.put(0, 20, RULE)

    def clear_body(self) -> None:
        """Blank the body area and the two message lines."""
        for y in range(5, 20):
            self.put(1, y, BLANK)
        self.put(1, 21, BLANK)
        self.put(1, 22, BLANK)

    def _draw_totals_table(self) -> None:
        self.put(6, 13, TABLE_RULE)
        self.put(6, 14, TABLE_HEAD)
        self.put(6, 15, TABLE_RULE)
        self.put(6, 16, TABLE_ROW)
        self.put(6, 17, TABLE_ROW)
        self.put(6, 18, TABLE_RULE)

    def draw_product_form(self) -> None:
        """Draw the labels and totals table of the product form."""
        self.clear_body()
        self.put(8, 8, "1- Descricao do produto..:")
        self.put(8, 10, "2- Unidade de medida.....:")
        self.put(8, 12, "3- Data de validade......:")
        self._draw_totals_table()

    def draw_movement_form(self) -> None:
        """Draw the labels and totals table of the movement form."""
        self.clear_body()
        labels = (
            "Codigo do Produto.......:",
            "Nome do Produto.........:",
            "Data Da Movimentacao....:",
            "Tipo de Movimentacao....:",
            "Quantidade..............:",
            "Valor Unitario..........:",
            "Valor Total.............:",
        )
        for y, label in enumerate(labels, start=6):
            self.put(6, y, label)
        self._draw_totals_table()

    def _readline(self) -> str:
        self.out.flush()
        line = self.inp.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_line(self, x: int, y: int, limit: int | None = None) -> str:
        """Read a line of text at a position, keeping at most limit - 1 characters."""
        self.move(x, y)
        text = self._readline()
        if limit is not None:
            text = text[: max(limit - 1, 0)]
        return text

    def _read_token(self, x: int, y: int) -> str:
        self.move(x, y)
        while True:
            parts = self._readline().split()
            if parts:
                return parts[0]

    def read_int(self, x: int, y: int) -> int:
        """Read a whole number at a position, asking again until one is given."""
        while True:
            try:
                return int(self._read_token(x, y))
            except ValueError:
                continue

    def read_float(self, x: int, y: int) -> float:
        """Read a decimal number at a position, asking again until one is given."""
        while True:
            try:
                return float(self._read_token(x, y).replace(",", "."))
            except ValueError:
                continue

    def read_char(self, x: int, y: int) -> str:
        """Read the first non-blank character typed at a position."""
        return self._read_token(x, y)[0]

    def wait_key(self) -> None:
        """Wait for the user to press Enter; returns quietly at end of input."""
        self.out.flush()
        self.inp.readline()