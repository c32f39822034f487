# estoque

A small terminal stock-control program. It keeps a list of products and a
history of stock movements, and works out each product's weighted average
cost as stock comes in and goes out. The screens and prompts are in
Portuguese.

## Install

```
pip install .
```

## Run

```
estoque
estoque --products produtos.dat --movements Movimentacoes.dat
```

`--products` and `--movements` name the data files. They default to
`produtos.dat` and `Movimentacoes.dat` in the current directory.

The program draws a fixed 79x24 screen with ANSI cursor-positioning escapes,
so it needs a terminal that understands them. Input is read a line at a
time: every answer, including "press any key" pauses, is ended with Enter.
When input runs out, the program saves and exits.

The main menu offers:

1. **Product menu**: register, query, edit and delete products.
   - New products get sequential codes and start with zero stock, zero
     average cost and zero total value. When the list already has products,
     you choose to place the new one at the start, at the end, or in the
     middle, after the product at a position from 2 to the list length.
   - Query shows one product by code, or the whole list in alphabetical or
     code order. Sorting reorders the stored list.
   - Edit changes the name, the unit of measure, the expiry date, or all
     three.
   - Delete asks for a product code, shows the product and asks for
     confirmation.
2. **Movement menu**: record an entry (`E`) or an exit (`S`) for a product,
   or list the movement report. The report covers every movement or only one
   product's, eight rows to a page.
3. **Quit**: saves everything and exits.

An entry recomputes the average cost:

```
new cost = (cost * quantity + unit value * moved) / (quantity + moved)
```

An exit keeps the average cost, records a unit value of zero, and is refused
if there is not enough stock. After each movement the total value is
`quantity * average cost`.

## Data files

Both files are read at start-up. The product file is written after products
are registered, edited or deleted; both files are written after a movement is
recorded, from the product menu's "Voltar" option, and on exit.

The product file holds a little-endian 32-bit next-code counter followed by
fixed-size product records; the movement file holds fixed-size movement
records. Text is stored in fixed fields: names keep at most 49 characters,
units 9 and dates 10. A trailing partial record is ignored when loading, and
a missing file is treated as empty.

## Library use

The stock rules work without the terminal:

```python
from estoque.inventory import Inventory, Placement
from estoque.models import Movement, MovementKind

inv = Inventory()
product = inv.new_product("Rice", "kg", "31/12/2025")
inv.add_product(product, Placement.END, None)
inv.register_movement(Movement("01/06/2025", product.code, MovementKind.ENTRY, 10, 5.0))
```

- `estoque.models`: `Product`, `Movement` and `MovementKind`.
  `MovementKind.parse` reads `S`/`s` as an exit and anything else as an
  entry.
- `estoque.inventory`: `Inventory` with `new_product`, `add_product`, `find`,
  `remove`, `sort_by_code`, `sort_by_name` and `register_movement`. Failures
  raise `ProductNotFoundError`, `InsufficientStockError` or
  `InvalidPositionError`, all subclasses of `InventoryError`.
- `estoque.storage`: `load_inventory` and `save_inventory`, plus
  `load_products`, `save_products`, `load_movements` and `save_movements`.
- `estoque.ledger`: `ledger_rows` replays the movements from empty stock and
  yields a `LedgerRow` per movement, with the stock position right after it.
  Movements of products no longer listed are skipped. For exits the row's
  unit value is the average cost at that point. `LedgerRow.format` renders a
  report line and `paginate` splits rows into pages.
- `estoque.screen`: `Screen`, the text screen the menus draw on.
- `estoque.app`: `App`, the menus, and `main`, the `estoque` command.

## Tests

```
pip install .[test]
pytest
```