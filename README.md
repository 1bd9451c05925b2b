# estante

`estante` is a small interactive terminal program for keeping track of a
library's books. You can register titles, list the stock, look a book up by
its title, update or remove entries, and record loans and returns. The
prompts and messages are in Portuguese.

## Installing

```
pip install .
```

## Running

```
estante
```

`python -m estante.cli` starts the same program. The command takes no
options apart from `--help`.

The program clears the screen with the platform's `clear` or `cls` command,
then shows a banner and a numbered menu:

| Option | Action                                     |
|--------|--------------------------------------------|
| 1      | Register a book (title, author, quantity)  |
| 2      | List all books                             |
| 3      | Find a book by its exact title             |
| 4      | Update a book's title, author and quantity |
| 5      | Remove a book by ID                        |
| 6      | Lend a book by ID (lowers its quantity)    |
| 7      | Return a book by ID (raises its quantity)  |
| 0      | Quit                                       |

Blank lines in the input are skipped. When a number is asked for, such as an
ID or a quantity, anything that is not a whole number brings the same prompt
back. A menu choice that is not one of the options above shows an
"invalid option" message. After each action, type something and press Enter
to go back to the menu.

Choosing `0` prints `Saindo...` and ends the program with exit status 1.
If the input runs out, the program ends with status 0.

Each new book gets an ID one higher than the highest ID in the catalog. The
first book is `0`. A book whose quantity is zero cannot be lent.

## What it does not do

The catalog lives in memory only. Nothing is saved to disk, so every book is
lost when the program exits. There is no import or export, and a session
always starts with an empty catalog.

## Using the catalog from Python

```python
from estante.books import Catalog, OutOfStockError

catalog = Catalog()
book = catalog.add("Dom Casmurro", "Machado de Assis", 1)
catalog.lend(book.id)
try:
    catalog.lend(book.id)
except OutOfStockError:
    print("no copies left")
catalog.give_back(book.id)
print(catalog.find_by_title("Dom Casmurro").quantity)  # 1
```

`Catalog` keeps its `Book` records in the order they were added. You can
iterate over it and take its `len()`. Its methods are:

- `add(title, author, quantity)`
- `get(book_id)`
- `find_by_title(title)`
- `update(book_id, title, author, quantity)`
- `remove(book_id)`
- `lend(book_id)`
- `give_back(book_id)`

Each method returns the affected `Book`.

All errors derive from `CatalogError`:

- `get`, `find_by_title`, `update` and `remove` raise `EmptyCatalogError`
  when the catalog holds no books.
- Every method that looks a book up raises `BookNotFoundError` when no book
  has the given ID or title. On an empty catalog, `lend` and `give_back` also
  raise `BookNotFoundError`.
- `lend` raises `OutOfStockError` when the book has no copies left.

`estante.cli.run(catalog, stdin, stdout, clear)` drives the same menu over
any text streams. It returns the exit status described above.

## Running the tests

```
pip install ".[test]"
pytest
```