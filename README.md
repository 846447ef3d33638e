# libshelf

libshelf keeps a small catalogue of books and magazines. It stores them in a
plain text file and lets you add items, search them, and borrow and return
them.

## Installing

```
pip install .
```

## The interactive menu

```
libshelf
libshelf --file my_catalogue.txt
```

By default this opens the catalogue file `Library_Data.txt` in the current
directory. `--file` names another file. If the file cannot be opened, an
error message is printed to standard error and the catalogue starts out
empty. Then this menu is shown:

```
===== Library Menu =====
1. Add Book
2. Add Magazine
3. Search Item
4. Borrow Item
5. Return Item
6. Display All Items
0. Exit
Select option:
```

Each new item gets the next free numeric id. A search finds the items whose
title or author contains the keyword you enter, and case matters. The menu
reads a number from the start of each line. A line that does not start with a
number counts as `0`, and so does the end of input. Choosing `0` ends the
menu, and the catalogue is then written back to the file.

## Using it from Python

```python
from libshelf.system import LibrarySystem, AlreadyBorrowedError

with LibrarySystem("Library_Data.txt") as library:
    book = library.add_book("Dune", "Frank Herbert", "Science Fiction")
    library.add_magazine("Wired", "Various", 42)

    for item in library.search("Herbert"):
        print(item.describe())

    library.borrow(book.id)
    try:
        library.borrow(book.id)
    except AlreadyBorrowedError:
        print("Already borrowed.")
    library.return_item(book.id)

    print(len(library), [item.id for item in library])
```

`LibrarySystem` loads its file when it is created. The catalogue is saved when
the `with` block ends. To save at another time, call `save()`, or
`save(path)` to write to another file. `load(path)` appends the records of
another file. `find(item_id)` returns the item with that id.

The errors live in `libshelf.system`:

- `ItemNotFoundError` is raised when no item has the requested id.
- `AlreadyBorrowedError` is raised when you borrow an item that is already
  borrowed.
- `NotBorrowedError` is raised when you return an item that was not borrowed.

All three derive from `LibraryError`.

The item classes live in `libshelf.items`. `LibraryItem` is the abstract base
class, and `Book` (with a `genre`) and `Magazine` (with an `issue_number`)
derive from it. Each item has `title`, `author`, `id` and `is_borrowed`, a
`describe()` method that returns a one-line description, and
`to_file_string()`, which returns the item's line in the file.
`libshelf.system.parse_line(line)` turns one line back into an item. It
returns `None` for an unknown type. It raises `ValueError` if the id, or a
magazine's issue number, is not a number.

## File format

The file has one record per line, with the fields separated by commas:

```
Book,1,Dune,Frank Herbert,Science Fiction,0
Magazine,2, Wired, Various, 42, 0
```

The fields are:

1. the type
2. the id
3. the title
4. the author
5. the genre (for a book) or the issue number (for a magazine)
6. the borrowed flag (`1` or `0`)

Only a flag of exactly `1` counts as borrowed. Lines of an unknown type are
skipped, but their ids are still reserved.

Magazine records are written with a space after each comma after the id. When
such a line is read back, those spaces stay in the title and author. Because
the flag is then ` 1`, a borrowed magazine is read back as available. Fields
cannot contain commas.