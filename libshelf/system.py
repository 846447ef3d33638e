"""The library's collection of items and its data file."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterator

from .items import Book, LibraryItem, Magazine

DEFAULT_FILENAME = "Library_Data.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class LibraryError(Exception):
    """Base class for library operation errors."""


class ItemNotFoundError(LibraryError):
    """No item has the requested id."""


class AlreadyBorrowedError(LibraryError):
    """The item is already borrowed."""


class NotBorrowedError(LibraryError):
    """The item was not borrowed."""


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _parse(line: str) -> tuple[int, LibraryItem | None]:
    fields = line.split(",", 5)
    fields += [""] * (6 - len(fields))
    kind, id_text, title, author, extra, borrowed_text = fields
    item_id = _to_int(id_text)
    borrowed = borrowed_text == "1"
    item: LibraryItem | None
    if kind == "Book":
        item = Book(title, author, item_id, extra, is_borrowed=borrowed)
    elif kind == "Magazine":
        item = Magazine(title, author, item_id, _to_int(extra), is_borrowed=borrowed)
    else:
        item = None
    return item_id, item


def parse_line(line: str) -> LibraryItem | None:
    """Parse one data-file line; return None for an unknown item kind.

    Raises ValueError when the id (or a magazine's issue number) is not a number.
    """
    return _parse(line)[1]


class LibrarySystem:
    """The library's items, loaded from and saved to a data file."""

    def __init__(self, filename: str | os.PathLike[str] = DEFAULT_FILENAME) -> None:
        self.filename = filename
        self._items: list[LibraryItem] = []
        self._next_id = 1
        try:
            self.load()
        except OSError:
            print(f"Error: Could not open file: {os.fspath(filename)}", file=sys.stderr)

    def __enter__(self) -> LibrarySystem:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()

    def __iter__(self) -> Iterator[LibraryItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def load(self, path: str | os.PathLike[str] | None = None) -> None:
        """Append the items stored in a data file (the system's file by default)."""
        target = self.filename if path is None else path
        with open(target, encoding="utf-8") as stream:
            for raw in stream:
                item_id, item = _parse(raw.removesuffix("\n"))
                if item is not None:
                    self._items.append(item)
                if item_id >= self._next_id:
                    self._next_id = item_id + 1

    def save(self, path: str | os.PathLike[str] | None = None) -> None:
        """Write every item to a data file (the system's file by default)."""
        target = self.filename if path is None else path
        with open(target, "w", encoding="utf-8") as stream:
            for item in self._items:
                stream.write(item.to_file_string() + "\n")

    def _take_id(self) -> int:
        item_id = self._next_id
        self._next_id += 1
        return item_id

    def add_book(self, title: str, author: str, genre: str) -> Book:
        """Add a new book under the next free id and return it."""
        book = Book(title, author, self._take_id(), genre)
        self._items.append(book)
        return book

    def add_magazine(self, title: str, author: str, issue_number: int) -> Magazine:
        """Add a new magazine under the next free id and return it."""
        magazine = Magazine(title, author, self._take_id(), issue_number)
        self._items.append(magazine)
        return magazine

    def search(self, keyword: str) -> list[LibraryItem]:
        """Return the items whose title or author contains the keyword."""
        return [
            item
            for item in self._items
            if keyword in item.title or keyword in item.author
        ]

    def find(self, item_id: int) -> LibraryItem:
        """Return the first item with the given id."""
        for item in self._items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(f"no item with id {item_id}")

    def borrow(self, item_id: int) -> LibraryItem:
        """Mark an available item as borrowed and return it."""
        item = self.find(item_id)
        if item.is_borrowed:
            raise AlreadyBorrowedError(f"item {item_id} is already borrowed")
        item.is_borrowed = True
        return item

    def return_item(self, item_id: int) -> LibraryItem:
        """Mark a borrowed item as available again and return it."""
        item = self.find(item_id)
        if not item.is_borrowed:
            raise NotBorrowedError(f"item {item_id} was not borrowed")
        item.is_borrowed = False
        return item