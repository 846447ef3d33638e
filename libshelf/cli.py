"""Interactive menu for the library."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .system import (
    DEFAULT_FILENAME,
    AlreadyBorrowedError,
    ItemNotFoundError,
    LibrarySystem,
    NotBorrowedError,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def menu_text() -> str:
    """Return the main menu shown before each choice."""
    return (
        "\n===== Library Menu =====\n"
        "1. Add Book\n"
        "2. Add Magazine\n"
        "3. Search Item\n"
        "4. Borrow Item\n"
        "5. Return Item\n"
        "6. Display All Items\n"
        "0. Exit\n"
        "Select option: "
    )


def _read_line(stdin: TextIO) -> str:
    return stdin.readline().removesuffix("\n")


def _read_int(stdin: TextIO) -> int:
    """Read a number the way a failed numeric read leaves zero."""
    match = _LEADING_INT.match(_read_line(stdin))
    return int(match.group(1)) if match else 0


def run(system: LibrarySystem, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user chooses to exit."""

    def ask(prompt: str) -> str:
        stdout.write(prompt)
        return _read_line(stdin)

    def ask_int(prompt: str) -> int:
        stdout.write(prompt)
        return _read_int(stdin)

    while True:
        stdout.write(menu_text())
        match _read_int(stdin):
            case 1:
                title = ask("Enter Title: ")
                author = ask("Enter Author: ")
                genre = ask("Enter Genre: ")
                system.add_book(title, author, genre)
                stdout.write("Book added.\n")
            case 2:
                title = ask("Enter Title: ")
                author = ask("Enter Author: ")
                issue = ask_int("Enter Issue Number: ")
                system.add_magazine(title, author, issue)
                stdout.write("Magazine added.\n")
            case 3:
                keyword = ask("Enter title or author to search: ")
                for item in system.search(keyword):
                    stdout.write(item.describe() + "\n")
            case 4:
                item_id = ask_int("Enter ID to borrow: ")
                try:
                    system.borrow(item_id)
                except ItemNotFoundError:
                    stdout.write("Item not found.\n")
                except AlreadyBorrowedError:
                    stdout.write("Already borrowed.\n")
                else:
                    stdout.write("Item borrowed.\n")
            case 5:
                item_id = ask_int("Enter ID to return: ")
                try:
                    system.return_item(item_id)
                except ItemNotFoundError:
                    stdout.write("Item not found.\n")
                except NotBorrowedError:
                    stdout.write("Item was not borrowed.\n")
                else:
                    stdout.write("Item returned.\n")
            case 6:
                for item in system:
                    stdout.write(item.describe() + "\n")
            case 0:
                stdout.write("Exiting...\n")
                return
            case _:
                stdout.write("Invalid option.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive library menu; the data file is saved on exit."""
    parser = argparse.ArgumentParser(prog="libshelf", description="Library manager")
    parser.add_argument(
        "--file", default=DEFAULT_FILENAME, help="library data file"
    )
    args = parser.parse_args(argv)
    with LibrarySystem(args.file) as system:
        run(system, sys.stdin, sys.stdout)
    return 0