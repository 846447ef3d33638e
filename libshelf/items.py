"""Library items: the abstract base and the book and magazine kinds."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class LibraryItem(ABC):
    """An item held by the library, identified by a unique id."""

    title: str
    author: str
    id: int
    is_borrowed: bool = field(default=False, kw_only=True)

    kind: ClassVar[str] = ""

    @property
    def _status(self) -> str:
        return "Borrowed" if self.is_borrowed else "Available"

    @property
    def _flag(self) -> str:
        return "1" if self.is_borrowed else "0"

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line, human-readable description of the item."""

    def serialize(self) -> str:
        """Return the serialization marker for the item."""
        return "Correct"

    @abstractmethod
    def to_file_string(self) -> str:
        """Return the item as one line of the library data file."""


@dataclass
class Book(LibraryItem):
    """A book, which carries a genre."""

    genre: str = ""

    kind: ClassVar[str] = "Book"

    def describe(self) -> str:
        return (
            f"Book [{self.id}] - Title: {self.title}, Author: {self.author}, "
            f"Genre: {self.genre}, Status: {self._status}"
        )

    def to_file_string(self) -> str:
        return (
            f"Book,{self.id},{self.title},{self.author},{self.genre},{self._flag}"
        )


@dataclass
class Magazine(LibraryItem):
    """A magazine, which carries an issue number."""

    issue_number: int = 0

    kind: ClassVar[str] = "Magazine"

    def describe(self) -> str:
        return (
            f"Magazine [{self.id}] - Title: {self.title}, Author: {self.author}, "
            f"Issue #: {self.issue_number}, Status: {self._status}"
        )

    def to_file_string(self) -> str:
        return (
            f"Magazine,{self.id}, {self.title}, {self.author}, "
            f"{self.issue_number}, {self._flag}"
        )