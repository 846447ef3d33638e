import pytest

from libshelf.items import Book, Magazine
from libshelf.system import (
    AlreadyBorrowedError,
    ItemNotFoundError,
    LibraryError,
    LibrarySystem,
    NotBorrowedError,
    parse_line,
)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "library.txt"


@pytest.fixture
def system(data_file):
    return LibrarySystem(data_file)


def test_missing_file_reports_and_starts_empty(data_file, capsys):
    lib = LibrarySystem(data_file)
    assert len(lib) == 0
    assert "Error: Could not open file:" in capsys.readouterr().err


def test_ids_are_sequential(system):
    first = system.add_book("Dune", "Herbert", "SF")
    second = system.add_magazine("Wired", "Staff", 5)
    assert (first.id, second.id) == (1, 2)
    assert [item.id for item in system] == [1, 2]


def test_book_round_trip(system, data_file):
    book = system.add_book("Dune", "Herbert", "SF")
    system.borrow(book.id)
    system.save()
    loaded = LibrarySystem(data_file)
    assert list(loaded) == [book]


def test_magazine_round_trip_keeps_file_format_quirks(system, data_file):
    mag = system.add_magazine("Wired", "Staff", 5)
    system.borrow(mag.id)
    system.save()
    (loaded,) = list(LibrarySystem(data_file))
    assert isinstance(loaded, Magazine)
    assert loaded.title == " " + mag.title
    assert loaded.author == " " + mag.author
    assert loaded.issue_number == mag.issue_number
    assert loaded.is_borrowed is False


def test_next_id_follows_loaded_ids(data_file):
    data_file.write_text("Book,5,T,A,G,0\nBook,2,U,B,H,1\n", encoding="utf-8")
    lib = LibrarySystem(data_file)
    assert len(lib) == 2
    assert lib.add_book("x", "y", "z").id == 6


def test_unknown_kind_is_skipped_but_advances_ids(data_file):
    data_file.write_text("Poster,9,T,A,G,0\n", encoding="utf-8")
    lib = LibrarySystem(data_file)
    assert len(lib) == 0
    assert lib.add_book("x", "y", "z").id == 10


def test_parse_line_book():
    book = parse_line("Book,3,Dune,Herbert,SF,1")
    assert book == Book("Dune", "Herbert", 3, "SF", is_borrowed=True)


def test_parse_line_unknown_kind():
    assert parse_line("Poster,1,a,b,c,0") is None


def test_parse_line_bad_id():
    with pytest.raises(ValueError):
        parse_line("Book,abc,Dune,Herbert,SF,0")


def test_parse_line_bad_issue():
    with pytest.raises(ValueError):
        parse_line("Magazine,1,T,A,x,0")


def test_search_title_or_author(system):
    dune = system.add_book("Dune", "Herbert", "SF")
    wired = system.add_magazine("Wired", "Staff", 1)
    assert system.search("Dun") == [dune]
    assert system.search("Sta") == [wired]
    assert system.search("dune") == []
    assert system.search("") == [dune, wired]


def test_borrow_and_return(system):
    book = system.add_book("Dune", "Herbert", "SF")
    assert system.borrow(book.id).is_borrowed is True
    with pytest.raises(AlreadyBorrowedError):
        system.borrow(book.id)
    assert system.return_item(book.id).is_borrowed is False
    with pytest.raises(NotBorrowedError):
        system.return_item(book.id)


def test_missing_item(system):
    with pytest.raises(ItemNotFoundError):
        system.find(42)
    with pytest.raises(LibraryError):
        system.borrow(42)
    with pytest.raises(LibraryError):
        system.return_item(42)


def test_context_manager_saves(data_file):
    with LibrarySystem(data_file) as lib:
        book = lib.add_book("Dune", "Herbert", "SF")
    assert data_file.read_text(encoding="utf-8") == book.to_file_string() + "\n"


def test_save_to_other_path(system, tmp_path):
    book = system.add_book("Dune", "Herbert", "SF")
    other = tmp_path / "other.txt"
    system.save(other)
    assert other.read_text(encoding="utf-8").splitlines() == [book.to_file_string()]