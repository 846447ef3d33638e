"""A small catalogue of books and magazines stored in a plain text file."""

__version__ = "0.1.0"
__all__ = ["items", "system", "cli"]