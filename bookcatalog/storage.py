"""Saving, listing, importing and managing per-author binary book files."""

from __future__ import annotations

import os
from pathlib import Path

from bookcatalog.books import Book, decode_books, encode_book
from bookcatalog.catalog import Catalog


def author_filename(author: str) -> str:
    """Return the file name used for an author's saved books."""
    return f"{author}_books.bin"


def _author_path(author: str, directory: str | os.PathLike[str]) -> Path:
    return Path(directory) / author_filename(author)


def save_books_by_author(
    catalog: Catalog, author: str, directory: str | os.PathLike[str] = "."
) -> int:
    """Write every book by the author to their file; return how many were saved.

    When the author has no books, no file is left behind.
    """
    path = _author_path(author, directory)
    books = catalog.books_by_author(author)
    if not books:
        path.unlink(missing_ok=True)
        return 0
    path.write_bytes(b"".join(encode_book(book) for book in books))
    return len(books)


def delete_author_file(author: str, directory: str | os.PathLike[str] = ".") -> Path:
    """Delete the author's file and return its path."""
    path = _author_path(author, directory)
    path.unlink()
    return path


def rename_author_file(
    old_author: str, new_author: str, directory: str | os.PathLike[str] = "."
) -> Path:
    """Rename one author's file to another author's file name; return the new path."""
    new_path = _author_path(new_author, directory)
    _author_path(old_author, directory).replace(new_path)
    return new_path


def import_books_from_file(
    catalog: Catalog, path: str | os.PathLike[str], category_name: str
) -> int:
    """Add every book in the file to the named category; return how many were added."""
    books = list_books_in_file(path)
    for book in books:
        catalog.add_book(
            category_name, book.title, book.author, book.publisher, book.copies
        )
    return len(books)


def list_books_in_file(path: str | os.PathLike[str]) -> list[Book]:
    """Return the books stored in a binary file."""
    return list(decode_books(Path(path).read_bytes()))