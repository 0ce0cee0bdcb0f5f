"""Book records and their fixed-size binary encoding."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

FIELD_SIZE = 50
"""Size in bytes of each text field in a record, terminating NUL included."""

_RECORD = struct.Struct(f"<{FIELD_SIZE}s{FIELD_SIZE}s{FIELD_SIZE}s2xi4xQ")

RECORD_SIZE = _RECORD.size
"""Size in bytes of one encoded book record."""

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _check_text(field: str, value: str) -> None:
    if len(value.encode("utf-8")) >= FIELD_SIZE:
        raise ValueError(
            f"{field} must encode to fewer than {FIELD_SIZE} bytes: {value!r}"
        )
    if "\0" in value:
        raise ValueError(f"{field} must not contain NUL characters")


@dataclass
class Book:
    """A book held in the catalog."""

    title: str
    author: str
    publisher: str
    copies: int

    def __post_init__(self) -> None:
        _check_text("title", self.title)
        _check_text("author", self.author)
        _check_text("publisher", self.publisher)
        if not _INT32_MIN <= self.copies <= _INT32_MAX:
            raise ValueError(f"copies out of range: {self.copies}")


def encode_book(book: Book) -> bytes:
    """Encode a book as one fixed-size binary record."""
    return _RECORD.pack(
        book.title.encode("utf-8"),
        book.author.encode("utf-8"),
        book.publisher.encode("utf-8"),
        book.copies,
        0,
    )


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def decode_books(data: bytes) -> Iterator[Book]:
    """Yield the books stored in consecutive records; a trailing partial record is ignored."""
    whole = len(data) - len(data) % RECORD_SIZE
    for title, author, publisher, copies, _ in _RECORD.iter_unpack(data[:whole]):
        yield Book(
            _decode_text(title),
            _decode_text(author),
            _decode_text(publisher),
            copies,
        )


def delete_book(books: list[Book], title: str) -> Book | None:
    """Remove the first book with the given title; return it, or None if absent."""
    for index, book in enumerate(books):
        if book.title == title:
            return books.pop(index)
    return None


def delete_all_books(books: list[Book]) -> None:
    """Remove every book from the list."""
    books.clear()