"""Categories that group books in the catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

from bookcatalog.books import FIELD_SIZE, Book


@dataclass
class Category:
    """A named category holding an ordered list of books."""

    name: str
    books: list[Book] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.name.encode("utf-8")) >= FIELD_SIZE:
            raise ValueError(
                f"category name must encode to fewer than {FIELD_SIZE} bytes: "
                f"{self.name!r}"
            )

    def books_number(self) -> int:
        """Return how many books the category holds."""
        return len(self.books)

    def append_book(self, book: Book) -> bool:
        """Add a book at the end of the category; return True once added."""
        self.books.append(book)
        return True