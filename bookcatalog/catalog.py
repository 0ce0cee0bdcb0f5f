"""An in-memory catalog of categories, each holding its books."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from bookcatalog.books import Book
from bookcatalog.categories import Category


@dataclass
class Catalog:
    """An ordered collection of categories."""

    categories: list[Category] = field(default_factory=list)

    def __iter__(self) -> Iterator[Category]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def add_category(self, name: str) -> Category:
        """Append a new, empty category and return it."""
        category = Category(name)
        self.categories.append(category)
        return category

    def search_category(self, name: str) -> Category | None:
        """Return the first category with the given name, or None."""
        return next((c for c in self.categories if c.name == name), None)

    def add_book(
        self,
        category_name: str,
        title: str,
        author: str,
        publisher: str,
        copies: int,
    ) -> Book:
        """Add a book to the named category, creating the category if needed."""
        book = Book(title, author, publisher, copies)
        category = self.search_category(category_name)
        if category is None:
            category = self.add_category(category_name)
        category.append_book(book)
        return book

    def _books(self) -> Iterator[Book]:
        for category in self.categories:
            yield from category.books

    def search_book_by_author(self, author: str) -> Book | None:
        """Return the first book by the given author, or None."""
        return next((b for b in self._books() if b.author == author), None)

    def search_book_by_title(self, title: str) -> Book | None:
        """Return the first book with the given title, or None."""
        return next((b for b in self._books() if b.title == title), None)

    def delete_category(self, name: str) -> Category | None:
        """Remove the first category with the given name; return it, or None."""
        for index, category in enumerate(self.categories):
            if category.name == name:
                return self.categories.pop(index)
        return None

    def delete_all_categories(self) -> None:
        """Remove every category and its books."""
        self.categories.clear()

    def books_by_author(self, author: str) -> list[Book]:
        """Return every book by the given author, in catalog order."""
        return [book for book in self._books() if book.author == author]